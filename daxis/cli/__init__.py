"""Command line interface for daxis."""

from daxis.cli.app import AppContext, app, main
from daxis.cli.commands import register_all_commands


register_all_commands(app)

__all__ = ["AppContext", "app", "main"]
