"""CLI command modules."""

import typer

from daxis.cli.commands.axis import register_commands as register_axis_commands
from daxis.cli.commands.matrix import register_commands as register_matrix_commands


def register_all_commands(app: typer.Typer) -> None:
    """Register all CLI commands with the main app.

    Args:
        app: The main Typer app
    """
    register_axis_commands(app)
    register_matrix_commands(app)
