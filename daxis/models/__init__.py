"""Shared model base classes."""

from daxis.models.base import DaxisBaseModel


__all__ = ["DaxisBaseModel"]
