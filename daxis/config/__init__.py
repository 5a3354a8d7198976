"""Configuration management for daxis."""

from daxis.config.settings import DaxisSettings, load_settings


__all__ = ["DaxisSettings", "load_settings"]
