"""Core infrastructure: errors and logging."""

from daxis.core.errors import (
    AxisConfigError,
    ConfigError,
    DaxisError,
    EnvironmentUnavailableError,
    MatrixDefinitionError,
)


__all__ = [
    "AxisConfigError",
    "ConfigError",
    "DaxisError",
    "EnvironmentUnavailableError",
    "MatrixDefinitionError",
]
