"""Exception hierarchy for daxis."""


class DaxisError(Exception):
    """Base class for all daxis errors."""


class ConfigError(DaxisError):
    """Invalid configuration supplied by the user or the host."""


class AxisConfigError(ConfigError):
    """Invalid axis definition (name, variable name or static values)."""


class MatrixDefinitionError(ConfigError):
    """Matrix definition file could not be read or is invalid."""


class EnvironmentUnavailableError(DaxisError):
    """An environment provider could not produce a snapshot.

    Raised by providers only. ``DynamicAxis.rebuild`` logs it and falls back
    to the default axis value instead of propagating it to the host.
    """
