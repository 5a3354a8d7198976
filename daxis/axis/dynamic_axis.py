"""Matrix axis whose values come from an environment variable at build time."""

import logging
import threading
from collections.abc import Mapping

from daxis.axis.tokenizer import tokenize_axis_values
from daxis.protocols import BuildEnvironment, EnvironmentProviderProtocol


logger = logging.getLogger(__name__)

DEFAULT_AXIS_VALUE = "default"


class DynamicAxis:
    """Axis resolved from a configured environment variable.

    The value list is recomputed by ``rebuild`` once per build from the
    build's environment and cached for ``current_values`` queries made outside
    a rebuild. The cache is never empty when read: if no values can be
    derived it holds the single value ``"default"``.
    """

    def __init__(self, name: str, var_name: str | None) -> None:
        """Initialize dynamic axis.

        Args:
            name: Axis name used in matrix combinations
            var_name: Name of the environment variable holding the values
        """
        self._name = name
        self._var_name = var_name
        self._values: list[str] = []
        self._lock = threading.Lock()

    def __repr__(self) -> str:
        return f"DynamicAxis(name={self._name!r}, var_name={self._var_name!r})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def var_name(self) -> str:
        return self._var_name or ""

    def current_values(self) -> tuple[str, ...]:
        """Return the values from the last rebuild.

        Returns:
            tuple[str, ...]: Snapshot of the cached values, never empty
        """
        with self._lock:
            if not self._values:
                self._values = [DEFAULT_AXIS_VALUE]
            return tuple(self._values)

    def value_label(self) -> str:
        """Return the configured variable name in place of a literal value list."""
        return self.var_name

    def rebuild(self, environment: BuildEnvironment) -> tuple[str, ...]:
        """Recompute the axis values from the build environment.

        Failures to obtain the environment or to read the variable are logged
        and treated as an absent variable so the build is never aborted by
        this axis.

        Args:
            environment: Environment mapping, provider, or None

        Returns:
            tuple[str, ...]: The new values, identical to the updated cache
        """
        # The environment is read without holding the lock: host providers may
        # query current_values while building it
        logger.debug("Rebuilding axis %s from variable %r", self._name, self._var_name)
        values = tokenize_axis_values(self._lookup(environment))
        if not values:
            values = [DEFAULT_AXIS_VALUE]
        with self._lock:
            self._values = values
            snapshot = tuple(values)
        logger.debug("Axis %s values: %s", self._name, values)
        return snapshot

    def _lookup(self, environment: BuildEnvironment) -> str | None:
        """Read the source variable, returning None when it cannot be read."""
        if not self._var_name or environment is None:
            return None

        try:
            if isinstance(environment, EnvironmentProviderProtocol):
                variables: Mapping[str, str] | None = environment.get_environment()
            else:
                variables = environment
            if variables is None:
                return None
            value = variables.get(self._var_name)
        except Exception as e:
            logger.error(
                "Failed to read variable %r for axis %s: %s",
                self._var_name,
                self._name,
                e,
            )
            return None

        if value is None:
            return None
        if not isinstance(value, str):
            logger.warning(
                "Variable %r for axis %s is not a string (%s), ignoring it",
                self._var_name,
                self._name,
                type(value).__name__,
            )
            return None

        logger.debug("Variable %r value is %r", self._var_name, value)
        return value
