"""Environment snapshot providers for axis rebuilds."""

import logging
import os
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from daxis.core.errors import EnvironmentUnavailableError


logger = logging.getLogger(__name__)


class MappingEnvironment:
    """Fixed environment supplied by the host as a mapping."""

    def __init__(self, variables: Mapping[str, str] | None = None) -> None:
        self._variables = MappingProxyType(dict(variables or {}))

    def get_environment(self) -> Mapping[str, str]:
        return self._variables


class ProcessEnvironment:
    """Snapshot of the current process environment plus overrides.

    The snapshot is taken on every ``get_environment`` call so each build sees
    the process environment as it is when the build starts.
    """

    def __init__(
        self,
        overrides: Mapping[str, str] | None = None,
        inherit: bool = True,
    ) -> None:
        self.overrides = dict(overrides or {})
        self.inherit = inherit

    def get_environment(self) -> Mapping[str, str]:
        variables: dict[str, str] = {}
        if self.inherit:
            try:
                variables.update(os.environ)
            except Exception as e:
                raise EnvironmentUnavailableError(
                    f"Failed to read process environment: {e}"
                ) from e
        variables.update(self.overrides)
        return MappingProxyType(variables)


def parse_env_assignments(assignments: Iterable[str]) -> dict[str, str]:
    """Parse ``KEY=VALUE`` strings into a dictionary.

    The value may contain further ``=`` characters and may be empty.

    Raises:
        ValueError: If an assignment has no ``=`` or an empty key
    """
    result: dict[str, str] = {}
    for assignment in assignments:
        key, sep, value = assignment.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {assignment!r}")
        result[key] = value
    logger.debug("Parsed %d environment overrides", len(result))
    return result
