"""Protocols for matrix axes and the environments they are rebuilt from."""

from collections.abc import Mapping
from typing import Protocol, TypeAlias, runtime_checkable


@runtime_checkable
class EnvironmentProviderProtocol(Protocol):
    """Source of the environment snapshot for one build execution."""

    def get_environment(self) -> Mapping[str, str]:
        """Return the environment for the current build.

        Raises:
            EnvironmentUnavailableError: If the snapshot cannot be obtained
        """
        ...


BuildEnvironment: TypeAlias = Mapping[str, str] | EnvironmentProviderProtocol | None


@runtime_checkable
class AxisProtocol(Protocol):
    """Capability interface a build host expects from every matrix axis."""

    @property
    def name(self) -> str:
        """Axis name, used as the key in matrix combinations."""
        ...

    def current_values(self) -> tuple[str, ...]:
        """Return the last resolved values without rebuilding."""
        ...

    def value_label(self) -> str:
        """Return the text shown to users in place of the value list."""
        ...

    def rebuild(self, environment: BuildEnvironment) -> tuple[str, ...]:
        """Recompute the values for a build and return them."""
        ...
