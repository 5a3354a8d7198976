"""Matrix axis with a fixed list of values."""

from collections.abc import Iterable

from daxis.core.errors import AxisConfigError
from daxis.protocols import BuildEnvironment


class TextAxis:
    """Axis whose values are configured up front and never change."""

    def __init__(self, name: str, values: Iterable[str]) -> None:
        self._name = name
        self._values = tuple(values)
        if not self._values:
            raise AxisConfigError(f"Axis {name!r} must have at least one value")

    def __repr__(self) -> str:
        return f"TextAxis(name={self._name!r}, values={list(self._values)!r})"

    @property
    def name(self) -> str:
        return self._name

    def current_values(self) -> tuple[str, ...]:
        return self._values

    def value_label(self) -> str:
        return " ".join(self._values)

    def rebuild(self, environment: BuildEnvironment) -> tuple[str, ...]:
        # Static values, the build environment is not consulted
        return self._values
