"""Build matrix models for axis expansion."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import ConfigDict, Field, field_validator, model_validator

from daxis.axis.validation import require_valid_variable_name
from daxis.core.errors import AxisConfigError
from daxis.models.base import DaxisBaseModel
from daxis.protocols import AxisProtocol


@dataclass(frozen=True)
class Combination:
    """One value per axis; each combination is one sub-build.

    Items keep axis order so the string form is stable, e.g. ``AXIS=1,OS=linux``.
    """

    items: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        return ",".join(f"{name}={value}" for name, value in self.items)

    def get(self, axis_name: str) -> str | None:
        for name, value in self.items:
            if name == axis_name:
                return value
        return None

    def to_dict(self) -> dict[str, str]:
        return dict(self.items)


@dataclass
class BuildMatrix:
    """Axes of a matrix and the combinations expanded from their values."""

    axes: list[AxisProtocol] = field(default_factory=list)
    combinations: list[Combination] = field(default_factory=list)
    # Values each axis had when this matrix was expanded, in axis order
    value_lists: list[tuple[str, ...]] = field(default_factory=list)

    @property
    def axis_values(self) -> dict[str, tuple[str, ...]]:
        """Values each axis contributed to the expansion."""
        return {
            axis.name: values
            for axis, values in zip(self.axes, self.value_lists, strict=True)
        }

    def __len__(self) -> int:
        return len(self.combinations)


class AxisType(str, Enum):
    """Kinds of axes a matrix file can declare."""

    DYNAMIC = "dynamic"
    TEXT = "text"


class AxisDefinition(DaxisBaseModel):
    """Single axis entry from a matrix definition file."""

    # Text axis values are used verbatim, including surrounding spaces
    model_config = ConfigDict(str_strip_whitespace=False)

    name: str = Field(min_length=1)
    type: AxisType = AxisType.DYNAMIC
    var_name: str | None = Field(default=None, alias="var-name")
    values: list[str] = Field(default_factory=list)

    @field_validator("name", "var_name", mode="before")
    @classmethod
    def strip_names(cls, v: Any) -> Any:
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def check_kind_fields(self) -> "AxisDefinition":
        """Dynamic axes need a variable name, text axes need values."""
        if self.type == AxisType.DYNAMIC:
            if self.values:
                raise ValueError(
                    f"Dynamic axis {self.name!r} takes its values from "
                    "var-name and cannot list values"
                )
            try:
                require_valid_variable_name(self.var_name)
            except AxisConfigError as e:
                raise ValueError(f"Dynamic axis {self.name!r}: {e}") from e
        elif not self.values:
            raise ValueError(f"Text axis {self.name!r} must list at least one value")
        return self


class MatrixYamlConfig(DaxisBaseModel):
    """Configuration parsed from a matrix definition YAML file."""

    axes: list[AxisDefinition] = Field(default_factory=list)

    @field_validator("axes", mode="before")
    @classmethod
    def default_axes(cls, v: Any) -> Any:
        # ``axes:`` with no entries parses as None
        return [] if v is None else v

    @field_validator("axes")
    @classmethod
    def check_unique_names(cls, v: list[AxisDefinition]) -> list[AxisDefinition]:
        seen: set[str] = set()
        for axis in v:
            if axis.name in seen:
                raise ValueError(f"Duplicate axis name: {axis.name!r}")
            seen.add(axis.name)
        return v
