"""Build matrix resolver: load axis definitions and expand combinations."""

import itertools
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from daxis.axis.dynamic_axis import DynamicAxis
from daxis.axis.text_axis import TextAxis
from daxis.core.errors import MatrixDefinitionError
from daxis.matrix.models import (
    AxisDefinition,
    AxisType,
    BuildMatrix,
    Combination,
    MatrixYamlConfig,
)
from daxis.protocols import AxisProtocol, BuildEnvironment


logger = logging.getLogger(__name__)


class MatrixResolver:
    """Resolve a build matrix from axis definitions and a build environment.

    Every axis is rebuilt against the build environment before expansion, so
    dynamic axes contribute the values of their source variable for this
    build. Combinations are the cartesian product of the axis values in axis
    order, first axis varying slowest.
    """

    def __init__(self) -> None:
        """Initialize matrix resolver."""
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def load_axes(self, matrix_yaml_path: Path) -> list[AxisProtocol]:
        """Parse a matrix definition file into axes.

        Args:
            matrix_yaml_path: Path to the matrix YAML file

        Returns:
            list[AxisProtocol]: Axes in file order

        Raises:
            MatrixDefinitionError: If the file cannot be read or is invalid
        """
        try:
            self.logger.debug("Parsing matrix definition from %s", matrix_yaml_path)
            raw_config = self._load_matrix_yaml(matrix_yaml_path)
            config = MatrixYamlConfig.model_validate(raw_config)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            msg = f"Failed to parse matrix definition {matrix_yaml_path}: {e}"
            self.logger.error(msg)
            raise MatrixDefinitionError(msg) from e

        return self.axes_from_config(config)

    def axes_from_config(self, config: MatrixYamlConfig) -> list[AxisProtocol]:
        """Create axis instances from validated configuration."""
        axes = [self._create_axis(definition) for definition in config.axes]
        self.logger.debug("Created %d axes", len(axes))
        return axes

    def expand(
        self, axes: Sequence[AxisProtocol], environment: BuildEnvironment
    ) -> BuildMatrix:
        """Rebuild every axis and expand the combinations for one build.

        Args:
            axes: Axes of the matrix
            environment: Build environment mapping or provider

        Returns:
            BuildMatrix: Axes and their combinations

        Raises:
            MatrixDefinitionError: If two axes share a name
        """
        self._check_unique_names(axes)

        value_lists: list[tuple[str, ...]] = []
        for axis in axes:
            values = axis.rebuild(environment)
            self.logger.debug("Axis %s rebuilt with %d values", axis.name, len(values))
            value_lists.append(values)

        names = [axis.name for axis in axes]
        combinations = [
            Combination(items=tuple(zip(names, values, strict=True)))
            for values in itertools.product(*value_lists)
        ]

        self.logger.info(
            "Expanded %d combinations from %d axes", len(combinations), len(axes)
        )
        return BuildMatrix(
            axes=list(axes), combinations=combinations, value_lists=value_lists
        )

    def resolve_from_matrix_yaml(
        self, matrix_yaml_path: Path, environment: BuildEnvironment
    ) -> BuildMatrix:
        """Load a matrix definition file and expand it for one build."""
        return self.expand(self.load_axes(matrix_yaml_path), environment)

    def _load_matrix_yaml(self, matrix_yaml_path: Path) -> dict[str, Any]:
        """Load and parse matrix YAML file.

        Raises:
            FileNotFoundError: If the file is not found
            yaml.YAMLError: If YAML parsing fails
        """
        with matrix_yaml_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise yaml.YAMLError(
                f"Expected a mapping at top level, got {type(data).__name__}"
            )
        return data

    def _create_axis(self, definition: AxisDefinition) -> AxisProtocol:
        if definition.type == AxisType.TEXT:
            return TextAxis(definition.name, definition.values)
        return DynamicAxis(definition.name, definition.var_name)

    def _check_unique_names(self, axes: Sequence[AxisProtocol]) -> None:
        seen: set[str] = set()
        for axis in axes:
            if axis.name in seen:
                msg = f"Duplicate axis name: {axis.name!r}"
                self.logger.error(msg)
                raise MatrixDefinitionError(msg)
            seen.add(axis.name)


def create_matrix_resolver() -> MatrixResolver:
    """Create matrix resolver instance.

    Returns:
        MatrixResolver: New matrix resolver
    """
    return MatrixResolver()
