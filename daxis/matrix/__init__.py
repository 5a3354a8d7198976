"""Build matrix definition and expansion."""

from daxis.matrix.matrix_resolver import MatrixResolver, create_matrix_resolver
from daxis.matrix.models import (
    AxisDefinition,
    AxisType,
    BuildMatrix,
    Combination,
    MatrixYamlConfig,
)


__all__: list[str] = [
    "AxisDefinition",
    "AxisType",
    "BuildMatrix",
    "Combination",
    "MatrixResolver",
    "MatrixYamlConfig",
    "create_matrix_resolver",
]
