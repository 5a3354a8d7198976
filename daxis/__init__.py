"""daxis - dynamic build-matrix axes resolved from environment variables."""

from importlib.metadata import distribution

from .axis import DEFAULT_AXIS_VALUE, DynamicAxis, TextAxis, check_variable_name
from .matrix import BuildMatrix, Combination, MatrixResolver


__version__ = distribution(__package__ or "daxis").version

__all__ = [
    "DEFAULT_AXIS_VALUE",
    "BuildMatrix",
    "Combination",
    "DynamicAxis",
    "MatrixResolver",
    "TextAxis",
    "__version__",
    "check_variable_name",
]
