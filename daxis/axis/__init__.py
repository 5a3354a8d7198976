"""Matrix axes: dynamic (environment driven) and static text axes."""

from daxis.axis.dynamic_axis import DEFAULT_AXIS_VALUE, DynamicAxis
from daxis.axis.environment import (
    MappingEnvironment,
    ProcessEnvironment,
    parse_env_assignments,
)
from daxis.axis.text_axis import TextAxis
from daxis.axis.tokenizer import tokenize_axis_values
from daxis.axis.validation import (
    NameStatus,
    Severity,
    VariableNameCheck,
    check_variable_name,
    require_valid_variable_name,
)


__all__ = [
    "DEFAULT_AXIS_VALUE",
    "DynamicAxis",
    "MappingEnvironment",
    "NameStatus",
    "ProcessEnvironment",
    "Severity",
    "TextAxis",
    "VariableNameCheck",
    "check_variable_name",
    "parse_env_assignments",
    "require_valid_variable_name",
    "tokenize_axis_values",
]
