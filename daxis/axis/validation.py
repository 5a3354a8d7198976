"""Configuration-time checks for dynamic axis variable names."""

import os
import re
from collections.abc import Mapping
from enum import Enum

from pydantic import ConfigDict, Field

from daxis.core.errors import AxisConfigError
from daxis.models.base import DaxisBaseModel


NON_PORTABLE_PATTERN = re.compile(r"[^A-Za-z0-9_]+")


class Severity(str, Enum):
    """How a configuration form should present a check result."""

    OK = "ok"
    WARNING = "warning"
    ERROR = "error"


class NameStatus(str, Enum):
    """Classification of a candidate variable name."""

    INVALID = "invalid"
    SUSPICIOUS = "suspicious"
    UNRESOLVABLE = "unresolvable"
    RESOLVABLE = "resolvable"


class VariableNameCheck(DaxisBaseModel):
    """Result of checking a variable name for use by a dynamic axis."""

    # Previewed values are shown exactly as set
    model_config = ConfigDict(str_strip_whitespace=False)

    name: str
    status: NameStatus
    severity: Severity
    message: str
    current_value: str | None = Field(
        default=None,
        description="Value in this process's environment, for preview only",
    )

    @property
    def is_error(self) -> bool:
        return self.severity == Severity.ERROR


def check_variable_name(
    name: str | None, environ: Mapping[str, str] | None = None
) -> VariableNameCheck:
    """Classify a variable name for a dynamic axis configuration.

    The environment consulted is the one of the current process, not the
    environment of a build. A variable missing here may still be supplied by
    the build, so that case is only a warning.

    Args:
        name: Candidate variable name
        environ: Environment to preview the value from (defaults to os.environ)

    Returns:
        VariableNameCheck: Status, severity and message for the name
    """
    if not name:
        return VariableNameCheck(
            name="",
            status=NameStatus.INVALID,
            severity=Severity.ERROR,
            message="Environment variable name is required",
        )

    if NON_PORTABLE_PATTERN.search(name):
        return VariableNameCheck(
            name=name,
            status=NameStatus.SUSPICIOUS,
            severity=Severity.WARNING,
            message=(
                f"Variable name {name!r} contains characters other than letters, "
                "digits and underscore and may not be portable"
            ),
        )

    environ = os.environ if environ is None else environ
    content = environ.get(name)
    if content is None:
        return VariableNameCheck(
            name=name,
            status=NameStatus.UNRESOLVABLE,
            severity=Severity.WARNING,
            message=(
                f"Variable {name!r} is not set in the current environment; "
                "it must be provided by the build"
            ),
        )

    return VariableNameCheck(
        name=name,
        status=NameStatus.RESOLVABLE,
        severity=Severity.OK,
        message=f"Current value: {content}",
        current_value=content,
    )


def require_valid_variable_name(name: str | None) -> str:
    """Return ``name`` or raise if it cannot be used at all.

    Raises:
        AxisConfigError: If the name is empty
    """
    result = check_variable_name(name, environ={})
    if result.is_error:
        raise AxisConfigError(result.message)
    return result.name
