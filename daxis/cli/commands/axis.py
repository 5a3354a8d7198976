"""Axis commands: resolve a dynamic axis and check variable names."""

import json
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.text import Text

from daxis.axis.dynamic_axis import DynamicAxis
from daxis.axis.validation import Severity, check_variable_name
from daxis.cli.app import AppContext
from daxis.cli.decorators import handle_errors
from daxis.cli.helpers.parameters import (
    EnvAssignmentsOption,
    NoInheritEnvOption,
    OutputFormatOption,
    build_environment,
    check_output_format,
)


logger = logging.getLogger(__name__)

SEVERITY_STYLES = {
    Severity.OK: "green",
    Severity.WARNING: "yellow",
    Severity.ERROR: "bold red",
}


@handle_errors
def resolve_command(
    ctx: typer.Context,
    var_name: Annotated[
        str, typer.Argument(help="Environment variable holding the axis values")
    ],
    env: EnvAssignmentsOption = None,
    no_inherit_env: NoInheritEnvOption = False,
    output_format: OutputFormatOption = "text",
) -> None:
    """Resolve the axis values of an environment variable.

    Values are split like a shell command line, so quoted values may contain
    spaces. Prints "default" when the variable is unset or empty.
    """
    output_format = check_output_format(output_format, ("text", "json"))
    app_ctx: AppContext | None = ctx.obj

    environment = build_environment(app_ctx, env, no_inherit_env)
    axis = DynamicAxis(var_name, var_name)
    values = axis.rebuild(environment)
    logger.debug("Resolved %d values for %s", len(values), var_name)

    if output_format == "json":
        print(json.dumps({"var_name": axis.value_label(), "values": list(values)}))
    else:
        for value in values:
            print(value)


@handle_errors
def check_command(
    ctx: typer.Context,
    var_name: Annotated[str, typer.Argument(help="Variable name to check")],
    output_format: OutputFormatOption = "text",
) -> None:
    """Check whether a variable name can be used by a dynamic axis.

    Exits with status 1 when the name is empty. A name that is not set in the
    current environment is only a warning, since builds supply their own
    environment.
    """
    output_format = check_output_format(output_format, ("text", "json"))
    result = check_variable_name(var_name)

    if output_format == "json":
        print(json.dumps(result.to_dict_full()))
    else:
        console = Console()
        severity = Severity(result.severity)
        console.print(
            Text.assemble(
                (severity.value.upper(), SEVERITY_STYLES[severity]),
                " ",
                result.message,
            )
        )

    if result.is_error:
        raise typer.Exit(1)


def register_commands(app: typer.Typer) -> None:
    """Register axis commands with the main app.

    Args:
        app: The main Typer app
    """
    app.command(name="resolve")(resolve_command)
    app.command(name="check")(check_command)
