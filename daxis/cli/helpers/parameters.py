"""Shared CLI parameter definitions and helpers."""

from typing import Annotated

import typer

from daxis.axis.environment import ProcessEnvironment, parse_env_assignments
from daxis.cli.app import AppContext
from daxis.core.errors import ConfigError


EnvAssignmentsOption = Annotated[
    list[str] | None,
    typer.Option(
        "-e",
        "--env",
        help="Build environment variable as KEY=VALUE (repeatable)",
    ),
]

NoInheritEnvOption = Annotated[
    bool,
    typer.Option(
        "--no-inherit-env",
        help="Start from an empty environment instead of the process environment",
    ),
]

OutputFormatOption = Annotated[
    str,
    typer.Option(
        "--output-format",
        "-o",
        help="Output format: text|json (table is also accepted by matrix commands)",
    ),
]


def build_environment(
    app_ctx: AppContext | None,
    assignments: list[str] | None,
    no_inherit: bool = False,
) -> ProcessEnvironment:
    """Create the build environment provider for a command.

    Raises:
        ConfigError: If an assignment is not KEY=VALUE
    """
    try:
        overrides = parse_env_assignments(assignments or [])
    except ValueError as e:
        raise ConfigError(str(e)) from e

    inherit = not no_inherit
    if inherit and app_ctx is not None:
        inherit = app_ctx.settings.inherit_environment

    return ProcessEnvironment(overrides=overrides, inherit=inherit)


def check_output_format(output_format: str, supported: tuple[str, ...]) -> str:
    """Normalize the output format or exit with an error."""
    normalized = output_format.lower()
    if normalized not in supported:
        typer.echo(
            f"Error: Unknown format '{output_format}'. "
            f"Supported formats: {', '.join(supported)}",
            err=True,
        )
        raise typer.Exit(1)
    return normalized
