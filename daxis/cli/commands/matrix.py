"""Matrix commands: expand a matrix definition for a build environment."""

import json
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from daxis.cli.app import AppContext
from daxis.cli.decorators import handle_errors
from daxis.cli.helpers.parameters import (
    EnvAssignmentsOption,
    NoInheritEnvOption,
    OutputFormatOption,
    build_environment,
    check_output_format,
)
from daxis.core.structlog_logger import get_struct_logger_with_context
from daxis.matrix import BuildMatrix, create_matrix_resolver


matrix_app = typer.Typer(
    name="matrix",
    help="""Build matrix commands.

Load a matrix definition (YAML list of text and dynamic axes) and expand it
into combinations, one per sub-build.""",
    no_args_is_help=True,
)


def _print_matrix_table(matrix: BuildMatrix) -> None:
    console = Console()
    table = Table(
        title=f"Build matrix ({len(matrix)} combinations)",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("#", style="dim", justify="right")
    for axis in matrix.axes:
        table.add_column(axis.name, style="cyan")

    for index, combination in enumerate(matrix.combinations, start=1):
        table.add_row(str(index), *(value for _, value in combination.items))

    console.print(table)


def _print_matrix_text(matrix: BuildMatrix) -> None:
    for combination in matrix.combinations:
        print(combination)


def _matrix_to_dict(matrix: BuildMatrix) -> dict[str, object]:
    return {
        "axes": [
            {
                "name": axis.name,
                "label": axis.value_label(),
                "values": list(values),
            }
            for axis, values in zip(
                matrix.axes, matrix.axis_values.values(), strict=True
            )
        ],
        "combinations": [c.to_dict() for c in matrix.combinations],
    }


@matrix_app.command(name="expand")
@handle_errors
def expand_command(
    ctx: typer.Context,
    matrix_file: Annotated[
        Path, typer.Argument(help="Matrix definition YAML file")
    ],
    env: EnvAssignmentsOption = None,
    no_inherit_env: NoInheritEnvOption = False,
    output_format: OutputFormatOption = "table",
) -> None:
    """Expand a matrix definition into build combinations.

    Formats:
    - table: Rich table of combinations (default)
    - json: Axes, their values and the combinations as JSON
    - text: One AXIS=value,... line per combination
    """
    output_format = check_output_format(output_format, ("table", "json", "text"))
    app_ctx: AppContext | None = ctx.obj
    logger = get_struct_logger_with_context(__name__, matrix_file=str(matrix_file))

    environment = build_environment(app_ctx, env, no_inherit_env)
    resolver = create_matrix_resolver()
    matrix = resolver.resolve_from_matrix_yaml(matrix_file, environment)
    logger.debug("matrix_expanded", combinations=len(matrix))

    if output_format == "json":
        print(json.dumps(_matrix_to_dict(matrix)))
    elif output_format == "text":
        _print_matrix_text(matrix)
    else:
        _print_matrix_table(matrix)


def register_commands(app: typer.Typer) -> None:
    """Register matrix commands with the main app.

    Args:
        app: The main Typer app
    """
    app.add_typer(matrix_app, name="matrix")
