"""Main CLI application for daxis."""

import logging
import sys
from importlib.metadata import distribution
from typing import Annotated

import typer

from daxis.cli.decorators.error_handling import print_stack_trace_if_verbose
from daxis.config.settings import DaxisSettings, load_settings
from daxis.core.logging import setup_logging


__all__ = ["AppContext", "app", "main", "__version__"]


__version__ = distribution("daxis").version

logger = logging.getLogger(__name__)


class AppContext:
    """Application context for storing shared state."""

    def __init__(
        self,
        verbose: int = 0,
        log_file: str | None = None,
        settings: DaxisSettings | None = None,
    ):
        """Initialize AppContext.

        Args:
            verbose: Verbosity level
            log_file: Path to log file
            settings: Settings; loaded from the environment when omitted
        """
        self.verbose = verbose
        self.settings = settings or load_settings(log_file=log_file)
        self.log_file = log_file or (
            str(self.settings.log_file) if self.settings.log_file else None
        )


app = typer.Typer(
    name="daxis",
    help=f"""daxis v{__version__}

Resolve build-matrix axes whose values come from environment variables.

Common workflows:
  • Resolve values:   daxis resolve AXIS_VALUES -e AXIS_VALUES='1 "2 3"'
  • Check a name:     daxis check AXIS_VALUES
  • Expand a matrix:  daxis matrix expand matrix.yaml -e AXIS_VALUES='1 2 3'""",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v=INFO, -vv=DEBUG)",
        ),
    ] = 0,
    debug: Annotated[
        bool,
        typer.Option("--debug", help="Enable debug logging (equivalent to -vv)"),
    ] = False,
    log_file: Annotated[
        str | None, typer.Option("--log-file", help="Log to file")
    ] = None,
    version: Annotated[
        bool, typer.Option("--version", help="Show version and exit")
    ] = False,
) -> None:
    """daxis dynamic axis tool."""
    if version:
        print(f"daxis v{__version__}")
        raise typer.Exit()

    if ctx.invoked_subcommand is None:
        print(ctx.get_help())
        raise typer.Exit()

    app_context = AppContext(verbose=verbose, log_file=log_file)
    ctx.obj = app_context

    # CLI flags win over the configured log level
    if debug or verbose >= 2:
        log_level_name = "DEBUG"
    elif verbose == 1:
        log_level_name = "INFO"
    else:
        log_level_name = app_context.settings.log_level

    setup_logging(
        json_logs=app_context.settings.json_logs,
        log_level_name=log_level_name,
        log_file=app_context.log_file,
    )


def main() -> int:
    """Main CLI entry point."""
    exit_code = 0

    try:
        app()

    except SystemExit as e:
        exit_code = e.code if isinstance(e.code, int) else 0

    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        print_stack_trace_if_verbose()
        exit_code = 1

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
