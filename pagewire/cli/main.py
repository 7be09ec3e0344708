"""PageWire CLI - Typer-based command line interface."""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from pagewire.cli.commands import check_command, contracts_app, page_app
from pagewire.cli.utils import CLIContext
from pagewire.common.exceptions import ConfigurationError
from pagewire.config import WiringConfig

# Create main app and console
app = typer.Typer(
    name="pagewire",
    help="PageWire: contract-based state wiring for page components",
    no_args_is_help=True,
)
console = Console()


def configure_logging(level: str) -> None:
    """Route ``pagewire`` library logs to stderr through rich."""
    logger = logging.getLogger("pagewire")
    logger.setLevel(level)
    if not logger.handlers:
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


@app.callback()
def main_callback(
    ctx: typer.Context,
    catalog: Annotated[
        Path | None,
        typer.Option(
            "--catalog",
            "-c",
            help="Component catalog file (defaults to PAGEWIRE_CATALOG)",
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose output")
    ] = False,
):
    """
    PageWire CLI callback - sets up context for all commands.

    Reads configuration from the environment, applies command-line overrides
    and stores a CLIContext in ctx.obj. The contract registry is loaded
    lazily by the commands that need it.
    """
    try:
        config = WiringConfig.from_env().with_catalog(catalog)
    except ConfigurationError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from e

    configure_logging("DEBUG" if verbose else config.log_level)

    ctx.obj = CLIContext(console=console, verbose=verbose, config=config)


# Register command groups
app.add_typer(contracts_app)
app.add_typer(page_app)

# Register check command at top level
app.command(name="check")(check_command)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
