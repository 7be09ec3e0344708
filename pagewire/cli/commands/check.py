"""Check command for comparing two schema documents."""

from pathlib import Path
from typing import Annotated

import typer

from pagewire.cli.utils import handle_cli_errors
from pagewire.contracts import check_schema_compatibility


@handle_cli_errors("Failed to check schemas")
def check_command(
    ctx: typer.Context,
    provides_file: Annotated[
        Path, typer.Argument(help="Schema document of the provided state")
    ],
    consumes_file: Annotated[
        Path, typer.Argument(help="Schema document the consumer expects")
    ],
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """
    Check whether a provided schema satisfies a consumed schema.

    Exits with code 1 when the schemas are not compatible.
    """
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    provides_schema = cli_ctx.load_schema(provides_file)
    consumes_schema = cli_ctx.load_schema(consumes_file)

    result = check_schema_compatibility(provides_schema, consumes_schema)
    cli_ctx.printer.print_compatibility(result)

    if not result.compatible:
        raise typer.Exit(code=1)
