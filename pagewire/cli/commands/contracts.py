"""Contract inspection command group."""

from typing import Annotated

import typer

from pagewire.cli.utils import handle_cli_errors
from pagewire.common.exceptions import RegistryError

contracts_app = typer.Typer(
    name="contracts",
    help="Inspect component contracts in the catalog",
    no_args_is_help=True,
)


@contracts_app.command("list")
@handle_cli_errors("Failed to load contracts")
def list_command(
    ctx: typer.Context,
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """List every component with a contract and the namespaces it uses."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    registry = cli_ctx.load_registry()
    cli_ctx.printer.print_contract_table(
        registry.get_all_contracts(), registry.load_failures
    )


@contracts_app.command("show")
@handle_cli_errors("Failed to show contract")
def show_command(
    ctx: typer.Context,
    component_key: Annotated[str, typer.Argument(help="Component key in the catalog")],
    json_output: Annotated[
        bool, typer.Option("--json", help="Output in JSON format")
    ] = False,
):
    """Show the provides and consumes schemas of one component."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    registry = cli_ctx.load_registry()
    entry = registry.get_entry(component_key)
    if entry is None:
        if component_key in registry.catalog:
            raise RegistryError(
                f"Component '{component_key}' has no contract", component_key=component_key
            )
        raise RegistryError(
            f"Unknown component '{component_key}'. "
            f"Available: {', '.join(registry.catalog.keys()) or '(none)'}",
            component_key=component_key,
        )

    cli_ctx.printer.print_contract(entry)
