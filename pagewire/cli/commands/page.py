"""Page wiring command group."""

import asyncio
from dataclasses import replace
from pathlib import Path
from typing import Annotated

import typer

from pagewire.cli.utils import handle_cli_errors
from pagewire.contracts import analyze_page_state, build_validation_result, find_compatible_components
from pagewire.models import BindingWarning, PageStateAnalysis

page_app = typer.Typer(
    name="page",
    help="Analyze and validate page wiring",
    no_args_is_help=True,
)

PageFileArgument = Annotated[
    Path, typer.Argument(help="Page definition file (YAML or JSON)")
]
JsonOption = Annotated[bool, typer.Option("--json", help="Output in JSON format")]


def shadowing_warnings(analysis: PageStateAnalysis) -> list[BindingWarning]:
    """One warning per provider whose namespace a later placement overwrites."""
    return [
        BindingWarning(
            placement_id=shadowed.provider.placement_id,
            component_key=shadowed.provider.component_key,
            message=(
                f'Provides "{shadowed.namespace}" but is overridden by '
                f'placement "{shadowed.overridden_by}"'
            ),
        )
        for shadowed in analysis.shadowed_providers
    ]


@page_app.command("analyze")
@handle_cli_errors("Failed to analyze page")
def analyze_command(
    ctx: typer.Context,
    page_file: PageFileArgument,
    json_output: JsonOption = False,
):
    """Show which namespaces a page provides and how each consume is answered."""
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    registry = cli_ctx.load_registry()
    page = cli_ctx.load_page(page_file)

    analysis = asyncio.run(analyze_page_state(registry, page.placements))
    cli_ctx.printer.print_analysis(analysis)


@page_app.command("validate")
@handle_cli_errors("Failed to validate page")
def validate_command(
    ctx: typer.Context,
    page_file: PageFileArgument,
    json_output: JsonOption = False,
):
    """
    Validate all bindings of a page.

    Exits with code 1 when a consume has no provider or an incompatible one.
    With PAGEWIRE_STRICT set, shadowed providers fail validation too.
    """
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    registry = cli_ctx.load_registry()
    page = cli_ctx.load_page(page_file)

    analysis = asyncio.run(analyze_page_state(registry, page.placements))
    result = build_validation_result(analysis)
    warnings = result.warnings + shadowing_warnings(analysis)
    valid = result.valid and not (cli_ctx.config.strict and warnings)
    result = replace(result, valid=valid, warnings=warnings)

    cli_ctx.printer.print_validation(result, page.id)

    if not result.valid:
        raise typer.Exit(code=1)


@page_app.command("suggest")
@handle_cli_errors("Failed to suggest components")
def suggest_command(
    ctx: typer.Context,
    page_file: PageFileArgument,
    exclude_present: Annotated[
        bool,
        typer.Option(
            "--exclude-present",
            help="Leave out components that are already placed on the page",
        ),
    ] = False,
    show_all: Annotated[
        bool,
        typer.Option(
            "--all",
            help="Also list components that would not help this page",
        ),
    ] = False,
    json_output: JsonOption = False,
):
    """
    Suggest components to add to a page.

    By default only useful components are listed: those that provide a
    missing namespace, or whose own consumes the page already satisfies.
    """
    cli_ctx = ctx.obj
    cli_ctx.set_json_mode(json_output)

    registry = cli_ctx.load_registry()
    page = cli_ctx.load_page(page_file)

    exclude_keys = page.component_keys if exclude_present else []
    analysis = asyncio.run(analyze_page_state(registry, page.placements))
    suggestions = asyncio.run(find_compatible_components(registry, analysis, exclude_keys))
    if not show_all:
        suggestions = [s for s in suggestions if s.is_useful]

    cli_ctx.printer.print_suggestions(suggestions)
