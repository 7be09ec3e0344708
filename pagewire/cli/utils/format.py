"""Formatting utilities for CLI output.

This module turns registry entries, page analyses, validation results and
suggestions into strings ready for printing with rich. Nothing here prints
directly.
"""

from rich.markup import escape
from typing_extensions import TypedDict

from pagewire.models import (
    BindingValidationResult,
    CompatibilityResult,
    ComponentCompatibility,
    PageStateAnalysis,
    PropertyStatus,
)
from pagewire.models.registry import ContractEntry, LoadFailure

STATUS_MARKERS: dict[PropertyStatus, str] = {
    PropertyStatus.COMPATIBLE: "[green]✓[/green]",
    PropertyStatus.OPTIONAL_MISSING: "[dim]○[/dim]",
    PropertyStatus.MISSING: "[red]✗[/red]",
    PropertyStatus.INCOMPATIBLE: "[red]✗[/red]",
}


class ContractSummary(TypedDict):
    """Type definition for one row of the contracts listing."""

    component_key: str
    description: str
    provides: list[str]
    consumes: list[str]


class ContractFormatter:
    """Formatter for registry entries."""

    @staticmethod
    def build_summary(entry: ContractEntry) -> ContractSummary:
        return ContractSummary(
            component_key=entry.component_key,
            description=entry.description,
            provides=list(entry.contract.provides),
            consumes=list(entry.contract.consumes),
        )

    @staticmethod
    def format_entry(entry: ContractEntry) -> str:
        """Format a component contract with the schema of every namespace."""
        contract = entry.contract
        lines = [f"[bold cyan]{escape(entry.component_key)}[/bold cyan]"]
        if entry.description:
            lines.append(f"[dim]{escape(entry.description)}[/dim]")
        if contract.id != entry.component_key:
            lines.append(f"Contract id: {escape(contract.id)}")

        for title, schemas in (("Provides", contract.provides), ("Consumes", contract.consumes)):
            lines.append("")
            lines.append(f"[bold]{title}:[/bold]")
            if not schemas:
                lines.append("  [dim](none)[/dim]")
            for name, schema in schemas.items():
                lines.append(f"  {escape(name)}: {escape(schema.describe())}")

        return "\n".join(lines)

    @staticmethod
    def format_failures(failures: list[LoadFailure]) -> str:
        if not failures:
            return ""
        lines = ["[bold yellow]Contracts that failed to load:[/bold yellow]"]
        for failure in failures:
            lines.append(f"  ⚠ {escape(failure.component_key)}: {escape(failure.error)}")
        return "\n".join(lines)


class CompatibilityFormatter:
    """Formatter for schema compatibility results."""

    @staticmethod
    def format_result(result: CompatibilityResult, indent: str = "") -> str:
        color = "green" if result.compatible else "red"
        lines = [f"{indent}[{color}]{escape(result.summary)}[/{color}]"]
        for detail in result.details:
            marker = STATUS_MARKERS[detail.status]
            text = f"{indent}  {marker} {escape(detail.property)}"
            if detail.message:
                text += f" [dim]- {escape(detail.message)}[/dim]"
            lines.append(text)
        return "\n".join(lines)


class AnalysisFormatter:
    """Formatter for page state analyses."""

    @staticmethod
    def format_analysis(analysis: PageStateAnalysis) -> str:
        lines = ["[bold]Provided namespaces:[/bold]"]
        if not analysis.provided_namespaces:
            lines.append("  [dim](none)[/dim]")
        for namespace, provided in analysis.provided_namespaces.items():
            lines.append(
                f"  {escape(namespace)} ← {escape(provided.placement_id)} "
                f"({escape(provided.component_key)}): {escape(provided.schema.describe())}"
            )

        lines.append("")
        lines.append("[bold]Consumes:[/bold]")
        if not analysis.satisfied_consumes and not analysis.unsatisfied_consumes:
            lines.append("  [dim](none)[/dim]")
        for consume in analysis.satisfied_consumes:
            marker = "[green]✓[/green]" if consume.compatibility.compatible else "[red]✗[/red]"
            lines.append(
                f"  {marker} {escape(consume.consumer_placement_id)}.{escape(consume.consumer_logical_name)} "
                f"→ {escape(consume.namespace)} (from {escape(consume.provider_placement_id)})"
            )
            if not consume.compatibility.compatible:
                lines.append(CompatibilityFormatter.format_result(consume.compatibility, indent="      "))
        for missing in analysis.unsatisfied_consumes:
            lines.append(
                f"  [red]✗[/red] {escape(missing.placement_id)}.{escape(missing.logical_name)} "
                f"→ {escape(missing.namespace)} [red](no provider)[/red]"
            )

        if analysis.shadowed_providers:
            lines.append("")
            lines.append("[bold yellow]Shadowed providers:[/bold yellow]")
            for shadowed in analysis.shadowed_providers:
                lines.append(
                    f"  ⚠ {escape(shadowed.namespace)}: {escape(shadowed.provider.placement_id)} "
                    f"({escape(shadowed.provider.component_key)}) is overridden by "
                    f"{escape(shadowed.overridden_by)}"
                )

        lines.append("")
        if analysis.is_valid:
            lines.append("[green]✓ Every consume has a compatible provider[/green]")
        else:
            lines.append("[red]✗ Page has unsatisfied or incompatible consumes[/red]")
        return "\n".join(lines)


class ValidationFormatter:
    """Formatter for binding validation results."""

    @staticmethod
    def format_validation(result: BindingValidationResult) -> str:
        lines: list[str] = []
        if result.errors:
            lines.append(f"[bold red]Errors ({len(result.errors)}):[/bold red]")
            for i, error in enumerate(result.errors, 1):
                lines.append(
                    f"  {i}. {escape(f'[{error.type.value}]')} {escape(error.placement_id)}: {escape(error.message)}"
                )
                if error.details is not None:
                    lines.append(CompatibilityFormatter.format_result(error.details, indent="     "))

        if result.warnings:
            if lines:
                lines.append("")
            lines.append(f"[bold yellow]Warnings ({len(result.warnings)}):[/bold yellow]")
            for i, warning in enumerate(result.warnings, 1):
                lines.append(f"  {i}. {escape(warning.placement_id)}: {escape(warning.message)}")

        if not lines:
            lines.append("[green]✓ All bindings are valid[/green]")
        return "\n".join(lines)


class SuggestionFormatter:
    """Formatter for component suggestions."""

    @staticmethod
    def format_suggestion(suggestion: ComponentCompatibility) -> str:
        header = f"[bold cyan]{escape(suggestion.component_key)}[/bold cyan]"
        if suggestion.description:
            header += f" [dim]- {escape(suggestion.description)}[/dim]"
        if not suggestion.is_useful:
            header += " [dim](not useful here)[/dim]"
        lines = [header]

        for item in suggestion.can_satisfy_consumes:
            lines.append(
                f"  [green]+[/green] provides {escape(item.logical_name)} → fills {escape(item.namespace)}"
            )
        for item in suggestion.consumes_satisfied:
            marker = "[green]✓[/green]" if item.compatibility.compatible else "[red]✗[/red]"
            lines.append(
                f"  {marker} consumes {escape(item.logical_name)} from {escape(item.provider_key)}"
            )
        for item in suggestion.consumes_unsatisfied:
            lines.append(
                f"  [red]✗[/red] consumes {escape(item.logical_name)} "
                f"[dim]({escape(item.schema.describe())}, no provider)[/dim]"
            )
        return "\n".join(lines)
