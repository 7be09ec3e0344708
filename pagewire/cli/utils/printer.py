"""CLI Printer for consistent output formatting."""

from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pagewire.cli.utils.format import (
    AnalysisFormatter,
    CompatibilityFormatter,
    ContractFormatter,
    SuggestionFormatter,
    ValidationFormatter,
)
from pagewire.models import (
    BindingValidationResult,
    CompatibilityResult,
    ComponentCompatibility,
    PageStateAnalysis,
)
from pagewire.models.registry import ContractEntry, LoadFailure


class CliPrinter:
    """Centralized printer for CLI output.

    This class handles all printing operations for the CLI, ensuring consistent
    formatting across commands and proper handling of verbose/JSON modes.
    """

    def __init__(
        self, console: Console, verbose: bool = False, json_mode: bool = False
    ):
        """Initialize printer with console and mode settings.

        Args:
            console: Rich console for output
            verbose: Whether to show detailed output
            json_mode: Whether to output in JSON format (can be set later)
        """
        self.console = console
        self.verbose = verbose
        self.json_mode = json_mode

    def print_contract_table(
        self, entries: list[ContractEntry], failures: list[LoadFailure]
    ) -> None:
        """Print all registered contracts, one row per component.

        In JSON mode the rows and load failures are emitted as one document.
        """
        summaries = [ContractFormatter.build_summary(entry) for entry in entries]

        if self.json_mode:
            self.console.print_json(data={
                "components": summaries,
                "load_failures": [f.to_dict() for f in failures],
            })
            return

        table = Table(title="Component contracts")
        table.add_column("Component", style="cyan", no_wrap=True)
        table.add_column("Provides")
        table.add_column("Consumes")
        table.add_column("Description", style="dim")
        for summary in summaries:
            table.add_row(
                summary["component_key"],
                ", ".join(summary["provides"]) or "-",
                ", ".join(summary["consumes"]) or "-",
                summary["description"],
            )
        self.console.print(table)

        formatted = ContractFormatter.format_failures(failures)
        if formatted:
            self.console.print(formatted)

    def print_contract(self, entry: ContractEntry) -> None:
        if self.json_mode:
            self.console.print_json(data=entry.to_dict())
        else:
            self.console.print(ContractFormatter.format_entry(entry))

    def print_analysis(self, analysis: PageStateAnalysis) -> None:
        if self.json_mode:
            self.console.print_json(data=analysis.to_dict())
        else:
            self.console.print(AnalysisFormatter.format_analysis(analysis))

    def print_validation(self, result: BindingValidationResult, page_id: str) -> None:
        if self.json_mode:
            self.console.print_json(data={"page": page_id, **result.to_dict()})
        else:
            self.console.print(f"[bold]Page:[/bold] {escape(page_id)}")
            self.console.print(ValidationFormatter.format_validation(result))

    def print_suggestions(self, suggestions: list[ComponentCompatibility]) -> None:
        """Print candidate components for the page.

        Args:
            suggestions: Candidates in catalog order
        """
        if self.json_mode:
            self.console.print_json(data=[s.to_dict() for s in suggestions])
            return

        if not suggestions:
            self.console.print("[dim]No components to suggest[/dim]")
            return
        for suggestion in suggestions:
            self.console.print(SuggestionFormatter.format_suggestion(suggestion))

    def print_compatibility(self, result: CompatibilityResult) -> None:
        if self.json_mode:
            self.console.print_json(data=result.to_dict())
        else:
            self.console.print(CompatibilityFormatter.format_result(result))

    def show_progress(self, message: str) -> None:
        """Show progress message if verbose mode is enabled."""
        if self.verbose:
            self.console.print(f"[dim]… {message}[/dim]")

    def show_success(self, message: str) -> None:
        self.console.print(f"[green]✓[/green] {message}")

    def print_json(self, data: Any) -> None:
        self.console.print_json(data=data)

    def print(self, message: str, **kwargs) -> None:
        """Print message to console.

        Args:
            message: Message to print
            **kwargs: Additional arguments for rich.console.print
        """
        self.console.print(message, **kwargs)

    def print_error(self, message: str) -> None:
        self.console.print(f"[red]✗ Error:[/red] {escape(message)}")
