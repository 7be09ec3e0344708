"""
CLI Context for PageWire.

Provides centralized registry loading and context management for all CLI commands.
"""

import asyncio
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape

from pagewire.cli.utils.printer import CliPrinter
from pagewire.config import WiringConfig
from pagewire.contracts import ComponentCatalog, ContractRegistry
from pagewire.loader import load_page, read_document
from pagewire.models import PageDefinition
from pagewire.models.schema import Schema
from pagewire.schema import parse_schema


@dataclass
class CLIContext:
    """
    Context object for CLI commands.

    This context is created once and passed to all commands via Typer's
    context injection. It centralizes:
    - Configuration (catalog path, strict mode)
    - Contract registry loading from the catalog
    - Page and schema document loading
    - Console output management

    Attributes:
        console: Rich console for output
        verbose: Enable verbose output (ignored when json_mode is True)
        config: Effective configuration (environment plus command-line overrides)
        printer: CLI printer for formatted output (always initialized)
        registry: Contract registry, loaded on first use
        json_mode: When True, suppress all non-JSON output (set by commands)
    """

    console: Console
    verbose: bool = False
    config: WiringConfig = field(default_factory=WiringConfig)
    printer: CliPrinter = field(init=False)  # Will be initialized in __post_init__
    registry: ContractRegistry | None = None
    json_mode: bool = False

    def __post_init__(self):
        """Initialize printer."""
        self.printer = CliPrinter(console=self.console, verbose=self.verbose)

    def set_json_mode(self, json_mode: bool) -> None:
        self.json_mode = json_mode
        self.printer.json_mode = json_mode

    def _should_print_verbose(self) -> bool:
        """Check if verbose output should be printed (not in JSON mode)."""
        return self.verbose and not self.json_mode

    def print_verbose(self, message: str, **kwargs) -> None:
        """
        Print a message only if verbose mode is enabled and not in JSON mode.

        Args:
            message: Message to print
            **kwargs: Additional arguments passed to console.print()
        """
        if self._should_print_verbose():
            self.console.print(message, **kwargs)

    def print_progress(self, message: str) -> None:
        if self._should_print_verbose():
            self.printer.show_progress(message)

    def print_error(self, message: str) -> None:
        """Print an error message (always prints unless in JSON mode)."""
        if not self.json_mode:
            self.printer.print_error(message)

    def print_success(self, message: str) -> None:
        if not self.json_mode:
            self.printer.show_success(message)

    def print_json(self, data: Any) -> None:
        """Print data as JSON (always prints, even in JSON mode)."""
        self.printer.print_json(data=data)

    def load_registry(self) -> ContractRegistry:
        """
        Build the registry from the configured catalog and load it.

        The registry is created once per invocation; later calls return it.

        Raises:
            ConfigurationError: If no catalog is configured
            LoaderError: If the catalog file cannot be read
        """
        if self.registry is None:
            catalog_path = self.config.require_catalog()
            self.print_progress(f"Loading contracts from {catalog_path}")
            self.registry = ContractRegistry(ComponentCatalog.from_file(catalog_path))

        asyncio.run(self.registry.load())

        if self.registry.load_failures and self._should_print_verbose():
            for failure in self.registry.load_failures:
                self.print_verbose(
                    f"[yellow]⚠ Skipped {escape(failure.component_key)}: {escape(failure.error)}[/yellow]"
                )
        return self.registry

    def load_page(self, page_file: Path) -> PageDefinition:
        self.print_progress(f"Loading page from {page_file}")
        page = load_page(page_file)
        self.print_verbose(
            f"[dim]Page '{page.id}' has {len(page.placements)} placement(s)[/dim]"
        )
        return page

    def load_schema(self, schema_file: Path) -> Schema:
        """Read and parse a schema document."""
        self.print_progress(f"Reading schema from {schema_file}")
        return parse_schema(read_document(schema_file))

    def print(self, message: str, **kwargs) -> None:
        """Print message to console."""
        self.console.print(message, **kwargs)
