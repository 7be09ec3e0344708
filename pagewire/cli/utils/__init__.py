"""CLI utilities package.

This package provides utilities for CLI commands including:
- CLIContext: Context management for commands
- CliPrinter and formatters: rich output for contracts, analyses and suggestions
- Decorators: Error handling decorators
"""

from pagewire.cli.utils.context import CLIContext
from pagewire.cli.utils.decorators import handle_cli_errors
from pagewire.cli.utils.format import (
    AnalysisFormatter,
    CompatibilityFormatter,
    ContractFormatter,
    ContractSummary,
    SuggestionFormatter,
    ValidationFormatter,
)
from pagewire.cli.utils.printer import CliPrinter

__all__ = [
    # Context
    "CLIContext",
    "CliPrinter",
    # Formatters
    "AnalysisFormatter",
    "CompatibilityFormatter",
    "ContractFormatter",
    "SuggestionFormatter",
    "ValidationFormatter",
    # TypedDicts for type hints
    "ContractSummary",
    # Decorators
    "handle_cli_errors",
]
