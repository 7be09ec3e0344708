"""CLI commands module for PageWire."""

from pagewire.cli.commands.check import check_command
from pagewire.cli.commands.contracts import contracts_app
from pagewire.cli.commands.page import page_app

__all__ = [
    "check_command",
    "contracts_app",
    "page_app",
]
