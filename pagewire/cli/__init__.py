"""
Command-line interface module for PageWire.

This module provides the CLI entry point and command implementations
for inspecting component contracts and checking page wiring.
"""

from pagewire.cli.main import main

__all__ = ["main"]
