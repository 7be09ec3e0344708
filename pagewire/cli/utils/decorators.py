"""Decorators for CLI error handling and consistent output formatting."""

from collections.abc import Callable
from functools import wraps

import typer

from pagewire.common.exceptions import PageWireError


def handle_cli_errors(error_message: str) -> Callable:
    """Decorator to report PageWire errors and exit with code 1.

    The error is printed as ``{"error": ...}`` in JSON mode and with rich
    markup otherwise. Other exceptions propagate unchanged.

    Args:
        error_message: Base error message (can include an {error} placeholder)

    Returns:
        Decorated function that handles errors consistently

    Example:
        ```python
        @handle_cli_errors("Failed to analyze page")
        def analyze_command(ctx: typer.Context, ...):
            page = load_page(page_file)
        ```
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            # Extract context from first argument (standard Typer pattern)
            ctx = args[0] if args else kwargs.get("ctx")
            if not ctx or not hasattr(ctx, "obj"):
                return func(*args, **kwargs)

            cli_ctx = ctx.obj

            try:
                return func(*args, **kwargs)
            except typer.Exit:
                raise
            except PageWireError as e:
                if "{error}" in error_message:
                    formatted_message = error_message.format(error=e)
                else:
                    formatted_message = f"{error_message}: {e}"

                if cli_ctx.json_mode:
                    cli_ctx.print_json(data={"error": formatted_message})
                else:
                    cli_ctx.print_error(formatted_message)

                raise typer.Exit(1) from e

        return wrapper

    return decorator
