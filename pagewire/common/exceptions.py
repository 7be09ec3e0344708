"""Common exceptions for PageWire.

This module defines the exception types raised by PageWire. Wiring problems
found while analyzing a page (missing providers, incompatible schemas) are
never raised: they are reported as result values. Exceptions are reserved for
programmer mistakes and unreadable inputs.
"""

from typing import Any


class PageWireError(Exception):
    """Base exception for all PageWire-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None):
        """Initialize exception with message and optional context."""
        super().__init__(message)
        self.context = context or {}


class ConfigurationError(PageWireError):
    """Raised when a component or the library itself is wired incorrectly."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize configuration error with details."""
        super().__init__(message, context)
        self.config_key = config_key


class BindingNotFoundError(ConfigurationError):
    """Raised when a handle is requested for a logical name with no binding."""

    def __init__(
        self,
        logical_name: str,
        direction: str,
        contract_id: str,
        context: dict[str, Any] | None = None
    ):
        """Initialize binding error for a provides/consumes logical name."""
        super().__init__(
            f'No binding found for {direction} "{logical_name}" in contract "{contract_id}"',
            config_key=logical_name,
            context=context,
        )
        self.logical_name = logical_name
        self.direction = direction
        self.contract_id = contract_id


class ScopeError(ConfigurationError):
    """Raised when page state is accessed outside of a mounted page scope."""


class SchemaError(PageWireError):
    """Raised when a schema document cannot be parsed."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize schema error with the location of the bad node."""
        super().__init__(message, context)
        self.path = path


class LoaderError(PageWireError):
    """Raised when a catalog, contract or page file cannot be loaded."""

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize loader error with details."""
        super().__init__(message, context)
        self.file_path = file_path


class RegistryError(PageWireError):
    """Raised when the contract registry is used incorrectly."""

    def __init__(
        self,
        message: str,
        component_key: str | None = None,
        context: dict[str, Any] | None = None
    ):
        """Initialize registry error with details."""
        super().__init__(message, context)
        self.component_key = component_key


__all__ = [
    'PageWireError',
    'ConfigurationError',
    'BindingNotFoundError',
    'ScopeError',
    'SchemaError',
    'LoaderError',
    'RegistryError',
]
