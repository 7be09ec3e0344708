"""Common utilities and shared components for PageWire.

This package contains the exception hierarchy used throughout PageWire.
"""

from .exceptions import (
    BindingNotFoundError,
    ConfigurationError,
    LoaderError,
    PageWireError,
    RegistryError,
    SchemaError,
    ScopeError,
)

__all__ = [
    "PageWireError",
    "ConfigurationError",
    "BindingNotFoundError",
    "ScopeError",
    "SchemaError",
    "LoaderError",
    "RegistryError",
]
