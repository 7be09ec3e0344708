"""
Enums for PageWire contracts and analysis.

This module defines all enums used across PageWire to avoid magic strings
throughout the codebase.

Usage:
    from pagewire.models.enums import (
        SchemaKind,
        PropertyStatus,
        BindingErrorType,
    )
"""

from enum import StrEnum

# ============================================================================
# Schema Enums
# ============================================================================


class SchemaKind(StrEnum):
    """Discriminator of a schema descriptor node."""

    OBJECT = "object"
    ARRAY = "array"
    RECORD = "record"
    UNION = "union"
    LITERAL = "literal"
    PRIMITIVE = "primitive"
    OPTIONAL = "optional"
    ANY = "any"
    UNKNOWN = "unknown"


class PrimitiveType(StrEnum):
    """Primitive value types."""

    STRING = "string"
    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    NULL = "null"


# ============================================================================
# Compatibility and Validation Enums
# ============================================================================


class PropertyStatus(StrEnum):
    """Compatibility status of a single consumed property."""

    COMPATIBLE = "compatible"
    MISSING = "missing"  # Required by consumer, absent from provider
    INCOMPATIBLE = "incompatible"  # Present but not assignable
    OPTIONAL_MISSING = "optional-missing"  # Optional for consumer, never blocking


BLOCKING_STATUSES: frozenset[PropertyStatus] = frozenset(
    {PropertyStatus.MISSING, PropertyStatus.INCOMPATIBLE}
)


class BindingErrorType(StrEnum):
    """Types of blocking wiring problems on a page."""

    MISSING_PROVIDER = "missing-provider"
    INCOMPATIBLE_SCHEMA = "incompatible-schema"


class BindingDirection(StrEnum):
    """Side of a contract a logical name belongs to."""

    PROVIDES = "provides"
    CONSUMES = "consumes"


# ============================================================================
# Registry Enums
# ============================================================================


class RegistryStatus(StrEnum):
    """Lifecycle state of a contract registry."""

    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"
