"""
PageWire models package.

This package is the single source of truth for the type definitions, enums
and data structures used throughout PageWire.

Usage:
    from pagewire.models import (
        ComponentContract,
        ObjectSchema,
        PageStateAnalysis,
        PropertyStatus,
    )
"""

from .analysis import (
    BindingError,
    BindingValidationResult,
    BindingWarning,
    CanSatisfyConsume,
    ComponentCompatibility,
    ConsumesSatisfied,
    ConsumesUnsatisfied,
    PageStateAnalysis,
    ProvidedNamespace,
    SatisfiedConsume,
    ShadowedProvider,
    UnsatisfiedConsume,
)
from .compatibility import CompatibilityResult, PropertyCompatibility
from .contract import (
    BindingConfig,
    ComponentContract,
    PageDefinition,
    Placement,
    ResolvedBindings,
)
from .enums import (
    BindingDirection,
    BindingErrorType,
    PrimitiveType,
    PropertyStatus,
    RegistryStatus,
    SchemaKind,
)
from .registry import ContractEntry, LoadFailure
from .schema import (
    AnySchema,
    ArraySchema,
    LiteralSchema,
    ObjectSchema,
    OptionalSchema,
    PrimitiveSchema,
    RecordSchema,
    Schema,
    UnionSchema,
    UnknownSchema,
    unwrap_optional,
)

__all__ = [
    # Enums
    "BindingDirection",
    "BindingErrorType",
    "PrimitiveType",
    "PropertyStatus",
    "RegistryStatus",
    "SchemaKind",
    # Schema descriptors
    "AnySchema",
    "ArraySchema",
    "LiteralSchema",
    "ObjectSchema",
    "OptionalSchema",
    "PrimitiveSchema",
    "RecordSchema",
    "Schema",
    "UnionSchema",
    "UnknownSchema",
    "unwrap_optional",
    # Contracts and pages
    "BindingConfig",
    "ComponentContract",
    "PageDefinition",
    "Placement",
    "ResolvedBindings",
    # Registry
    "ContractEntry",
    "LoadFailure",
    # Results
    "CompatibilityResult",
    "PropertyCompatibility",
    "ProvidedNamespace",
    "UnsatisfiedConsume",
    "SatisfiedConsume",
    "ShadowedProvider",
    "PageStateAnalysis",
    "CanSatisfyConsume",
    "ConsumesSatisfied",
    "ConsumesUnsatisfied",
    "ComponentCompatibility",
    "BindingError",
    "BindingWarning",
    "BindingValidationResult",
]
