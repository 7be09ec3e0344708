"""
PageWire: contract-based state sharing between page components.

Components declare a contract of the page state they provide (write) and
consume (read), typed with schema descriptors. PageWire checks, from the
contracts and per-placement bindings alone, whether every consumer on a page
has a structurally compatible provider, suggests components that fill gaps,
and hands components narrow handles into a page-scoped state store.

Core Components:
    - Schema descriptors and builders (``pagewire.schema.types``)
    - Compatibility checker: structural assignability with per-property detail
    - ContractRegistry: single-flight index of all component contracts
    - PageAnalyzer: provides/consumes wiring of one page
    - ComponentMatcher: suggestions and binding validation
    - PageScope / PageState: page state store and typed handles

Example Usage:
    ```python
    import asyncio
    from pagewire import ComponentCatalog, ContractRegistry, load_page, validate_page_bindings

    registry = ContractRegistry(ComponentCatalog.from_file("catalog.yaml"))
    page = load_page("pages/orders.yaml")

    result = asyncio.run(validate_page_bindings(registry, page.placements))
    for error in result.errors:
        print(error.message)
    ```
"""

__version__ = "0.1.0"

from .common.exceptions import (
    BindingNotFoundError,
    ConfigurationError,
    LoaderError,
    PageWireError,
    RegistryError,
    SchemaError,
    ScopeError,
)
from .contracts import (
    ComponentCatalog,
    ComponentMatcher,
    ContractRegistry,
    PageAnalyzer,
    analyze_page_state,
    check_schema_compatibility,
    find_compatible_components,
    get_component_compatibility,
    is_page_valid,
    is_schema_compatible,
    load_contract_registry,
    validate_page_bindings,
)
from .loader import load_page
from .models import (
    BindingConfig,
    BindingValidationResult,
    CompatibilityResult,
    ComponentCompatibility,
    ComponentContract,
    PageDefinition,
    PageStateAnalysis,
    Placement,
    PropertyStatus,
    ResolvedBindings,
)
from .schema import parse_contract, parse_schema
from .schema import types as t
from .state import PageScope, PageState, PlacementScope, resolve_bindings, use_consumes, use_provides

__all__ = [
    "__version__",
    # Schemas
    "t",
    "parse_schema",
    "parse_contract",
    # Contracts and pages
    "ComponentContract",
    "BindingConfig",
    "ResolvedBindings",
    "Placement",
    "PageDefinition",
    "load_page",
    # Compatibility
    "check_schema_compatibility",
    "is_schema_compatible",
    "CompatibilityResult",
    "PropertyStatus",
    # Registry
    "ComponentCatalog",
    "ContractRegistry",
    "load_contract_registry",
    # Analysis and matching
    "PageAnalyzer",
    "ComponentMatcher",
    "analyze_page_state",
    "is_page_valid",
    "find_compatible_components",
    "get_component_compatibility",
    "validate_page_bindings",
    "PageStateAnalysis",
    "ComponentCompatibility",
    "BindingValidationResult",
    # Page state
    "PageScope",
    "PageState",
    "PlacementScope",
    "resolve_bindings",
    "use_provides",
    "use_consumes",
    # Errors
    "PageWireError",
    "ConfigurationError",
    "BindingNotFoundError",
    "ScopeError",
    "SchemaError",
    "LoaderError",
    "RegistryError",
]
