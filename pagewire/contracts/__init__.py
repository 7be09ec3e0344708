"""Contract utilities for component state sharing.

This package provides:
- Schema compatibility checking between provides/consumes
- The contract registry and its component catalog
- Page state analysis
- Component matching and binding validation
"""

from .analyzer import PageAnalyzer, analyze_page_state, is_page_valid
from .catalog import ComponentCatalog, ComponentDefinition
from .compatibility import check_schema_compatibility, is_assignable, is_schema_compatible
from .matcher import (
    ComponentMatcher,
    build_validation_result,
    find_compatible_components,
    get_component_compatibility,
    validate_page_bindings,
)
from .registry import ContractRegistry, load_contract_registry

__all__ = [
    # Compatibility
    "check_schema_compatibility",
    "is_schema_compatible",
    "is_assignable",
    # Registry
    "ComponentCatalog",
    "ComponentDefinition",
    "ContractRegistry",
    "load_contract_registry",
    # Analysis
    "PageAnalyzer",
    "analyze_page_state",
    "is_page_valid",
    # Matching
    "ComponentMatcher",
    "build_validation_result",
    "find_compatible_components",
    "get_component_compatibility",
    "validate_page_bindings",
]
