"""Pytest configuration and fixtures for PageWire tests.

This module provides the demo component contracts shared across the test
suite, registries built from them, and catalog/page files written to a
temporary directory for loader, integration and CLI tests.
"""

import asyncio
import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from ruamel.yaml import YAML

from pagewire.contracts import ComponentCatalog, ContractRegistry
from pagewire.models import BindingConfig, ComponentContract, Placement
from pagewire.schema import FilterStateSchema
from pagewire.schema import types as t

# Contract Fixtures


@pytest.fixture
def strict_filter_schema():
    """Filter state where both fields are required."""
    return t.object_({
        "search": t.string(),
        "status": t.array(t.string()),
    })


@pytest.fixture
def demo_filter_contract(strict_filter_schema) -> ComponentContract:
    """Filter bar providing a fully populated filter state."""
    return ComponentContract(id="DemoFilter", provides={"filters": strict_filter_schema})


@pytest.fixture
def demo_table_contract(strict_filter_schema) -> ComponentContract:
    """Table consuming the strict filter state and providing its selection."""
    return ComponentContract(
        id="DemoTable",
        consumes={"filters": strict_filter_schema},
        provides={"selection": t.object_({"rows": t.array(t.string())})},
    )


@pytest.fixture
def generic_filters_contract() -> ComponentContract:
    """Filter bar providing the shared, all-optional filter state."""
    return ComponentContract(id="GenericFilters", provides={"filters": FilterStateSchema})


@pytest.fixture
def sales_orders_table_contract() -> ComponentContract:
    """Table that tolerates missing filter fields."""
    return ComponentContract(id="SalesOrdersTable", consumes={"filters": FilterStateSchema})


@pytest.fixture
def customer_details_contract() -> ComponentContract:
    """Detail panel reading the selected rows."""
    return ComponentContract(
        id="CustomerDetails",
        consumes={"selection": t.object_({"rows": t.array(t.string())})},
    )


@pytest.fixture
def demo_contracts(
    demo_filter_contract,
    demo_table_contract,
    generic_filters_contract,
    sales_orders_table_contract,
    customer_details_contract,
) -> dict[str, ComponentContract | None]:
    """All demo components by key; CustomerSidebar has no contract."""
    return {
        "DemoFilter": demo_filter_contract,
        "DemoTable": demo_table_contract,
        "GenericFilters": generic_filters_contract,
        "SalesOrdersTable": sales_orders_table_contract,
        "CustomerDetails": customer_details_contract,
        "CustomerSidebar": None,
    }


# Registry Fixtures


@pytest.fixture
def build_registry() -> Callable[..., ContractRegistry]:
    """Factory building a loaded registry from ``{key: contract}``."""

    def _build(contracts: dict[str, ComponentContract | None]) -> ContractRegistry:
        registry = ContractRegistry(ComponentCatalog.from_contracts(contracts))
        asyncio.run(registry.load())
        return registry

    return _build


@pytest.fixture
def registry(build_registry, demo_contracts) -> ContractRegistry:
    """Loaded registry of all demo components."""
    return build_registry(demo_contracts)


# Placement Fixtures


@pytest.fixture
def make_placement() -> Callable[..., Placement]:
    """Factory for placements with optional binding overrides."""

    def _make(
        placement_id: str,
        component_key: str,
        provides: dict[str, str] | None = None,
        consumes: dict[str, str] | None = None,
        enabled: bool = True,
    ) -> Placement:
        bindings = None
        if provides or consumes:
            bindings = BindingConfig(provides=provides or {}, consumes=consumes or {})
        return Placement(
            placement_id=placement_id,
            component_key=component_key,
            enabled=enabled,
            bindings=bindings,
        )

    return _make


# File Fixtures


def write_yaml(path: Path, content: Any) -> Path:
    yaml = YAML()
    yaml.default_flow_style = False
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(content, f)
    return path


@pytest.fixture
def contract_files(tmp_path) -> Path:
    """Directory of declarative contract files."""
    contracts_dir = tmp_path / "contracts"
    contracts_dir.mkdir()

    write_yaml(contracts_dir / "generic_filters.yaml", {
        "id": "GenericFilters",
        "provides": {"filters": {"search?": "string", "status?": "string[]"}},
    })
    write_yaml(contracts_dir / "sales_orders_table.yaml", {
        "id": "SalesOrdersTable",
        "consumes": {"filters": {"search?": "string", "status?": "string[]"}},
        "provides": {"selection": {"rows": "string[]"}},
    })
    write_yaml(contracts_dir / "customer_details.yaml", {
        "id": "CustomerDetails",
        "consumes": {"selection": {"rows": "string[]", "page": "integer"}},
    })
    with open(contracts_dir / "paged_table.json", "w", encoding="utf-8") as f:
        json.dump({
            "id": "PagedTable",
            "consumes": {"filters": {"search": "string", "page": "number"}},
        }, f)
    return contracts_dir


@pytest.fixture
def catalog_file(tmp_path, contract_files) -> Path:
    """Catalog pointing at the contract files, plus one contract-less component."""
    return write_yaml(tmp_path / "catalog.yaml", {
        "components": {
            "GenericFilters": {
                "description": "Search and status filters",
                "contract": "contracts/generic_filters.yaml",
            },
            "SalesOrdersTable": {
                "description": "Sales orders",
                "contract": "contracts/sales_orders_table.yaml",
            },
            "CustomerDetails": {
                "description": "Customer detail panel",
                "contract": "contracts/customer_details.yaml",
            },
            "PagedTable": {
                "description": "Table with paging",
                "contract": "contracts/paged_table.json",
            },
            "CustomerSidebar": {"description": "Static sidebar"},
        }
    })


@pytest.fixture
def valid_page_file(tmp_path) -> Path:
    """Page whose only consumer is satisfied."""
    return write_yaml(tmp_path / "orders.yaml", {
        "id": "orders",
        "title": "Orders",
        "route": "/orders",
        "snippets": {
            "filters": {"component": "GenericFilters"},
            "table": {"component": "SalesOrdersTable"},
        },
    })


@pytest.fixture
def broken_page_file(tmp_path) -> Path:
    """Page with one missing provider and one incompatible provider."""
    return write_yaml(tmp_path / "broken.yaml", {
        "id": "broken",
        "snippets": {
            "filters": {"component": "GenericFilters"},
            "paged": {"component": "PagedTable"},
            "details": {"component": "CustomerDetails"},
        },
    })
