"""
Component catalog.

The catalog is the registry's view of the component library: every known
component key with a human description and an async loader returning the
component's module. The registry reads the ``contract`` attribute of that
module, if there is one.

Catalog file format (YAML or JSON)::

    components:
      DemoFilter:
        description: Filter bar for the demo table
        module: myapp.components.demo_filter
      DemoTable:
        description: Demo table
        contract: contracts/demo_table.yaml
"""

import importlib
from collections.abc import Awaitable, Callable, Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import SimpleNamespace
from typing import Any

from pagewire.common.exceptions import LoaderError, RegistryError
from pagewire.loader.files import read_mapping
from pagewire.models.contract import ComponentContract
from pagewire.schema.parser import parse_contract

ModuleLoader = Callable[[], Awaitable[Any]]


@dataclass(frozen=True)
class ComponentDefinition:
    """A component known to the catalog."""

    key: str
    loader: ModuleLoader
    description: str = ""


def contract_loader(contract: ComponentContract | None) -> ModuleLoader:
    """Loader for a contract that is already in memory."""

    async def load() -> Any:
        return SimpleNamespace(contract=contract)

    return load


def module_loader(module_path: str) -> ModuleLoader:
    """Loader importing a Python module by dotted path."""

    async def load() -> Any:
        return importlib.import_module(module_path)

    return load


def contract_file_loader(file_path: Path) -> ModuleLoader:
    """Loader parsing a declarative contract file."""

    async def load() -> Any:
        return SimpleNamespace(contract=parse_contract(read_mapping(file_path, "Contract")))

    return load


class ComponentCatalog:
    """
    Known components by key.

    Usage:
        catalog = ComponentCatalog.from_contracts({"DemoFilter": DemoFilterContract})
        registry = ContractRegistry(catalog)
    """

    def __init__(self, definitions: list[ComponentDefinition] | None = None):
        self._definitions: dict[str, ComponentDefinition] = {}
        for definition in definitions or []:
            self.add(definition)

    def add(self, definition: ComponentDefinition) -> None:
        """
        Add a component definition.

        Raises:
            RegistryError: If the key is already in the catalog
        """
        if definition.key in self._definitions:
            raise RegistryError(
                f"Component '{definition.key}' is already in the catalog",
                component_key=definition.key,
            )
        self._definitions[definition.key] = definition

    def register(self, key: str, loader: ModuleLoader, description: str = "") -> None:
        self.add(ComponentDefinition(key=key, loader=loader, description=description))

    def keys(self) -> list[str]:
        """All component keys, in registration order."""
        return list(self._definitions)

    def get(self, key: str) -> ComponentDefinition:
        """
        Get a component definition.

        Raises:
            RegistryError: If the key is unknown
        """
        try:
            return self._definitions[key]
        except KeyError:
            available = ", ".join(self._definitions) or "none"
            raise RegistryError(
                f"Component '{key}' not found. Available components: {available}",
                component_key=key,
            ) from None

    def __contains__(self, key: object) -> bool:
        return key in self._definitions

    def __iter__(self) -> Iterator[ComponentDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    @classmethod
    def from_contracts(
        cls,
        contracts: Mapping[str, ComponentContract | None],
        descriptions: Mapping[str, str] | None = None,
    ) -> "ComponentCatalog":
        """Catalog of in-memory contracts; ``None`` stands for a component without one."""
        descriptions = descriptions or {}
        catalog = cls()
        for key, contract in contracts.items():
            catalog.register(key, contract_loader(contract), descriptions.get(key, ""))
        return catalog

    @classmethod
    def from_modules(
        cls,
        modules: Mapping[str, str],
        descriptions: Mapping[str, str] | None = None,
    ) -> "ComponentCatalog":
        """Catalog of importable component modules, by dotted path."""
        descriptions = descriptions or {}
        catalog = cls()
        for key, module_path in modules.items():
            catalog.register(key, module_loader(module_path), descriptions.get(key, ""))
        return catalog

    @classmethod
    def from_file(cls, file_path: str | Path) -> "ComponentCatalog":
        """
        Load a catalog file.

        Contract paths are resolved against the catalog file's directory.
        Contract files themselves are only read when the registry loads.

        Raises:
            LoaderError: If the catalog file is missing or malformed
        """
        path = Path(file_path)
        data = read_mapping(path, "Catalog")
        components = data.get("components")
        if not isinstance(components, Mapping):
            raise LoaderError("Catalog file must have a 'components' mapping", file_path=str(path))

        catalog = cls()
        for key, entry in components.items():
            catalog.add(cls._definition_from_entry(str(key), entry, path))
        return catalog

    @staticmethod
    def _definition_from_entry(key: str, entry: Any, catalog_path: Path) -> ComponentDefinition:
        if entry is None:
            entry = {}
        if not isinstance(entry, Mapping):
            raise LoaderError(
                f"Catalog entry '{key}' must be a mapping", file_path=str(catalog_path)
            )

        description = str(entry.get("description", ""))
        module_path = entry.get("module")
        contract_path = entry.get("contract")

        if module_path and contract_path:
            raise LoaderError(
                f"Catalog entry '{key}' cannot set both 'module' and 'contract'",
                file_path=str(catalog_path),
            )
        if module_path:
            loader = module_loader(str(module_path))
        elif contract_path:
            resolved = Path(contract_path)
            if not resolved.is_absolute():
                resolved = catalog_path.parent / resolved
            loader = contract_file_loader(resolved)
        else:
            # Components without a contract are legitimate catalog members
            loader = contract_loader(None)

        return ComponentDefinition(key=key, loader=loader, description=description)
