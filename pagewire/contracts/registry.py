"""
Contract Registry Module

Builds and serves the index of every known component's contract: by
component key, and inverted by provided and consumed namespace.

Loading is single-flight: the first call to :meth:`ContractRegistry.load`
starts one load task, concurrent callers await that same task, and later
calls return immediately. A component whose contract fails to load is
logged and skipped without failing the whole load.
"""

import asyncio
import logging
from collections.abc import Mapping

from pagewire.constants import CONTRACT_ATTRIBUTE
from pagewire.models.contract import ComponentContract
from pagewire.models.enums import RegistryStatus
from pagewire.models.registry import ContractEntry, LoadFailure
from pagewire.schema.parser import parse_contract

from .catalog import ComponentCatalog

logger = logging.getLogger(__name__)


class ContractRegistry:
    """
    Index of component contracts.

    One registry is owned per process (or per test); pass it explicitly to
    the analyzer and matcher. Lookups are synchronous and return empty
    results until :meth:`load` has completed.
    """

    def __init__(self, catalog: ComponentCatalog):
        """
        Initialize an unloaded registry.

        Args:
            catalog: Component catalog to scan on load
        """
        self.catalog = catalog
        self._by_component_key: dict[str, ContractEntry] = {}
        self._by_provides_namespace: dict[str, list[ContractEntry]] = {}
        self._by_consumes_namespace: dict[str, list[ContractEntry]] = {}
        self._load_failures: list[LoadFailure] = []
        self._status = RegistryStatus.UNLOADED
        self._load_task: asyncio.Future | None = None
        self._generation = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def status(self) -> RegistryStatus:
        return self._status

    @property
    def loaded(self) -> bool:
        return self._status is RegistryStatus.LOADED

    @property
    def loading(self) -> bool:
        return self._status is RegistryStatus.LOADING

    @property
    def load_failures(self) -> list[LoadFailure]:
        """Components skipped during the last load because their contract failed."""
        return list(self._load_failures)

    async def load(self) -> "ContractRegistry":
        """
        Load all contracts from the catalog.

        Idempotent: calling it multiple times, concurrently or not, scans the
        catalog once. Cancelling one caller does not cancel the shared load.
        If the scan itself fails, every waiter sees the error, the registry
        returns to unloaded and the next call starts a new scan.

        Returns:
            This registry, loaded
        """
        if self._status is RegistryStatus.LOADED:
            return self

        task = self._load_task
        if task is None or task.done():
            self._status = RegistryStatus.LOADING
            task = asyncio.ensure_future(self._load_all(self._generation))
            self._load_task = task

        generation = self._generation
        # Shielded: a cancelled caller must not cancel the load for the others
        try:
            await asyncio.shield(task)
        except Exception:
            if generation == self._generation:
                raise

        # reset() while we were waiting: the stale load was discarded
        if generation != self._generation:
            return await self.load()
        return self

    def reset(self) -> None:
        """Clear all indices and return to the unloaded state.

        Safe to call while a load is in flight: that load's results are
        discarded and the next :meth:`load` starts fresh.
        """
        self._generation += 1
        self._by_component_key = {}
        self._by_provides_namespace = {}
        self._by_consumes_namespace = {}
        self._load_failures = []
        self._status = RegistryStatus.UNLOADED
        self._load_task = None

    async def _load_all(self, generation: int) -> None:
        try:
            keys = self.catalog.keys()
            logger.debug(f"Loading contracts for {len(keys)} components")
            results = await asyncio.gather(*(self._load_entry(key) for key in keys))
        except Exception as e:
            if generation == self._generation:
                logger.error(f"Contract registry load failed: {e}")
                self._status = RegistryStatus.UNLOADED
                self._load_task = None
            raise

        if generation != self._generation:
            logger.debug("Registry was reset during load; discarding results")
            return

        by_component_key: dict[str, ContractEntry] = {}
        by_provides: dict[str, list[ContractEntry]] = {}
        by_consumes: dict[str, list[ContractEntry]] = {}
        failures: list[LoadFailure] = []

        for entry, failure in results:
            if failure is not None:
                failures.append(failure)
            if entry is None:
                continue
            by_component_key[entry.component_key] = entry
            for namespace in entry.contract.provides:
                by_provides.setdefault(namespace, []).append(entry)
            for namespace in entry.contract.consumes:
                by_consumes.setdefault(namespace, []).append(entry)

        self._by_component_key = by_component_key
        self._by_provides_namespace = by_provides
        self._by_consumes_namespace = by_consumes
        self._load_failures = failures
        self._status = RegistryStatus.LOADED
        logger.debug(
            f"Loaded {len(by_component_key)} contracts ({len(failures)} failures)"
        )

    async def _load_entry(self, key: str) -> tuple[ContractEntry | None, LoadFailure | None]:
        try:
            definition = self.catalog.get(key)
            module = await definition.loader()
            contract = getattr(module, CONTRACT_ATTRIBUTE, None)
            if contract is None:
                return None, None
            if isinstance(contract, Mapping):
                contract = parse_contract(contract)
            if not isinstance(contract, ComponentContract):
                raise TypeError(
                    f"'{CONTRACT_ATTRIBUTE}' must be a ComponentContract, "
                    f"got {type(contract).__name__}"
                )
            return ContractEntry(key, contract, definition.description), None
        except Exception as e:
            logger.warning(f"Failed to load contract for {key}: {e}")
            return None, LoadFailure(component_key=key, error=str(e))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_contract(self, component_key: str) -> ComponentContract | None:
        """Get the contract for a specific component (if loaded)."""
        entry = self._by_component_key.get(component_key)
        return entry.contract if entry else None

    def get_entry(self, component_key: str) -> ContractEntry | None:
        return self._by_component_key.get(component_key)

    def get_providers(self, namespace: str) -> list[ContractEntry]:
        """Get all components that provide a namespace under its default binding."""
        return list(self._by_provides_namespace.get(namespace, []))

    def get_consumers(self, namespace: str) -> list[ContractEntry]:
        """Get all components that consume a namespace under its default binding."""
        return list(self._by_consumes_namespace.get(namespace, []))

    def get_all_contracts(self) -> list[ContractEntry]:
        """Get all loaded contract entries, in catalog order."""
        return list(self._by_component_key.values())

    def __contains__(self, component_key: object) -> bool:
        return component_key in self._by_component_key

    def __len__(self) -> int:
        return len(self._by_component_key)


async def load_contract_registry(registry: ContractRegistry) -> ContractRegistry:
    """Load ``registry``; call once, early, before analysis."""
    return await registry.load()
