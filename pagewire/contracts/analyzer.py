"""Page state analysis.

Works out, for one page configuration, which namespaces are provided, which
consumes have a provider (with the compatibility check) and which do not.

Usage:
    from pagewire.contracts import PageAnalyzer

    analysis = PageAnalyzer(registry).analyze(page.placements)
    for missing in analysis.unsatisfied_consumes:
        ...
"""

import logging
from collections.abc import Iterable

from pagewire.models.analysis import (
    PageStateAnalysis,
    ProvidedNamespace,
    SatisfiedConsume,
    ShadowedProvider,
    UnsatisfiedConsume,
)
from pagewire.models.contract import ComponentContract, Placement
from pagewire.state.bindings import resolve_bindings

from .compatibility import check_schema_compatibility
from .registry import ContractRegistry

logger = logging.getLogger(__name__)


class PageAnalyzer:
    """Analyze how the placements of a page share state.

    Two passes over the enabled placements: all provides are collected
    first, then every consume is checked against them, so the result does
    not depend on placement order. Disabled placements and placements of
    components without a contract take no part.

    Attributes:
        registry: Loaded contract registry
    """

    def __init__(self, registry: ContractRegistry):
        self.registry = registry

    def analyze(self, placements: Iterable[Placement]) -> PageStateAnalysis:
        """Run both passes.

        Args:
            placements: Page placements, in page order

        Returns:
            Analysis of provides/consumes relationships
        """
        active = self._active_placements(placements)

        # Phase 1: collect provides
        provided: dict[str, ProvidedNamespace] = {}
        shadowed: list[ShadowedProvider] = []
        for placement, contract in active:
            bindings = resolve_bindings(contract, placement.bindings)
            for logical_name, schema in contract.provides.items():
                namespace = bindings.provides[logical_name]
                previous = provided.get(namespace)
                if previous is not None:
                    logger.debug(
                        f"Namespace '{namespace}' provided by both "
                        f"'{previous.placement_id}' and '{placement.placement_id}'; "
                        f"'{placement.placement_id}' wins"
                    )
                    shadowed.append(ShadowedProvider(
                        namespace=namespace,
                        provider=previous,
                        overridden_by=placement.placement_id,
                    ))
                provided[namespace] = ProvidedNamespace(
                    schema=schema,
                    component_key=placement.component_key,
                    placement_id=placement.placement_id,
                    logical_name=logical_name,
                )

        # Phase 2: check consumes
        unsatisfied: list[UnsatisfiedConsume] = []
        satisfied: list[SatisfiedConsume] = []
        for placement, contract in active:
            bindings = resolve_bindings(contract, placement.bindings)
            for logical_name, schema in contract.consumes.items():
                namespace = bindings.consumes[logical_name]
                provider = provided.get(namespace)
                if provider is None:
                    unsatisfied.append(UnsatisfiedConsume(
                        namespace=namespace,
                        schema=schema,
                        component_key=placement.component_key,
                        placement_id=placement.placement_id,
                        logical_name=logical_name,
                    ))
                    continue

                satisfied.append(SatisfiedConsume(
                    namespace=namespace,
                    consumer_key=placement.component_key,
                    consumer_placement_id=placement.placement_id,
                    consumer_logical_name=logical_name,
                    provider_key=provider.component_key,
                    provider_placement_id=provider.placement_id,
                    compatibility=check_schema_compatibility(provider.schema, schema),
                ))

        return PageStateAnalysis(
            provided_namespaces=provided,
            unsatisfied_consumes=unsatisfied,
            satisfied_consumes=satisfied,
            shadowed_providers=shadowed,
        )

    def _active_placements(
        self, placements: Iterable[Placement]
    ) -> list[tuple[Placement, ComponentContract]]:
        active = []
        for placement in placements:
            if not placement.enabled:
                continue
            contract = self.registry.get_contract(placement.component_key)
            if contract is None:
                logger.debug(
                    f"Placement '{placement.placement_id}': no contract for "
                    f"'{placement.component_key}'"
                )
                continue
            active.append((placement, contract))
        return active


async def analyze_page_state(
    registry: ContractRegistry, placements: Iterable[Placement]
) -> PageStateAnalysis:
    """Load the registry if needed, then analyze the page."""
    await registry.load()
    return PageAnalyzer(registry).analyze(placements)


async def is_page_valid(registry: ContractRegistry, placements: Iterable[Placement]) -> bool:
    """True when every consume on the page has a compatible provider."""
    analysis = await analyze_page_state(registry, placements)
    return analysis.is_valid
