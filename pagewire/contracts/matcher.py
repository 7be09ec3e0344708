"""Component matching and binding validation.

The matcher relates every known component to the current state of a page,
so a page editor can suggest what to add next. The validator turns a page
analysis into blocking errors.
"""

from collections.abc import Iterable

from pagewire.models.analysis import (
    BindingError,
    BindingValidationResult,
    BindingWarning,
    CanSatisfyConsume,
    ComponentCompatibility,
    ConsumesSatisfied,
    ConsumesUnsatisfied,
    PageStateAnalysis,
)
from pagewire.models.contract import Placement
from pagewire.models.enums import BindingErrorType
from pagewire.models.registry import ContractEntry

from .analyzer import analyze_page_state
from .compatibility import check_schema_compatibility
from .registry import ContractRegistry


class ComponentMatcher:
    """Match registry components against a page analysis.

    Attributes:
        registry: Loaded contract registry
    """

    def __init__(self, registry: ContractRegistry):
        self.registry = registry

    def find_compatible_components(
        self,
        analysis: PageStateAnalysis,
        exclude_keys: Iterable[str] = (),
    ) -> list[ComponentCompatibility]:
        """Relate every registered component to the page.

        Nothing is filtered or ranked beyond ``exclude_keys``; callers decide
        what to show, e.g. via :attr:`ComponentCompatibility.is_useful`.

        Args:
            analysis: Result of analyzing the page
            exclude_keys: Component keys to leave out (e.g. already on the page)

        Returns:
            One entry per remaining registered component, in catalog order
        """
        excluded = set(exclude_keys)
        return [
            self.analyze_component(entry, analysis)
            for entry in self.registry.get_all_contracts()
            if entry.component_key not in excluded
        ]

    def get_component_compatibility(
        self, component_key: str, analysis: PageStateAnalysis
    ) -> ComponentCompatibility | None:
        """Relate a single component to the page; ``None`` if it has no contract."""
        entry = self.registry.get_entry(component_key)
        if entry is None:
            return None
        return self.analyze_component(entry, analysis)

    def analyze_component(
        self, entry: ContractEntry, analysis: PageStateAnalysis
    ) -> ComponentCompatibility:
        """Analyze how a single component relates to the page state.

        The candidate is not on the page yet, so its own consumes are looked
        up with default bindings (namespace = logical name).
        """
        contract = entry.contract
        can_satisfy: list[CanSatisfyConsume] = []
        satisfied: list[ConsumesSatisfied] = []
        unsatisfied: list[ConsumesUnsatisfied] = []

        for logical_name, provides_schema in contract.provides.items():
            for missing in analysis.unsatisfied_consumes:
                if logical_name not in (missing.logical_name, missing.namespace):
                    continue
                compatibility = check_schema_compatibility(provides_schema, missing.schema)
                if compatibility.compatible:
                    can_satisfy.append(CanSatisfyConsume(
                        namespace=missing.namespace,
                        logical_name=logical_name,
                        compatibility=compatibility,
                    ))

        for logical_name, consumes_schema in contract.consumes.items():
            provider = analysis.provided_namespaces.get(logical_name)
            if provider is None:
                unsatisfied.append(ConsumesUnsatisfied(
                    namespace=logical_name,
                    logical_name=logical_name,
                    schema=consumes_schema,
                ))
                continue
            satisfied.append(ConsumesSatisfied(
                namespace=logical_name,
                logical_name=logical_name,
                provider_key=provider.component_key,
                compatibility=check_schema_compatibility(provider.schema, consumes_schema),
            ))

        return ComponentCompatibility(
            component_key=entry.component_key,
            contract=contract,
            description=entry.description,
            can_satisfy_consumes=can_satisfy,
            consumes_satisfied=satisfied,
            consumes_unsatisfied=unsatisfied,
        )


def build_validation_result(analysis: PageStateAnalysis) -> BindingValidationResult:
    """Turn a page analysis into errors and warnings."""
    errors: list[BindingError] = []
    warnings: list[BindingWarning] = []

    for missing in analysis.unsatisfied_consumes:
        errors.append(BindingError(
            placement_id=missing.placement_id,
            component_key=missing.component_key,
            namespace=missing.namespace,
            logical_name=missing.logical_name,
            type=BindingErrorType.MISSING_PROVIDER,
            message=(
                f'No component provides "{missing.namespace}" for '
                f'{missing.component_key}\'s "{missing.logical_name}"'
            ),
        ))

    for consume in analysis.incompatible_consumes:
        errors.append(BindingError(
            placement_id=consume.consumer_placement_id,
            component_key=consume.consumer_key,
            namespace=consume.namespace,
            logical_name=consume.consumer_logical_name,
            type=BindingErrorType.INCOMPATIBLE_SCHEMA,
            message=consume.compatibility.summary,
            details=consume.compatibility,
        ))

    return BindingValidationResult(valid=not errors, errors=errors, warnings=warnings)


async def find_compatible_components(
    registry: ContractRegistry,
    analysis: PageStateAnalysis,
    exclude_keys: Iterable[str] = (),
) -> list[ComponentCompatibility]:
    """Load the registry if needed and relate every component to the page."""
    await registry.load()
    return ComponentMatcher(registry).find_compatible_components(analysis, exclude_keys)


async def validate_page_bindings(
    registry: ContractRegistry, placements: Iterable[Placement]
) -> BindingValidationResult:
    """Validate all bindings in a page configuration."""
    analysis = await analyze_page_state(registry, placements)
    return build_validation_result(analysis)


async def get_component_compatibility(
    registry: ContractRegistry, component_key: str, placements: Iterable[Placement]
) -> ComponentCompatibility | None:
    """Relate one component to a page given by its placements."""
    analysis = await analyze_page_state(registry, placements)
    return ComponentMatcher(registry).get_component_compatibility(component_key, analysis)
