"""Analysis data models for PageWire page validation.

This module defines the output structures of the page analyzer, the
component matcher and the binding validator. All of them are recomputed from
a page configuration on demand and never stored.
"""

from dataclasses import dataclass, field
from typing import Any

from .compatibility import CompatibilityResult
from .contract import ComponentContract
from .enums import BindingErrorType
from .schema import Schema

__all__ = [
    "BindingError",
    "BindingValidationResult",
    "BindingWarning",
    "CanSatisfyConsume",
    "ComponentCompatibility",
    "ConsumesSatisfied",
    "ConsumesUnsatisfied",
    "PageStateAnalysis",
    "ProvidedNamespace",
    "SatisfiedConsume",
    "ShadowedProvider",
    "UnsatisfiedConsume",
]


# ============================================================================
# Page analysis
# ============================================================================


@dataclass(frozen=True)
class ProvidedNamespace:
    """A namespace written by a placement on the page.

    Attributes:
        schema: Schema the provider declares for the namespace
        component_key: Component type of the provider
        placement_id: Placement that provides the namespace
        logical_name: Name used in the provider's contract
    """

    schema: Schema
    component_key: str
    placement_id: str
    logical_name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "schema": self.schema.describe(),
            "component_key": self.component_key,
            "placement_id": self.placement_id,
            "logical_name": self.logical_name,
        }


@dataclass(frozen=True)
class UnsatisfiedConsume:
    """A consumed namespace with no provider on the page."""

    namespace: str
    schema: Schema
    component_key: str
    placement_id: str
    logical_name: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "namespace": self.namespace,
            "schema": self.schema.describe(),
            "component_key": self.component_key,
            "placement_id": self.placement_id,
            "logical_name": self.logical_name,
        }


@dataclass(frozen=True)
class SatisfiedConsume:
    """A consumed namespace that has a provider, compatible or not."""

    namespace: str
    consumer_key: str
    consumer_placement_id: str
    consumer_logical_name: str
    provider_key: str
    provider_placement_id: str
    compatibility: CompatibilityResult

    def to_dict(self) -> dict[str, Any]:
        return {
            "namespace": self.namespace,
            "consumer_key": self.consumer_key,
            "consumer_placement_id": self.consumer_placement_id,
            "consumer_logical_name": self.consumer_logical_name,
            "provider_key": self.provider_key,
            "provider_placement_id": self.provider_placement_id,
            "compatibility": self.compatibility.to_dict(),
        }


@dataclass(frozen=True)
class ShadowedProvider:
    """A provider overwritten by a later placement writing the same namespace."""

    namespace: str
    provider: ProvidedNamespace
    overridden_by: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "namespace": self.namespace,
            "provider": self.provider.to_dict(),
            "overridden_by": self.overridden_by,
        }


@dataclass(frozen=True)
class PageStateAnalysis:
    """How the placements of a page share state.

    Attributes:
        provided_namespaces: Provider of each namespace (last placement wins)
        unsatisfied_consumes: Consumes with no provider
        satisfied_consumes: Consumes with a provider and the compatibility check
        shadowed_providers: Providers overwritten by a later placement (page order)
    """

    provided_namespaces: dict[str, ProvidedNamespace] = field(default_factory=dict)
    unsatisfied_consumes: list[UnsatisfiedConsume] = field(default_factory=list)
    satisfied_consumes: list[SatisfiedConsume] = field(default_factory=list)
    shadowed_providers: list[ShadowedProvider] = field(default_factory=list)

    @property
    def incompatible_consumes(self) -> list[SatisfiedConsume]:
        return [s for s in self.satisfied_consumes if not s.compatibility.compatible]

    @property
    def is_valid(self) -> bool:
        """True when every consume has a compatible provider."""
        return not self.unsatisfied_consumes and not self.incompatible_consumes

    def to_dict(self) -> dict[str, Any]:
        return {
            "provided_namespaces": {
                namespace: provided.to_dict()
                for namespace, provided in self.provided_namespaces.items()
            },
            "unsatisfied_consumes": [u.to_dict() for u in self.unsatisfied_consumes],
            "satisfied_consumes": [s.to_dict() for s in self.satisfied_consumes],
            "shadowed_providers": [s.to_dict() for s in self.shadowed_providers],
            "is_valid": self.is_valid,
        }


# ============================================================================
# Component matching
# ============================================================================


@dataclass(frozen=True)
class CanSatisfyConsume:
    """An unsatisfied consume of the page that a candidate could provide."""

    namespace: str
    logical_name: str
    compatibility: CompatibilityResult

    def to_dict(self) -> dict[str, Any]:
        return {
            "namespace": self.namespace,
            "logical_name": self.logical_name,
            "compatibility": self.compatibility.to_dict(),
        }


@dataclass(frozen=True)
class ConsumesSatisfied:
    """A candidate's consume that an existing provider on the page answers."""

    namespace: str
    logical_name: str
    provider_key: str
    compatibility: CompatibilityResult

    def to_dict(self) -> dict[str, Any]:
        return {
            "namespace": self.namespace,
            "logical_name": self.logical_name,
            "provider_key": self.provider_key,
            "compatibility": self.compatibility.to_dict(),
        }


@dataclass(frozen=True)
class ConsumesUnsatisfied:
    """A candidate's consume that nothing on the page provides."""

    namespace: str
    logical_name: str
    schema: Schema

    def to_dict(self) -> dict[str, Any]:
        return {
            "namespace": self.namespace,
            "logical_name": self.logical_name,
            "schema": self.schema.describe(),
        }


@dataclass(frozen=True)
class ComponentCompatibility:
    """How a candidate component relates to the current page state."""

    component_key: str
    contract: ComponentContract
    description: str
    can_satisfy_consumes: list[CanSatisfyConsume] = field(default_factory=list)
    consumes_satisfied: list[ConsumesSatisfied] = field(default_factory=list)
    consumes_unsatisfied: list[ConsumesUnsatisfied] = field(default_factory=list)

    @property
    def is_useful(self) -> bool:
        """True if the candidate fills a gap or could be dropped in without new gaps."""
        if self.can_satisfy_consumes:
            return True
        return not self.consumes_unsatisfied and all(
            c.compatibility.compatible for c in self.consumes_satisfied
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "component_key": self.component_key,
            "description": self.description,
            "can_satisfy_consumes": [c.to_dict() for c in self.can_satisfy_consumes],
            "consumes_satisfied": [c.to_dict() for c in self.consumes_satisfied],
            "consumes_unsatisfied": [c.to_dict() for c in self.consumes_unsatisfied],
            "is_useful": self.is_useful,
        }


# ============================================================================
# Binding validation
# ============================================================================


@dataclass(frozen=True)
class BindingError:
    """A wiring problem that breaks a placement."""

    placement_id: str
    component_key: str
    namespace: str
    logical_name: str
    type: BindingErrorType
    message: str
    details: CompatibilityResult | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "placement_id": self.placement_id,
            "component_key": self.component_key,
            "namespace": self.namespace,
            "logical_name": self.logical_name,
            "type": self.type.value,
            "message": self.message,
        }
        if self.details is not None:
            data["details"] = self.details.to_dict()
        return data


@dataclass(frozen=True)
class BindingWarning:
    """A wiring oddity that does not break the page."""

    placement_id: str
    component_key: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "placement_id": self.placement_id,
            "component_key": self.component_key,
            "message": self.message,
        }


@dataclass(frozen=True)
class BindingValidationResult:
    """Errors and warnings for a whole page."""

    valid: bool
    errors: list[BindingError] = field(default_factory=list)
    warnings: list[BindingWarning] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
        }
