"""Contract, binding and page placement models.

Contracts are declared once per component type; bindings and placements are
authored per page. All models are frozen pydantic models.
"""

from dataclasses import dataclass, field
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from .schema import Schema

__all__ = [
    "BindingConfig",
    "ComponentContract",
    "PageDefinition",
    "Placement",
    "ResolvedBindings",
]


class ComponentContract(BaseModel):
    """What a component writes to and reads from the page state.

    Attributes:
        id: Identifier of the contract, usually the component key
        provides: Schemas of the state the component writes, by logical name
        consumes: Schemas of the state the component reads, by logical name
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(validation_alias=AliasChoices("id", "$id"))
    provides: dict[str, Schema] = Field(default_factory=dict)
    consumes: dict[str, Schema] = Field(default_factory=dict)

    @field_validator("id")
    @classmethod
    def validate_id(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("contract id cannot be empty")
        return v


class BindingConfig(BaseModel):
    """Per-placement mapping from logical names to page state namespaces.

    Names left out fall back to the logical name itself.
    """

    model_config = ConfigDict(frozen=True)

    provides: dict[str, str] = Field(default_factory=dict)
    consumes: dict[str, str] = Field(default_factory=dict)

    @field_validator("provides", "consumes")
    @classmethod
    def validate_namespaces(cls, v: dict[str, str]) -> dict[str, str]:
        for logical_name, namespace in v.items():
            if not namespace or not namespace.strip():
                raise ValueError(f"empty namespace bound to '{logical_name}'")
        return v


@dataclass(frozen=True)
class ResolvedBindings:
    """Fully defaulted bindings: one namespace for every logical name of a contract."""

    provides: dict[str, str] = field(default_factory=dict)
    consumes: dict[str, str] = field(default_factory=dict)


class Placement(BaseModel):
    """One instance of a component on a page."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    placement_id: str = Field(validation_alias=AliasChoices("placement_id", "id"))
    component_key: str = Field(
        validation_alias=AliasChoices("component_key", "component", "componentKey")
    )
    enabled: bool = True
    bindings: BindingConfig | None = None
    props: dict[str, Any] = Field(default_factory=dict)


class PageDefinition(BaseModel):
    """A page assembled from component placements."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str = ""
    route: str = ""
    placements: tuple[Placement, ...] = ()

    @model_validator(mode="after")
    def validate_unique_placements(self) -> "PageDefinition":
        seen: set[str] = set()
        for placement in self.placements:
            if placement.placement_id in seen:
                raise ValueError(f"duplicate placement id '{placement.placement_id}'")
            seen.add(placement.placement_id)
        return self

    @property
    def component_keys(self) -> list[str]:
        """Component keys of enabled placements, in placement order."""
        return [p.component_key for p in self.placements if p.enabled]
