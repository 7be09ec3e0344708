"""Compatibility result models.

Note: This module must NOT import from any pagewire modules except .enums
to keep the models package free of circular imports.
"""

from dataclasses import dataclass, field
from typing import Any

from .enums import BLOCKING_STATUSES, PropertyStatus

__all__ = [
    "CompatibilityResult",
    "PropertyCompatibility",
]


@dataclass(frozen=True)
class PropertyCompatibility:
    """Compatibility of one property consumed by a component.

    Attributes:
        property: Property name on the consumes side
        status: Outcome for this property
        message: Human-readable explanation, absent for compatible properties
    """

    property: str
    status: PropertyStatus
    message: str | None = None

    @property
    def is_blocking(self) -> bool:
        return self.status in BLOCKING_STATUSES

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"property": self.property, "status": self.status.value}
        if self.message is not None:
            data["message"] = self.message
        return data


@dataclass(frozen=True)
class CompatibilityResult:
    """Outcome of checking a provides schema against a consumes schema.

    Attributes:
        compatible: Whether the provided shape satisfies the consumer
        details: Per-property report (empty for non-object comparisons)
        summary: Single human-readable sentence
    """

    compatible: bool
    details: tuple[PropertyCompatibility, ...] = field(default_factory=tuple)
    summary: str = ""

    @property
    def blocking(self) -> list[PropertyCompatibility]:
        """Details that make the schemas incompatible."""
        return [d for d in self.details if d.is_blocking]

    def get_detail(self, property_name: str) -> PropertyCompatibility | None:
        for detail in self.details:
            if detail.property == property_name:
                return detail
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "compatible": self.compatible,
            "details": [d.to_dict() for d in self.details],
            "summary": self.summary,
        }
