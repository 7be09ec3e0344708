"""Registry entry models."""

from dataclasses import dataclass
from typing import Any

from .contract import ComponentContract

__all__ = [
    "ContractEntry",
    "LoadFailure",
]


@dataclass(frozen=True)
class ContractEntry:
    """A component known to the registry together with its contract."""

    component_key: str
    contract: ComponentContract
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "component_key": self.component_key,
            "description": self.description,
            "contract": self.contract.model_dump(mode="json"),
        }


@dataclass(frozen=True)
class LoadFailure:
    """A component whose contract could not be loaded."""

    component_key: str
    error: str

    def to_dict(self) -> dict[str, Any]:
        return {"component_key": self.component_key, "error": self.error}
