"""Page state: the store, its scope and binding-aware handles."""

from .bindings import (
    ConsumesHandle,
    PlacementScope,
    ProvidesHandle,
    resolve_bindings,
    use_consumes,
    use_provides,
)
from .store import PageScope, PageState

__all__ = [
    "PageState",
    "PageScope",
    "PlacementScope",
    "ProvidesHandle",
    "ConsumesHandle",
    "resolve_bindings",
    "use_provides",
    "use_consumes",
]
