"""Binding resolution and typed state handles.

A contract talks about *logical names*; the page state is keyed by
*namespaces*. Bindings map one onto the other per placement, so two
placements of the same component can write to different namespaces.
"""

from collections.abc import Callable
from typing import Any

from pagewire.common.exceptions import BindingNotFoundError, ConfigurationError
from pagewire.models.contract import BindingConfig, ComponentContract, ResolvedBindings
from pagewire.models.enums import BindingDirection

from .store import PageState


def resolve_bindings(
    contract: ComponentContract, config: BindingConfig | None = None
) -> ResolvedBindings:
    """Resolve bindings, defaulting every logical name to itself.

    Entries of ``config`` naming logical names the contract does not declare
    are ignored.
    """
    provides_overrides = config.provides if config else {}
    consumes_overrides = config.consumes if config else {}

    return ResolvedBindings(
        provides={name: provides_overrides.get(name, name) for name in contract.provides},
        consumes={name: consumes_overrides.get(name, name) for name in contract.consumes},
    )


class ProvidesHandle:
    """Read/write access to the namespace bound to one provided logical name."""

    __slots__ = ("_page_state", "namespace", "logical_name")

    def __init__(self, page_state: PageState, namespace: str, logical_name: str):
        self._page_state = page_state
        self.namespace = namespace
        self.logical_name = logical_name

    def get(self) -> Any:
        return self._page_state.get(self.namespace)

    def set(self, value: Any) -> None:
        self._page_state.set(self.namespace, value)

    def unset(self) -> None:
        self._page_state.delete(self.namespace)

    def update(self, fn: Callable[[Any], Any]) -> None:
        self._page_state.update(self.namespace, fn)

    def __repr__(self) -> str:
        return f"ProvidesHandle({self.logical_name!r} -> {self.namespace!r})"


class ConsumesHandle:
    """Read-only access to the namespace bound to one consumed logical name.

    The handle keeps a reader, not the store, and exposes no write methods.
    """

    __slots__ = ("_read", "namespace", "logical_name")

    def __init__(self, page_state: PageState, namespace: str, logical_name: str):
        self._read: Callable[[str], Any] = page_state.get
        self.namespace = namespace
        self.logical_name = logical_name

    def get(self) -> Any:
        return self._read(self.namespace)

    def __repr__(self) -> str:
        return f"ConsumesHandle({self.logical_name!r} -> {self.namespace!r})"


class PlacementScope:
    """Everything one placement needs at render time.

    Attributes:
        contract: Contract of the placed component
        bindings: Resolved bindings of this placement
    """

    def __init__(
        self,
        page_state: PageState,
        contract: ComponentContract,
        bindings: ResolvedBindings,
    ):
        self._page_state = page_state
        self.contract = contract
        self.bindings = bindings

    def use_provides(self, logical_name: str) -> ProvidesHandle:
        """Handle for state this placement writes.

        Raises:
            BindingNotFoundError: If the contract has no such provided name
        """
        namespace = self.bindings.provides.get(logical_name)
        if not namespace:
            raise BindingNotFoundError(logical_name, BindingDirection.PROVIDES, self.contract.id)
        return ProvidesHandle(self._page_state, namespace, logical_name)

    def use_consumes(self, logical_name: str) -> ConsumesHandle:
        """Handle for state this placement reads.

        Raises:
            BindingNotFoundError: If the contract has no such consumed name
        """
        namespace = self.bindings.consumes.get(logical_name)
        if not namespace:
            raise BindingNotFoundError(logical_name, BindingDirection.CONSUMES, self.contract.id)
        return ConsumesHandle(self._page_state, namespace, logical_name)


def _check_contract(scope: PlacementScope, contract: ComponentContract) -> None:
    if scope.contract.id != contract.id:
        raise ConfigurationError(
            f'Contract "{contract.id}" used in a placement of "{scope.contract.id}"',
            config_key=contract.id,
        )


def use_provides(
    scope: PlacementScope, contract: ComponentContract, logical_name: str
) -> ProvidesHandle:
    """Create a state handle for a "provides" binding of ``contract``."""
    _check_contract(scope, contract)
    return scope.use_provides(logical_name)


def use_consumes(
    scope: PlacementScope, contract: ComponentContract, logical_name: str
) -> ConsumesHandle:
    """Create a read-only state handle for a "consumes" binding of ``contract``."""
    _check_contract(scope, contract)
    return scope.use_consumes(logical_name)
