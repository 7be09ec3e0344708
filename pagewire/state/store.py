"""Reactive page state store and its page-level scope.

One :class:`PageState` exists per rendered page. It maps namespaces to
values and notifies subscribers synchronously after every write. The
:class:`PageScope` owns the store for the lifetime of the page and is passed
explicitly to every placement on it.
"""

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, TypeVar

from pagewire.common.exceptions import ScopeError
from pagewire.models.contract import BindingConfig, ComponentContract

if TYPE_CHECKING:
    from .bindings import PlacementScope

T = TypeVar("T")

Subscriber = Callable[[Any], None]

logger = logging.getLogger(__name__)


class PageState:
    """Namespace → value map shared by all placements of one page.

    Absent namespaces read as ``None``. Writes are unrestricted at this
    level; components are expected to go through the handles returned by
    :meth:`PlacementScope.use_provides` and :meth:`PlacementScope.use_consumes`.
    """

    def __init__(self, initial: dict[str, Any] | None = None):
        self._state: dict[str, Any] = dict(initial or {})
        self._subscribers: dict[str, list[Subscriber]] = {}

    def get(self, namespace: str, default: T | None = None) -> T | None:
        """Get a value by its full namespaced key."""
        return self._state.get(namespace, default)

    def has(self, namespace: str) -> bool:
        return namespace in self._state

    def set(self, namespace: str, value: Any) -> None:
        """Set a value by its full namespaced key."""
        self._state[namespace] = value
        self._notify(namespace, value)

    def update(self, namespace: str, fn: Callable[[Any], Any]) -> None:
        """Replace a value with ``fn(current)``; ``current`` is ``None`` when absent."""
        self.set(namespace, fn(self._state.get(namespace)))

    def delete(self, namespace: str) -> None:
        """Make a namespace absent again."""
        if namespace in self._state:
            del self._state[namespace]
            self._notify(namespace, None)

    def get_namespace(self, prefix: str) -> dict[str, Any]:
        """Collect every ``prefix.key`` entry into ``{key: value}``."""
        dotted = f"{prefix}."
        return {
            key[len(dotted):]: value
            for key, value in self._state.items()
            if key.startswith(dotted)
        }

    def subscribe(self, namespace: str, callback: Subscriber) -> Callable[[], None]:
        """Call ``callback(value)`` after each write to ``namespace``.

        Returns:
            A function that removes the subscription
        """
        self._subscribers.setdefault(namespace, []).append(callback)

        def unsubscribe() -> None:
            callbacks = self._subscribers.get(namespace, [])
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    def snapshot(self) -> dict[str, Any]:
        """Shallow copy of the raw state, for debugging."""
        return dict(self._state)

    def clear(self) -> None:
        self._state.clear()
        self._subscribers.clear()

    def _notify(self, namespace: str, value: Any) -> None:
        for callback in list(self._subscribers.get(namespace, [])):
            callback(value)

    def __contains__(self, namespace: str) -> bool:
        return self.has(namespace)

    def __len__(self) -> int:
        return len(self._state)


class PageScope:
    """Owns the page state of one rendered page.

    Usage:
        scope = PageScope()
        with scope.mounted():
            placement = scope.placement(FilterContract, bindings)
            placement.use_provides("filters").set({"search": ""})
    """

    def __init__(self) -> None:
        self._page_state: PageState | None = None

    @property
    def is_mounted(self) -> bool:
        return self._page_state is not None

    def init_page_state(self) -> PageState:
        """Create the page state for a newly mounted page."""
        if self._page_state is not None:
            logger.debug("Page state re-initialized; previous state discarded")
            self._page_state.clear()
        self._page_state = PageState()
        return self._page_state

    def get_page_state(self) -> PageState:
        """Return the page state.

        Raises:
            ScopeError: If the page has not been mounted
        """
        if self._page_state is None:
            raise ScopeError(
                "PageState not found. Did you forget to call init_page_state() for this page?"
            )
        return self._page_state

    def teardown(self) -> None:
        """Discard the page state when the page unmounts."""
        if self._page_state is not None:
            self._page_state.clear()
        self._page_state = None

    @contextmanager
    def mounted(self) -> Iterator[PageState]:
        """Page state that lives for the duration of the ``with`` block."""
        page_state = self.init_page_state()
        try:
            yield page_state
        finally:
            self.teardown()

    def placement(
        self, contract: ComponentContract, binding_config: BindingConfig | None = None
    ) -> "PlacementScope":
        """Build the scope of one placement, with its bindings resolved.

        Raises:
            ScopeError: If the page has not been mounted
        """
        # bindings imports this module
        from .bindings import PlacementScope, resolve_bindings

        return PlacementScope(
            self.get_page_state(), contract, resolve_bindings(contract, binding_config)
        )
