"""Single-owner state store.

The store is the only place the current state is replaced.  Every change
goes through :meth:`Store.dispatch`, which runs the root reducer and then
notifies subscribers synchronously, in registration order.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from pyexpensify.config import ReentrantPolicy, StoreConfig
from pyexpensify.exceptions import ReducerError, ReentrantDispatchError
from pyexpensify.state.actions import INIT, Action, action_types_by_tag, ensure_action
from pyexpensify.state.combine import Reducer

_logger = logging.getLogger(__name__)

Subscriber = Callable[[], None]


def _action_type(value: Any) -> str:
    if isinstance(value, Action):
        return value.type
    tag = value.get("type") if isinstance(value, Mapping) else None
    return tag if isinstance(tag, str) else ""


@dataclass(eq=False)
class _Subscription:
    callback: Subscriber
    active: bool = True


class Store:
    """Holds the current state and applies actions to it.

    Dispatch policy:

    - dispatching from inside the reducer always raises
      :class:`ReentrantDispatchError`;
    - dispatching from inside a subscriber raises too, unless the config
      selects :attr:`ReentrantPolicy.DEFER`, in which case the action is
      queued and applied after the current notification loop;
    - an exception from a subscriber propagates to the outer ``dispatch``
      caller; the new state stays in place and any still-queued deferred
      actions are discarded.

    The store is not thread safe.
    """

    def __init__(
        self,
        reducer: Reducer,
        initial_state: Any = None,
        *,
        config: StoreConfig | None = None,
        action_types: Iterable[type[Action]] = (),
    ) -> None:
        self._reducer = reducer
        self._config = config or StoreConfig()
        self._action_types = action_types_by_tag(action_types)
        self._subscribers: list[_Subscription] = []
        self._deferred: deque[Action] = deque()
        self._is_reducing = False
        self._is_notifying = False

        self._state = initial_state
        # Seeds defaults; composed slices missing from initial_state are filled in too.
        self._reduce(Action(type=INIT))

    @property
    def config(self) -> StoreConfig:
        return self._config

    def get_state(self) -> Any:
        """Return the current state. Callers must treat it as read-only."""
        return self._state

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register *callback* to run after every dispatch.

        Returns an unsubscribe function; calling it more than once is a no-op.
        A callback registered during a notification loop is first called on
        the next dispatch.
        """
        if not callable(callback):
            raise TypeError(f"Subscriber must be callable, got {type(callback).__name__}")

        subscription = _Subscription(callback)
        self._subscribers.append(subscription)

        def unsubscribe() -> None:
            if not subscription.active:
                return
            subscription.active = False
            self._subscribers.remove(subscription)

        return unsubscribe

    def unsubscribe(self, callback: Subscriber) -> None:
        """Remove the earliest active registration of *callback*, if any."""
        for subscription in self._subscribers:
            if subscription.callback is callback:
                subscription.active = False
                self._subscribers.remove(subscription)
                return

    def dispatch(self, action: Action | Mapping[str, Any]) -> Action:
        """Apply *action* and notify subscribers.

        Returns the normalized action so callers can read generated fields
        (e.g. an expense id) without looking them up again.
        """
        if self._is_reducing:
            action_type = _action_type(action)
            raise ReentrantDispatchError(
                f"Reducers may not dispatch actions (got {action_type!r})",
                action_type=action_type,
            )
        if self._is_notifying and self._config.reentrant_dispatch != ReentrantPolicy.DEFER:
            action_type = _action_type(action)
            raise ReentrantDispatchError(
                f"Cannot dispatch {action_type!r} while subscribers are being notified",
                action_type=action_type,
            )

        normalized = ensure_action(action, self._action_types)
        if self._is_notifying:
            self._deferred.append(normalized)
            _logger.debug("Deferred %s until subscribers finish", normalized.type)
            return normalized

        try:
            self._apply(normalized)
            while self._deferred:
                self._apply(self._deferred.popleft())
        except Exception:
            if self._deferred:
                _logger.warning(
                    "Discarding %d deferred action(s) after dispatch failure",
                    len(self._deferred),
                )
                self._deferred.clear()
            raise
        return normalized

    def _apply(self, action: Action) -> None:
        level = logging.INFO if self._config.log_dispatch else logging.DEBUG
        _logger.log(level, "Dispatching %s", action.type)
        self._reduce(action)
        self._notify()

    def _reduce(self, action: Action) -> None:
        self._is_reducing = True
        try:
            next_state = self._reducer(self._state, action)
        finally:
            self._is_reducing = False
        if next_state is None:
            raise ReducerError(f"Root reducer returned None for action {action.type!r}")
        self._state = next_state

    def _notify(self) -> None:
        self._is_notifying = True
        try:
            for subscription in tuple(self._subscribers):
                # Skip callbacks unsubscribed earlier in this same loop.
                if subscription.active:
                    subscription.callback()
        finally:
            self._is_notifying = False


def create_store(
    reducer: Reducer,
    initial_state: Any = None,
    *,
    config: StoreConfig | None = None,
    action_types: Iterable[type[Action]] = (),
) -> Store:
    """Create a :class:`Store` for *reducer*.

    *action_types* lists the typed action classes this store parses plain
    mapping actions into. Other tags are dispatched as generic actions.
    """
    return Store(reducer, initial_state, config=config, action_types=action_types)

