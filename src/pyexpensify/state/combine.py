"""Reducer composition: one root reducer built from named slice reducers."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from pyexpensify.exceptions import ReducerError
from pyexpensify.state.actions import Action

_logger = logging.getLogger(__name__)

Reducer = Callable[[Any, Action], Any]
"""A pure ``(state | None, action) -> state`` function."""


def combine_reducers(slices: Mapping[str, Reducer]) -> Reducer:
    """Combine slice reducers into a single root reducer.

    The root state is a ``dict`` keyed by slice name.  Every slice reducer
    runs on every action with its own slice of the previous root state.
    When no slice changes (by identity) the previous root state object is
    returned as-is.

    Keys of the incoming root state that no slice owns are dropped.
    """
    if not slices:
        raise ValueError("combine_reducers() needs at least one slice reducer")

    reducers = dict(slices)
    slice_names = frozenset(reducers)
    last_warned: frozenset[str] = frozenset()

    def combination(state: Mapping[str, Any] | None, action: Action) -> Mapping[str, Any]:
        nonlocal last_warned
        root: Mapping[str, Any] = state if state is not None else {}

        unexpected = frozenset(root) - slice_names
        # Warn when the stray key set changes, not on every action.
        if unexpected and unexpected != last_warned:
            last_warned = unexpected
            _logger.warning(
                "Dropping state keys with no reducer: %s (known slices: %s)",
                sorted(unexpected),
                sorted(slice_names),
            )

        changed = state is None or bool(unexpected) or len(root) != len(reducers)
        next_state: dict[str, Any] = {}
        for name, reducer in reducers.items():
            previous = root.get(name)
            result = reducer(previous, action)
            if result is None:
                raise ReducerError(
                    f"Reducer for slice {name!r} returned None for action {action.type!r}",
                    slice_name=name,
                )
            next_state[name] = result
            changed = changed or result is not previous

        return next_state if changed else root

    return combination
