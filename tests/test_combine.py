from __future__ import annotations

import logging
from typing import Any

import pytest

from pyexpensify.exceptions import ReducerError
from pyexpensify.expenses import add_expense, expensify_reducer, set_text_filter
from pyexpensify.models.expense import Filters
from pyexpensify.state.actions import INIT, Action
from pyexpensify.state.combine import combine_reducers


def _count_reducer(state: int | None, action: Action) -> int:
    if state is None:
        return 0
    if action.type == "BUMP":
        return state + 1
    return state


def test_initial_call_builds_every_slice() -> None:
    root = expensify_reducer()
    state = root(None, Action(type=INIT))
    assert state == {"expenses": (), "filters": Filters()}


@pytest.mark.parametrize("action_type", [INIT, "ADD_EXPENSE_TYPO", "SET_TEXT_FILTER", "BUMP"])
def test_root_state_has_exactly_the_slice_keys(action_type: str) -> None:
    root = combine_reducers({"a": _count_reducer, "b": _count_reducer})
    state = root({"a": 1, "b": 2, "stray": 3}, Action(type=action_type))
    assert set(state) == {"a", "b"}


def test_every_slice_sees_every_action() -> None:
    seen: dict[str, list[str]] = {"a": [], "b": []}

    def recorder(name: str) -> Any:
        def reducer(state: int | None, action: Action) -> int:
            seen[name].append(action.type)
            return 0 if state is None else state

        return reducer

    root = combine_reducers({"a": recorder("a"), "b": recorder("b")})
    root(None, Action(type="ONE"))
    root({"a": 0, "b": 0}, Action(type="TWO"))

    assert seen == {"a": ["ONE", "TWO"], "b": ["ONE", "TWO"]}


def test_unchanged_slices_return_same_root_object() -> None:
    root = combine_reducers({"a": _count_reducer, "b": _count_reducer})
    state = {"a": 1, "b": 2}
    assert root(state, Action(type="NOPE")) is state


def test_changed_slice_builds_new_root_and_keeps_other_slice_identity() -> None:
    root = expensify_reducer()
    state = root(None, Action(type=INIT))

    next_state = root(state, add_expense(description="Rent", amount=100))

    assert next_state is not state
    assert next_state["filters"] is state["filters"]
    assert state["expenses"] == ()


def test_action_for_one_slice_does_not_touch_other() -> None:
    root = expensify_reducer()
    state = root(None, Action(type=INIT))

    next_state = root(state, set_text_filter("rent"))

    assert next_state["expenses"] is state["expenses"]
    assert next_state["filters"].text == "rent"


def test_stray_keys_are_dropped_with_a_single_warning(caplog: pytest.LogCaptureFixture) -> None:
    root = combine_reducers({"a": _count_reducer})
    with caplog.at_level(logging.WARNING, logger="pyexpensify.state.combine"):
        first = root({"a": 1, "stray": 1}, Action(type="NOPE"))
        root({"a": 1, "stray": 2}, Action(type="NOPE"))

    assert first == {"a": 1}
    assert caplog.text.count("Dropping state keys") == 1


def test_stray_key_warning_repeats_only_when_keys_change(caplog: pytest.LogCaptureFixture) -> None:
    root = combine_reducers({"a": _count_reducer})
    with caplog.at_level(logging.WARNING, logger="pyexpensify.state.combine"):
        root({"a": 1, "x": 1}, Action(type="NOPE"))
        root({"a": 1, "y": 1}, Action(type="NOPE"))
        root({"a": 1, "y": 2}, Action(type="NOPE"))
        root({"a": 1, "x": 1}, Action(type="NOPE"))

    assert caplog.text.count("Dropping state keys") == 3


def test_slice_returning_none_raises() -> None:
    root = combine_reducers({"a": _count_reducer, "broken": lambda state, action: None})
    with pytest.raises(ReducerError) as exc_info:
        root(None, Action(type=INIT))
    assert exc_info.value.slice_name == "broken"


def test_empty_slice_mapping_rejected() -> None:
    with pytest.raises(ValueError):
        combine_reducers({})
