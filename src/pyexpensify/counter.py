"""Counter example: the smallest useful store.

    store = create_store(counter_reducer, action_types=COUNTER_ACTION_TYPES)
    store.dispatch(increment(increment_by=5))
    store.get_state().count  # 5
"""

from __future__ import annotations

from enum import StrEnum
from typing import Literal

from pydantic import ConfigDict

from pyexpensify.models._base import StateModel
from pyexpensify.state.actions import Action


class CounterActionType(StrEnum):
    INCREMENT = "INCREMENT"
    DECREMENT = "DECREMENT"
    RESET = "RESET"


class CounterState(StateModel):
    count: int = 0


class Increment(Action):
    model_config = ConfigDict(extra="forbid")

    type: Literal["INCREMENT"] = "INCREMENT"
    increment_by: int = 1


class Decrement(Action):
    model_config = ConfigDict(extra="forbid")

    type: Literal["DECREMENT"] = "DECREMENT"
    decrement_by: int = 1


class Reset(Action):
    model_config = ConfigDict(extra="forbid")

    type: Literal["RESET"] = "RESET"


COUNTER_ACTION_TYPES: tuple[type[Action], ...] = (Increment, Decrement, Reset)


COUNTER_DEFAULT_STATE = CounterState()


def increment(*, increment_by: int = 1) -> Increment:
    return Increment(increment_by=increment_by)


def decrement(*, decrement_by: int = 1) -> Decrement:
    return Decrement(decrement_by=decrement_by)


def reset() -> Reset:
    return Reset()


def counter_reducer(state: CounterState | None, action: Action) -> CounterState:
    if state is None:
        state = COUNTER_DEFAULT_STATE

    match action:
        case Increment(increment_by=step):
            return state.updated(count=state.count + step)
        case Decrement(decrement_by=step):
            return state.updated(count=state.count - step)
        case Reset():
            return COUNTER_DEFAULT_STATE
        case _:
            return state
