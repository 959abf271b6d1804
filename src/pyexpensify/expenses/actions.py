"""Expense and filter actions plus their creators.

Creators take keyword arguments with a default for every optional field
and never raise for omitted ones.  ``add_expense`` generates the expense
id when the action is created, so dispatching the same action object
twice adds two entries with the same id rather than two different ids.
"""

from __future__ import annotations

import uuid
from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Any, Literal

from pydantic import ConfigDict, Field, field_serializer, field_validator

from pyexpensify.models.expense import Expense
from pyexpensify.state.actions import Action


class ExpenseActionType(StrEnum):
    ADD = "ADD_EXPENSE"
    REMOVE = "REMOVE_EXPENSE"
    EDIT = "EDIT_EXPENSE"


class FilterActionType(StrEnum):
    SET_TEXT = "SET_TEXT_FILTER"
    SORT_BY_DATE = "SORT_BY_DATE"
    SORT_BY_AMOUNT = "SORT_BY_AMOUNT"
    SET_START_DATE = "SET_START_DATE"
    SET_END_DATE = "SET_END_DATE"


class _TypedAction(Action):
    model_config = ConfigDict(extra="forbid")


class AddExpense(_TypedAction):
    type: Literal["ADD_EXPENSE"] = "ADD_EXPENSE"
    expense: Expense


class RemoveExpense(_TypedAction):
    type: Literal["REMOVE_EXPENSE"] = "REMOVE_EXPENSE"
    id: str | None = None


class EditExpense(_TypedAction):
    type: Literal["EDIT_EXPENSE"] = "EDIT_EXPENSE"
    id: str
    updates: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    @field_validator("updates")
    @classmethod
    def _freeze_updates(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(Expense.validate_updates(value))

    @field_serializer("updates")
    def _dump_updates(self, value: Mapping[str, Any]) -> dict[str, Any]:
        return dict(value)


class SetTextFilter(_TypedAction):
    type: Literal["SET_TEXT_FILTER"] = "SET_TEXT_FILTER"
    text: str = ""


class SortByDate(_TypedAction):
    type: Literal["SORT_BY_DATE"] = "SORT_BY_DATE"


class SortByAmount(_TypedAction):
    type: Literal["SORT_BY_AMOUNT"] = "SORT_BY_AMOUNT"


class SetStartDate(_TypedAction):
    type: Literal["SET_START_DATE"] = "SET_START_DATE"
    start_date: int | None = None


class SetEndDate(_TypedAction):
    type: Literal["SET_END_DATE"] = "SET_END_DATE"
    end_date: int | None = None


EXPENSIFY_ACTION_TYPES: tuple[type[Action], ...] = (
    AddExpense,
    RemoveExpense,
    EditExpense,
    SetTextFilter,
    SortByDate,
    SortByAmount,
    SetStartDate,
    SetEndDate,
)
"""Pass as ``create_store(..., action_types=EXPENSIFY_ACTION_TYPES)`` to accept plain mapping actions."""


def add_expense(
    *,
    description: str = "",
    note: str = "",
    amount: int = 0,
    created_at: int = 0,
) -> AddExpense:
    return AddExpense(
        expense=Expense(
            id=uuid.uuid4().hex,
            description=description,
            note=note,
            amount=amount,
            created_at=created_at,
        )
    )


def remove_expense(*, id: str | None = None) -> RemoveExpense:  # noqa: A002
    return RemoveExpense(id=id)


def edit_expense(expense_id: str, updates: Mapping[str, Any] | None = None, **changes: Any) -> EditExpense:
    """Build an edit action; *updates* and keyword *changes* are merged, keywords winning."""
    merged = {**(updates or {}), **changes}
    return EditExpense(id=expense_id, updates=merged)


def set_text_filter(text: str = "") -> SetTextFilter:
    return SetTextFilter(text=text)


def sort_by_date() -> SortByDate:
    return SortByDate()


def sort_by_amount() -> SortByAmount:
    return SortByAmount()


def set_start_date(start_date: int | None = None) -> SetStartDate:
    return SetStartDate(start_date=start_date)


def set_end_date(end_date: int | None = None) -> SetEndDate:
    return SetEndDate(end_date=end_date)
