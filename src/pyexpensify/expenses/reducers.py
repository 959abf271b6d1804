"""Reducers for the expense tracker.

Each reducer returns its input state object unchanged for actions it does
not handle, including actions that target an id it does not hold.
"""

from __future__ import annotations

from pyexpensify.expenses.actions import (
    AddExpense,
    EditExpense,
    RemoveExpense,
    SetEndDate,
    SetStartDate,
    SetTextFilter,
    SortByAmount,
    SortByDate,
)
from pyexpensify.models.expense import Expense, Filters, SortBy
from pyexpensify.state.actions import Action
from pyexpensify.state.combine import Reducer, combine_reducers

EXPENSES_DEFAULT_STATE: tuple[Expense, ...] = ()
FILTERS_DEFAULT_STATE = Filters()


def expenses_reducer(state: tuple[Expense, ...] | None, action: Action) -> tuple[Expense, ...]:
    if state is None:
        state = EXPENSES_DEFAULT_STATE

    match action:
        case AddExpense(expense=expense):
            return (*state, expense)
        case RemoveExpense(id=expense_id):
            if not any(expense.id == expense_id for expense in state):
                return state
            return tuple(expense for expense in state if expense.id != expense_id)
        case EditExpense(id=expense_id, updates=updates):
            if not any(expense.id == expense_id for expense in state):
                return state
            return tuple(
                expense.updated(**updates) if expense.id == expense_id else expense for expense in state
            )
        case _:
            return state


def filters_reducer(state: Filters | None, action: Action) -> Filters:
    if state is None:
        state = FILTERS_DEFAULT_STATE

    match action:
        case SetTextFilter(text=text):
            return state.updated(text=text)
        case SortByDate():
            return state.updated(sort_by=SortBy.DATE)
        case SortByAmount():
            return state.updated(sort_by=SortBy.AMOUNT)
        case SetStartDate(start_date=start_date):
            return state.updated(start_date=start_date)
        case SetEndDate(end_date=end_date):
            return state.updated(end_date=end_date)
        case _:
            return state


def expensify_reducer() -> Reducer:
    """Root reducer with ``expenses`` and ``filters`` slices."""
    return combine_reducers({"expenses": expenses_reducer, "filters": filters_reducer})
