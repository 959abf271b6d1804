"""Expense tracker domain: actions, reducers and selectors."""

from pyexpensify.expenses.actions import (
    EXPENSIFY_ACTION_TYPES,
    AddExpense,
    EditExpense,
    ExpenseActionType,
    FilterActionType,
    RemoveExpense,
    SetEndDate,
    SetStartDate,
    SetTextFilter,
    SortByAmount,
    SortByDate,
    add_expense,
    edit_expense,
    remove_expense,
    set_end_date,
    set_start_date,
    set_text_filter,
    sort_by_amount,
    sort_by_date,
)
from pyexpensify.expenses.reducers import (
    EXPENSES_DEFAULT_STATE,
    FILTERS_DEFAULT_STATE,
    expenses_reducer,
    expensify_reducer,
    filters_reducer,
)
from pyexpensify.expenses.selectors import get_visible_expenses

__all__ = [
    "EXPENSES_DEFAULT_STATE",
    "EXPENSIFY_ACTION_TYPES",
    "FILTERS_DEFAULT_STATE",
    "AddExpense",
    "EditExpense",
    "ExpenseActionType",
    "FilterActionType",
    "RemoveExpense",
    "SetEndDate",
    "SetStartDate",
    "SetTextFilter",
    "SortByAmount",
    "SortByDate",
    "add_expense",
    "edit_expense",
    "expenses_reducer",
    "expensify_reducer",
    "filters_reducer",
    "get_visible_expenses",
    "remove_expense",
    "set_end_date",
    "set_start_date",
    "set_text_filter",
    "sort_by_amount",
    "sort_by_date",
]
