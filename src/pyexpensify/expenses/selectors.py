"""Derived views over expense state."""

from __future__ import annotations

from collections.abc import Iterable

from pyexpensify.models.expense import Expense, Filters, SortBy


def _matches(expense: Expense, filters: Filters) -> bool:
    if filters.start_date is not None and expense.created_at < filters.start_date:
        return False
    if filters.end_date is not None and expense.created_at > filters.end_date:
        return False
    return filters.text.casefold() in expense.description.casefold()


def get_visible_expenses(expenses: Iterable[Expense], filters: Filters) -> tuple[Expense, ...]:
    """Expenses within the date range whose description contains the filter text.

    Sorted newest first for ``SortBy.DATE`` and largest first for
    ``SortBy.AMOUNT``.  The sort is stable, so ties keep insertion order.
    """
    visible = [expense for expense in expenses if _matches(expense, filters)]
    if filters.sort_by == SortBy.AMOUNT:
        visible.sort(key=lambda expense: expense.amount, reverse=True)
    else:
        visible.sort(key=lambda expense: expense.created_at, reverse=True)
    return tuple(visible)
