from __future__ import annotations

import pytest

from pyexpensify.expenses import get_visible_expenses
from pyexpensify.models.expense import Expense, Filters, SortBy


@pytest.fixture
def expenses() -> list[Expense]:
    return [
        Expense(id="1", description="Gum", amount=195, created_at=0),
        Expense(id="2", description="Rent", amount=109500, created_at=-4000),
        Expense(id="3", description="Credit Card", amount=4500, created_at=4000),
    ]


def _ids(result: tuple[Expense, ...]) -> list[str]:
    return [expense.id for expense in result]


def test_default_filters_sort_newest_first(expenses: list[Expense]) -> None:
    assert _ids(get_visible_expenses(expenses, Filters())) == ["3", "1", "2"]


def test_text_filter_is_case_insensitive(expenses: list[Expense]) -> None:
    assert _ids(get_visible_expenses(expenses, Filters(text="e"))) == ["3", "2"]
    assert _ids(get_visible_expenses(expenses, Filters(text="RENT"))) == ["2"]


def test_start_date_is_inclusive(expenses: list[Expense]) -> None:
    assert _ids(get_visible_expenses(expenses, Filters(start_date=0))) == ["3", "1"]


def test_end_date_is_inclusive(expenses: list[Expense]) -> None:
    assert _ids(get_visible_expenses(expenses, Filters(end_date=0))) == ["1", "2"]


def test_sort_by_amount_largest_first(expenses: list[Expense]) -> None:
    assert _ids(get_visible_expenses(expenses, Filters(sort_by=SortBy.AMOUNT))) == ["2", "3", "1"]


def test_input_is_not_reordered(expenses: list[Expense]) -> None:
    snapshot = list(expenses)
    get_visible_expenses(expenses, Filters(sort_by=SortBy.AMOUNT))
    assert expenses == snapshot


def test_empty_input() -> None:
    assert get_visible_expenses((), Filters(text="x")) == ()
