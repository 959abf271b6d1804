"""Tests for the immutable state models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pyexpensify.models.expense import Expense, Filters, SortBy


class TestExpense:
    def test_accepts_field_names_and_camel_case(self) -> None:
        by_name = Expense(id="a", created_at=10)
        by_alias = Expense.model_validate({"id": "a", "createdAt": 10})
        assert by_name == by_alias

    def test_requires_non_empty_id(self) -> None:
        with pytest.raises(ValidationError):
            Expense(id="")

    def test_is_frozen(self) -> None:
        expense = Expense(id="a")
        with pytest.raises(ValidationError):
            expense.amount = 5  # type: ignore[misc]

    def test_updated_returns_validated_copy(self) -> None:
        expense = Expense(id="a", description="Rent", amount=100)
        edited = expense.updated(amount=500)
        assert edited == Expense(id="a", description="Rent", amount=500)
        assert expense.amount == 100

    def test_updated_without_changes_is_identity(self) -> None:
        expense = Expense(id="a")
        assert expense.updated() is expense

    def test_updated_validates_values(self) -> None:
        with pytest.raises(ValidationError):
            Expense(id="a").updated(amount="lots")

    def test_normalize_updates(self) -> None:
        assert Expense.normalize_updates({"createdAt": 1, "note": "x"}) == {"created_at": 1, "note": "x"}
        with pytest.raises(ValueError, match="cannot be updated"):
            Expense.normalize_updates({"id": "b"})
        with pytest.raises(ValueError, match="no field"):
            Expense.normalize_updates({"colour": "red"})


    def test_validate_updates_coerces_and_rejects_values(self) -> None:
        assert Expense.validate_updates({"createdAt": "7", "amount": 3}) == {"created_at": 7, "amount": 3}
        with pytest.raises(ValidationError):
            Expense.validate_updates({"amount": "lots"})
        with pytest.raises(ValueError, match="cannot be updated"):
            Expense.validate_updates({"id": "b"})


def test_filters_defaults() -> None:
    filters = Filters()
    assert (filters.text, filters.sort_by, filters.start_date, filters.end_date) == ("", SortBy.DATE, None, None)


def test_filters_accepts_sort_by_string() -> None:
    assert Filters.model_validate({"sortBy": "amount"}).sort_by is SortBy.AMOUNT
