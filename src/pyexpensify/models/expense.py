"""Expense tracker state values."""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar

from pydantic import Field, field_validator

from pyexpensify.models._base import StateModel


class SortBy(StrEnum):
    DATE = "date"
    AMOUNT = "amount"


class Expense(StateModel):
    """A single expense entry. ``amount`` is in cents, ``created_at`` in epoch ms."""

    _IMMUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset({"id"})

    id: str = Field(..., description="Generated unique identifier")
    description: str = ""
    note: str = ""
    amount: int = 0
    created_at: int = 0

    @field_validator("id")
    @classmethod
    def _require_id(cls, value: str) -> str:
        if not value:
            raise ValueError("expense id must be non-empty")
        return value


class Filters(StateModel):
    """Filter settings for the visible expense list."""

    text: str = ""
    sort_by: SortBy = SortBy.DATE
    start_date: int | None = None
    end_date: int | None = None
