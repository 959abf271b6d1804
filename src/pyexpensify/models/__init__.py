"""Immutable state value models."""

from pyexpensify.models._base import StateModel
from pyexpensify.models.expense import Expense, Filters, SortBy

__all__ = [
    "Expense",
    "Filters",
    "SortBy",
    "StateModel",
]
