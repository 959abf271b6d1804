"""Custom exception hierarchy for pyexpensify."""

from __future__ import annotations

from typing import Any


class PyExpensifyError(Exception):
    """Base exception for all pyexpensify errors."""


class PyExpensifyConfigError(PyExpensifyError):
    """Invalid or missing configuration."""


class MalformedActionError(PyExpensifyError, ValueError):
    """Dispatched value is not a well-formed action.

    Raised before any reducer runs, so the store state is untouched and
    no subscriber is notified.
    """

    def __init__(self, message: str, *, value: Any = None) -> None:
        self.value = value
        super().__init__(message)


class ReentrantDispatchError(PyExpensifyError, RuntimeError):
    """``dispatch`` was called while another dispatch was still running.

    Always raised for dispatches issued from inside a reducer.  Raised for
    dispatches issued from a subscriber unless the store is configured with
    :attr:`pyexpensify.config.ReentrantPolicy.DEFER`.
    """

    def __init__(self, message: str, *, action_type: str = "") -> None:
        self.action_type = action_type
        super().__init__(message)


class ReducerError(PyExpensifyError):
    """A slice reducer broke its contract (e.g. returned ``None``)."""

    def __init__(self, message: str, *, slice_name: str = "") -> None:
        self.slice_name = slice_name
        super().__init__(message)
