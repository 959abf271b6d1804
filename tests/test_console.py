from __future__ import annotations

import json
import logging

import pytest

from pyexpensify.console import state_logger, to_jsonable
from pyexpensify.expenses import add_expense, expensify_reducer, sort_by_amount
from pyexpensify.models.expense import Expense, Filters
from pyexpensify.state.store import create_store


def test_to_jsonable_uses_camel_case_and_lists() -> None:
    state = {
        "expenses": (Expense(id="a", description="Rent", amount=100, created_at=5),),
        "filters": Filters(),
    }
    assert to_jsonable(state) == {
        "expenses": [{"id": "a", "description": "Rent", "note": "", "amount": 100, "createdAt": 5}],
        "filters": {"text": "", "sortBy": "date", "startDate": None, "endDate": None},
    }


def test_state_logger_logs_after_each_dispatch(caplog: pytest.LogCaptureFixture) -> None:
    store = create_store(expensify_reducer())
    logger = logging.getLogger("tests.console")
    store.subscribe(state_logger(store, logger=logger))

    with caplog.at_level(logging.INFO, logger="tests.console"):
        action = store.dispatch(add_expense(description="Rent", amount=100))
        store.dispatch(sort_by_amount())

    messages = [record.getMessage() for record in caplog.records if record.name == "tests.console"]
    assert len(messages) == 2
    last = json.loads(messages[-1].removeprefix("State: "))
    assert last["filters"]["sortBy"] == "amount"
    assert last["expenses"][0]["id"] == action.expense.id


def test_state_logger_skips_when_level_disabled(caplog: pytest.LogCaptureFixture) -> None:
    store = create_store(expensify_reducer())
    logger = logging.getLogger("tests.console.quiet")
    store.subscribe(state_logger(store, logger=logger, level=logging.DEBUG))

    with caplog.at_level(logging.INFO, logger="tests.console.quiet"):
        store.dispatch(sort_by_amount())

    assert not [record for record in caplog.records if record.name == "tests.console.quiet"]
