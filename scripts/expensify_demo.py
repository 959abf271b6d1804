#!/usr/bin/env python3
"""Replay the expense tracker walkthrough against a combined store.

Adds two expenses, removes the first, edits the second, then exercises
every filter action and prints the visible expense list.

Usage::

    python scripts/expensify_demo.py
    python scripts/expensify_demo.py --json
    python scripts/expensify_demo.py --json --output state.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyexpensify import StoreConfig, create_store  # noqa: E402
from pyexpensify.console import state_logger, to_jsonable  # noqa: E402
from pyexpensify.expenses import (  # noqa: E402
    EXPENSIFY_ACTION_TYPES,
    add_expense,
    edit_expense,
    expensify_reducer,
    get_visible_expenses,
    remove_expense,
    set_end_date,
    set_start_date,
    set_text_filter,
    sort_by_amount,
    sort_by_date,
)


def main() -> None:
    parser = argparse.ArgumentParser(description="Expense tracker store walkthrough.")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Print the final state as JSON")
    parser.add_argument("--output", "-o", help="Write the JSON state to FILE instead of stdout")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    store = create_store(
        expensify_reducer(),
        config=StoreConfig.from_env(),
        action_types=EXPENSIFY_ACTION_TYPES,
    )
    if not args.json_mode:
        store.subscribe(state_logger(store))

    expense_one = store.dispatch(add_expense(description="Rent", amount=100, created_at=-21000))
    expense_two = store.dispatch(add_expense(description="Coffee", amount=300, created_at=-1000))

    store.dispatch(remove_expense(id=expense_one.expense.id))
    store.dispatch(edit_expense(expense_two.expense.id, {"amount": 500}))

    store.dispatch(set_text_filter("rent"))
    store.dispatch(set_text_filter())
    store.dispatch(sort_by_amount())
    store.dispatch(sort_by_date())
    store.dispatch(set_start_date(-2000))
    store.dispatch(set_start_date())
    store.dispatch(set_end_date(1250))

    state = store.get_state()
    visible = get_visible_expenses(state["expenses"], state["filters"])

    if args.json_mode or args.output:
        payload = json.dumps({"state": to_jsonable(state), "visible": to_jsonable(visible)}, indent=2)
        if args.output:
            Path(args.output).write_text(payload, encoding="utf-8")
            print(f"JSON written to {args.output}", file=sys.stderr)
        else:
            print(payload)
    else:
        for expense in visible:
            print(f"{expense.description}: {expense.amount} (created {expense.created_at})")


if __name__ == "__main__":
    main()
