#!/usr/bin/env python3
"""Drive the counter store through increment, decrement and reset.

Usage::

    python scripts/counter_demo.py            # log state after every dispatch
    python scripts/counter_demo.py --json     # print only the final state
    python scripts/counter_demo.py -v         # include dispatch debug logs
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
from pyexpensify.counter import COUNTER_ACTION_TYPES, counter_reducer, decrement, increment, reset  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Counter store walkthrough.")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Print the final state as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    store = create_store(counter_reducer, config=StoreConfig.from_env(), action_types=COUNTER_ACTION_TYPES)
    if not args.json_mode:
        store.subscribe(state_logger(store))

    store.dispatch(increment())
    store.dispatch(increment(increment_by=5))
    store.dispatch(decrement())
    store.dispatch(reset())
    store.dispatch(decrement(decrement_by=10))

    if args.json_mode:
        print(json.dumps(to_jsonable(store.get_state()), indent=2))


if __name__ == "__main__":
    main()
