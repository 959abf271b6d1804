"""Console sink: log the store state after every dispatch."""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic_core import to_jsonable_python

from pyexpensify.state.store import Store, Subscriber

_logger = logging.getLogger(__name__)


def to_jsonable(state: Any) -> Any:
    """Convert a state value to plain JSON-compatible data (camelCase keys)."""
    return to_jsonable_python(state, by_alias=True)


def state_logger(
    store: Store,
    *,
    logger: logging.Logger | None = None,
    level: int = logging.INFO,
) -> Subscriber:
    """Build a subscriber that logs ``store.get_state()`` as JSON."""
    log = logger or _logger

    def _log_state() -> None:
        if not log.isEnabledFor(level):
            return
        log.log(level, "State: %s", json.dumps(to_jsonable(store.get_state()), sort_keys=True))

    return _log_state
