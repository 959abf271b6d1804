"""Store configuration for pyexpensify."""

from __future__ import annotations

import dataclasses
import enum
import os
from typing import Any

from pyexpensify.exceptions import PyExpensifyConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


class ReentrantPolicy(enum.StrEnum):
    """What a store does with ``dispatch`` calls issued from a subscriber."""

    RAISE = "raise"
    DEFER = "defer"


@dataclasses.dataclass(frozen=True)
class StoreConfig:
    """Store configuration.

    Parameters
    ----------
    reentrant_dispatch : ReentrantPolicy
        Policy for dispatches issued while subscribers are being notified.
        ``RAISE`` rejects them with
        :class:`~pyexpensify.exceptions.ReentrantDispatchError`; ``DEFER``
        queues them and runs them, in order, once the current notification
        loop has finished.  Dispatching from inside a reducer is rejected
        regardless of this setting.
    log_dispatch : bool
        Log every dispatched action type at ``INFO`` instead of ``DEBUG``.
    """

    reentrant_dispatch: ReentrantPolicy = ReentrantPolicy.RAISE
    log_dispatch: bool = False

    @classmethod
    def from_env(cls, **overrides: Any) -> StoreConfig:
        """Create configuration from environment variables.

        Reads ``PYEXPENSIFY_REENTRANT_DISPATCH`` (``raise`` or ``defer``) and
        ``PYEXPENSIFY_LOG_DISPATCH``. Explicit keyword arguments override
        environment values.

        Raises
        ------
        PyExpensifyConfigError
            If the re-entrancy policy is not recognised.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        policy_env = env.get("PYEXPENSIFY_REENTRANT_DISPATCH")
        if policy_env is not None and "reentrant_dispatch" not in overrides:
            config_kwargs["reentrant_dispatch"] = policy_env

        if "log_dispatch" not in overrides:
            config_kwargs["log_dispatch"] = _env_bool(env.get("PYEXPENSIFY_LOG_DISPATCH"), False)

        config_kwargs.update(overrides)

        policy = config_kwargs.get("reentrant_dispatch", ReentrantPolicy.RAISE)
        try:
            config_kwargs["reentrant_dispatch"] = ReentrantPolicy(str(policy).strip().lower())
        except ValueError as exc:
            raise PyExpensifyConfigError(f"Unknown re-entrant dispatch policy: {policy!r}") from exc

        return cls(**config_kwargs)
