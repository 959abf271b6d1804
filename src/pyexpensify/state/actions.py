"""Actions: immutable, tagged descriptions of an intent to change state.

Every action is a frozen pydantic model with a non-empty string ``type``.
Typed subclasses fix their ``type`` with a ``Literal`` default.  A store
only parses plain mappings into typed subclasses when it was created with
those classes in ``action_types``; otherwise dispatch checks shape alone.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from pyexpensify.exceptions import MalformedActionError

INIT = "@@pyexpensify/INIT"
"""Private action type used to seed reducer defaults when a store is created."""


class Action(BaseModel):
    """Base action.

    Extra payload fields are kept as attributes; reducers that do not
    recognise the type simply pass them through.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    type: str

    @field_validator("type")
    @classmethod
    def _require_type(cls, value: str) -> str:
        if not value:
            raise ValueError("action type must be non-empty")
        return value


def action_tag(action_cls: type[Action]) -> str:
    """Return the fixed ``type`` tag declared by a typed action class."""
    field = action_cls.model_fields.get("type")
    tag = field.default if field is not None else None
    if not isinstance(tag, str) or not tag:
        raise ValueError(f"{action_cls.__name__} does not declare a default 'type' tag")
    return tag


def action_types_by_tag(action_types: Iterable[type[Action]]) -> dict[str, type[Action]]:
    """Index typed action classes by tag, rejecting two classes with one tag."""
    by_tag: dict[str, type[Action]] = {}
    for action_cls in action_types:
        tag = action_tag(action_cls)
        existing = by_tag.get(tag)
        if existing is not None and existing is not action_cls:
            raise ValueError(f"Action type {tag!r} is claimed by {existing.__name__} and {action_cls.__name__}")
        by_tag[tag] = action_cls
    return by_tag


def ensure_action(value: Any, action_types: Mapping[str, type[Action]] | None = None) -> Action:
    """Normalize a dispatched value into an :class:`Action`.

    Only the shape is checked: *value* must be an ``Action`` or a mapping
    with a non-empty string ``type``.  When *action_types* maps the tag to a
    typed class, mappings and other ``Action`` instances with that tag are
    validated into it.

    Raises
    ------
    MalformedActionError
        If *value* has no usable ``type`` or its payload does not validate
        against the typed class chosen for its tag.
    """
    payload: dict[str, Any] | None = None
    if isinstance(value, Action):
        tag = value.type
    elif isinstance(value, Mapping):
        tag = value.get("type")
        if not isinstance(tag, str) or not tag:
            raise MalformedActionError("Action is missing a non-empty string 'type'", value=value)
        payload = dict(value)
    else:
        raise MalformedActionError(
            f"Action must be an Action or a mapping, got {type(value).__name__}",
            value=value,
        )

    action_cls = (action_types or {}).get(tag)
    if isinstance(value, Action):
        if action_cls is None or isinstance(value, action_cls):
            return value
        payload = value.model_dump()

    try:
        return (action_cls or Action).model_validate(payload)
    except ValidationError as exc:
        raise MalformedActionError(f"Invalid payload for action {tag!r}: {exc}", value=value) from exc
