"""Base model for state values.

State models are frozen pydantic models.  Field names are snake_case in
Python and camelCase (``createdAt``, ``sortBy``) when serialized, matching
the JSON shape of the state the store is usually inspected through.
"""

from __future__ import annotations

import functools
from collections.abc import Mapping
from typing import Annotated, Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic.alias_generators import to_camel


@functools.cache
def _field_adapter(model: type[BaseModel], name: str) -> TypeAdapter[Any]:
    field = model.model_fields[name]
    if field.metadata:
        return TypeAdapter(Annotated[(field.annotation, *field.metadata)])
    return TypeAdapter(field.annotation)


class StateModel(BaseModel):
    """Immutable state value with copy-and-modify updates."""

    _IMMUTABLE_FIELDS: ClassVar[frozenset[str]] = frozenset()
    """Fields :meth:`normalize_updates` refuses to change."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @classmethod
    def normalize_updates(cls, updates: Mapping[str, Any]) -> dict[str, Any]:
        """Map camelCase keys to field names and reject unknown or immutable fields."""
        by_alias = {field.alias or name: name for name, field in cls.model_fields.items()}
        normalized: dict[str, Any] = {}
        for key, value in updates.items():
            name = key if key in cls.model_fields else by_alias.get(key)
            if name is None:
                raise ValueError(f"{cls.__name__} has no field {key!r}")
            if name in cls._IMMUTABLE_FIELDS:
                raise ValueError(f"{cls.__name__}.{name} cannot be updated")
            normalized[name] = value
        return normalized

    @classmethod
    def validate_updates(cls, updates: Mapping[str, Any]) -> dict[str, Any]:
        """Like :meth:`normalize_updates`, also validating each value against its field.

        Returns the coerced values. Raises ``pydantic.ValidationError`` for a bad value.
        """
        return {
            name: _field_adapter(cls, name).validate_python(value)
            for name, value in cls.normalize_updates(updates).items()
        }

    def updated(self, **changes: Any) -> Self:
        """Return a validated copy with *changes* applied; ``self`` is untouched."""
        changes = self.normalize_updates(changes)
        if not changes:
            return self
        return self.model_validate({**self.model_dump(), **changes})
