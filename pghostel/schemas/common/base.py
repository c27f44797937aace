"""
Base schema classes with common fields and configurations.

Wire format is camelCase (``roomNumber``, ``paidAmount``); inputs accept
either camelCase or the snake_case attribute names.
"""

from __future__ import annotations

from datetime import date as Date, datetime
from typing import Annotated, Any, ClassVar, Dict, FrozenSet

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

__all__ = [
    "BaseSchema",
    "BaseInputSchema",
    "BaseCreateSchema",
    "BaseUpdateSchema",
    "BaseResponseSchema",
    "CalendarDate",
]


def _to_calendar_date(value: Any) -> Any:
    """
    Accept full ISO timestamps ("2024-05-05T10:30:00.000Z") where a date is
    expected by keeping only the calendar part.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10 and value[10] in ("T", " "):
        return value[:10]
    return value


CalendarDate = Annotated[Date, BeforeValidator(_to_calendar_date)]


class BaseSchema(BaseModel):
    """
    Base schema with common Pydantic configuration.

    All application-facing schemas inherit from this to get the camelCase
    aliases and ORM attribute loading.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
    )


class BaseInputSchema(BaseSchema):
    """
    Base schema for request bodies.

    Unknown fields are rejected instead of being passed through to the
    store.
    """

    model_config = ConfigDict(extra="forbid")

    #: Nested fields persisted in JSON columns
    json_fields: ClassVar[FrozenSet[str]] = frozenset()

    def record_data(self, exclude_unset: bool = False) -> Dict[str, Any]:
        """
        Column values for the ORM model. Nested groups are converted to
        plain JSON-compatible dicts.
        """
        data = self.model_dump(exclude_unset=exclude_unset)
        nested = self.json_fields & data.keys()
        if nested:
            data.update(
                self.model_dump(exclude_unset=exclude_unset, mode="json", include=set(nested))
            )
        return data


class BaseCreateSchema(BaseInputSchema):
    """Base schema for create operations."""
    pass


class BaseUpdateSchema(BaseInputSchema):
    """
    Base schema for partial updates.

    Subclasses declare every field Optional; only the fields actually sent
    are merged (see ``changes``). Sending null is only allowed for fields
    listed in ``nullable_fields``.
    """

    #: Fields that may be cleared by sending null
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def _reject_null_for_required(self) -> "BaseUpdateSchema":
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        """Fields sent by the client, ready to overwrite stored values."""
        return self.record_data(exclude_unset=True)


class BaseResponseSchema(BaseSchema):
    """Base schema for persisted entities returned by the API."""

    id: str = Field(..., description="Unique identifier")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")
