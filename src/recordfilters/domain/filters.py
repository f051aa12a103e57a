"""Single-field filter predicates."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

from ..errors import InvalidDateFormat

_EPOCH = date(1970, 1, 1)
_ISO_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_EPOCH_DAY_RE = re.compile(r"-?[0-9]+")


class FilterKind(str, Enum):
    """Supported predicate kinds."""

    text = "text"              # value occurs anywhere in field
    enum = "enum"              # field == value
    date_from = "date_from"    # field on or after value
    date_to = "date_to"        # field on or before value

    @property
    def is_date(self) -> bool:
        return self in (FilterKind.date_from, FilterKind.date_to)


def normalize_date(value: Any) -> int:
    """Return ``value`` as a day count since 1970-01-01.

    Integers pass through unchanged, so normalizing twice is harmless.
    Strings are read as ``yyyy-mm-dd`` first and as an integer second.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, datetime):
        return (value.date() - _EPOCH).days
    if isinstance(value, date):
        return (value - _EPOCH).days
    if not isinstance(value, str):
        raise InvalidDateFormat(value)
    # fromisoformat() and int() are more lenient than yyyy-mm-dd / [-]digits
    if _ISO_DATE_RE.fullmatch(value):
        try:
            return (date.fromisoformat(value) - _EPOCH).days
        except ValueError:
            raise InvalidDateFormat(value) from None
    if _EPOCH_DAY_RE.fullmatch(value):
        return normalize_date(int(value))
    raise InvalidDateFormat(value)


class Filter(BaseModel):
    """A predicate on one record field.

    Date kinds store their value as an epoch-day integer; the conversion runs
    once here rather than on every evaluation.
    """

    model_config = {"frozen": True}

    kind: FilterKind = Field(default=FilterKind.text, description="Predicate kind")
    key: str = Field(..., description="Record field the predicate reads")
    value: str | int = Field(..., description="Comparison value (epoch-day for date kinds)")

    @model_validator(mode="before")
    @classmethod
    def _normalize_date_value(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "value" not in data:
            return data
        try:
            kind = FilterKind(data.get("kind", FilterKind.text))
        except ValueError:
            # left for field validation to report
            return data
        value = data["value"]
        if kind.is_date:
            return {**data, "value": normalize_date(value)}
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return {**data, "value": str(value)}
        if not isinstance(value, str):
            raise ValueError(f"{kind.value} filters take string values, got {type(value).__name__}")
        return data

    @classmethod
    def new(cls, kind: FilterKind | str, key: str, value: str | int | date) -> Filter:
        return cls(kind=kind, key=key, value=value)

    @property
    def slot(self) -> tuple[FilterKind, str]:
        """The (kind, key) pair identifying this filter inside a FilterSet."""
        return (self.kind, self.key)

    def same_slot(self, other: Filter) -> bool:
        """True if both filters have the same kind and key, whatever their values."""
        return self.kind == other.kind and self.key == other.key

    def matches(self, record: Mapping[str, Any]) -> bool:
        """Evaluate this predicate against one record.

        A record without the field (or with ``None``) never matches. Text
        filters only look inside string fields, and a field that is not a
        readable date never matches a date filter.
        """
        field_value = record.get(self.key)
        if field_value is None:
            return False
        if self.kind is FilterKind.text:
            return isinstance(field_value, str) and self.value in field_value
        if self.kind is FilterKind.enum:
            return field_value == self.value
        try:
            day = normalize_date(field_value)
        except InvalidDateFormat:
            return False
        if self.kind is FilterKind.date_to:
            return day <= self.value
        return day >= self.value
