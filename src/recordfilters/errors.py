"""Exceptions raised by filter construction, set maintenance and the query codec.

None of these subclass ``ValueError``: pydantic wraps ``ValueError`` raised in
validators into a ``ValidationError``, and callers should see the domain error.
"""

from __future__ import annotations

from typing import Any


class FilterError(Exception):
    """Base class for all recordfilters errors."""


class InvalidDateFormat(FilterError):
    """A date filter value is neither an ISO-8601 date nor an integer."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid date format {value!r}")


class DuplicateFilterError(FilterError):
    """More than one filter occupies the same (kind, key) slot.

    Only reachable when a FilterSet was built from a list that already held
    duplicates; the set is corrupt and cannot be updated.
    """

    def __init__(self, filters: list[Any]) -> None:
        self.filters = filters
        super().__init__(f"Detected filter duplicates (by kind and key): {filters!r}")


class QueryError(FilterError):
    """A query string could not be decoded into a FilterSet."""


class MalformedQuery(QueryError):
    def __init__(self, piece: str, reason: str) -> None:
        self.piece = piece
        super().__init__(f"Malformed query piece {piece!r}: {reason}")


class MissingOrAmbiguousLogicKey(QueryError):
    def __init__(self, logic_key: str, count: int) -> None:
        self.logic_key = logic_key
        self.count = count
        super().__init__(f"Expected exactly one {logic_key!r} parameter, found {count}")


class UnrecognizedLogic(QueryError):
    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Unknown logic {value!r}; expected 'and' or 'or'")


class UnrecognizedFilterKind(QueryError):
    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown filter kind {token!r}")


class UnrecognizedKey(QueryError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Key {key!r} is not in the known key set")
