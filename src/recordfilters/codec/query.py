"""Query-string codec for FilterSets.

Wire format (before percent-encoding)::

    logic=and&genre=text|industrial metal&released=date_from|19000

The joined string is percent-encoded in one pass. Reserved URI characters
such as ``&`` and ``=`` stay literal, so keys and values must not contain
them, nor the separator.
"""

from __future__ import annotations

import logging
from typing import Literal
from urllib.parse import quote, unquote

from pydantic import BaseModel, Field, field_validator

from ..domain.filter_set import FilterSet, Logic
from ..domain.filters import Filter, FilterKind
from ..errors import (
    MalformedQuery,
    MissingOrAmbiguousLogicKey,
    UnrecognizedFilterKind,
    UnrecognizedKey,
    UnrecognizedLogic,
)

_LOGGER = logging.getLogger("recordfilters.codec")

# RFC 3986 reserved characters; unreserved ones are never escaped by quote()
_RESERVED = ":/?#[]@!$&'()*+,;="


class QueryOptions(BaseModel):
    """Options shared by ``to_query`` and ``from_query``."""

    model_config = {"frozen": True}

    logic_key: str = Field(default="logic", min_length=1, description="Parameter carrying the logic mode")
    separator: str = Field(default="|", description="Separator between kind token and value")
    key_format: Literal["strings", "atoms"] = Field(default="strings", description="Key representation")
    known_keys: frozenset[str] = Field(
        default_factory=frozenset,
        description="Keys accepted when key_format is 'atoms'",
    )

    @field_validator("separator")
    @classmethod
    def _separator_usable(cls, v: str) -> str:
        if not v:
            raise ValueError("separator must not be empty")
        if "&" in v or "=" in v:
            raise ValueError(f"separator must not contain '&' or '=', got {v!r}")
        return v

    @classmethod
    def from_settings(cls, known_keys: frozenset[str] | set[str] = frozenset()) -> QueryOptions:
        """Build options from ``RuntimeSettings`` defaults."""
        from ..config.runtime import get_settings

        settings = get_settings()
        return cls(
            logic_key=settings.logic_key,
            separator=settings.separator,
            key_format=settings.key_format,
            known_keys=frozenset(known_keys),
        )


def to_query(filter_set: FilterSet, options: QueryOptions | None = None) -> str:
    """Serialize ``filter_set`` into a percent-encoded query string."""
    opts = options or QueryOptions()
    pairs = [f"{opts.logic_key}={filter_set.logic.value}"]
    for f in filter_set.filters:
        pairs.append(f"{f.key}={f.kind.value}{opts.separator}{f.value}")
    return quote("&".join(pairs), safe=_RESERVED)


def _split_pairs(query: str) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for piece in unquote(query).split("&"):
        if not piece:
            continue
        key, eq, raw_value = piece.partition("=")
        if not eq:
            raise MalformedQuery(piece, "missing '='")
        pairs.append((key, raw_value))
    return pairs


def _parse_logic(pairs: list[tuple[str, str]], logic_key: str) -> Logic:
    values = [v for k, v in pairs if k == logic_key]
    if len(values) != 1:
        raise MissingOrAmbiguousLogicKey(logic_key, len(values))
    try:
        return Logic(values[0])
    except ValueError:
        raise UnrecognizedLogic(values[0]) from None


def _parse_filter(key: str, raw_value: str, opts: QueryOptions) -> Filter:
    token, sep, value = raw_value.partition(opts.separator)
    if not sep:
        raise MalformedQuery(f"{key}={raw_value}", f"missing separator {opts.separator!r}")
    try:
        kind = FilterKind(token)
    except ValueError:
        raise UnrecognizedFilterKind(token) from None
    if opts.key_format == "atoms" and key not in opts.known_keys:
        raise UnrecognizedKey(key)
    return Filter.new(kind, key, value)


def from_query(query: str, options: QueryOptions | None = None) -> FilterSet:
    """Deserialize a query string produced by ``to_query``.

    Filters keep the order they appear in; date values are normalized again.
    """
    opts = options or QueryOptions()
    try:
        pairs = _split_pairs(query)
        logic = _parse_logic(pairs, opts.logic_key)
        filters = [_parse_filter(k, v, opts) for k, v in pairs if k != opts.logic_key]
    except Exception as exc:
        _LOGGER.debug("query_decode_failed", extra={"query": query, "error": str(exc)})
        raise
    return FilterSet.new(logic, filters)
