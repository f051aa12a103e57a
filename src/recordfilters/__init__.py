"""In-memory record filtering with a query-string codec."""

from .codec import QueryOptions, from_query, to_query
from .domain import Filter, FilterEngine, FilterKind, FilterSet, Logic, filter_records, normalize_date
from .errors import (
    DuplicateFilterError,
    FilterError,
    InvalidDateFormat,
    MalformedQuery,
    MissingOrAmbiguousLogicKey,
    QueryError,
    UnrecognizedFilterKind,
    UnrecognizedKey,
    UnrecognizedLogic,
)

__version__ = "0.1.0"
__all__ = [
    "DuplicateFilterError",
    "Filter",
    "FilterEngine",
    "FilterError",
    "FilterKind",
    "FilterSet",
    "InvalidDateFormat",
    "Logic",
    "MalformedQuery",
    "MissingOrAmbiguousLogicKey",
    "QueryError",
    "QueryOptions",
    "UnrecognizedFilterKind",
    "UnrecognizedKey",
    "UnrecognizedLogic",
    "filter_records",
    "from_query",
    "normalize_date",
    "to_query",
]
