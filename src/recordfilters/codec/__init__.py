"""Query-string codec."""

from .query import QueryOptions, from_query, to_query

__all__ = ["QueryOptions", "from_query", "to_query"]
