"""FilterEngine: applies a FilterSet to a collection of records."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar

from ..observability import log_evaluation
from .filter_set import FilterSet, Logic

Record = TypeVar("Record", bound=Mapping[str, Any])


def _keep(record: Mapping[str, Any], filter_set: FilterSet) -> bool:
    # all()/any() stop at the first miss/hit respectively
    if filter_set.logic is Logic.or_:
        return any(f.matches(record) for f in filter_set.filters)
    return all(f.matches(record) for f in filter_set.filters)


class FilterEngine:
    """Linear-scan evaluation of a FilterSet over in-memory records.

    Kept records come back in reverse input order unless ``preserve_order``
    is set.
    """

    def __init__(self, preserve_order: bool | None = None) -> None:
        if preserve_order is None:
            from ..config.runtime import get_settings

            preserve_order = get_settings().preserve_input_order
        self._preserve_order = preserve_order

    def apply(self, records: Iterable[Record], filter_set: FilterSet) -> list[Record]:
        """Return the records that pass ``filter_set``."""
        seen = 0
        kept: list[Record] = []
        for record in records:
            seen += 1
            if _keep(record, filter_set):
                kept.append(record)
        if not self._preserve_order:
            kept.reverse()
        log_evaluation(
            logic=filter_set.logic.value,
            filter_count=len(filter_set.filters),
            records_in=seen,
            records_out=len(kept),
        )
        return kept

    def reason(self, record: Mapping[str, Any], filter_set: FilterSet) -> str:
        """Return audit reason for this record: 'matched' or 'rejected: <reason>'."""
        if filter_set.logic is Logic.or_:
            for f in filter_set.filters:
                if f.matches(record):
                    return "matched"
            return "rejected: no filter matched"
        for f in filter_set.filters:
            if not f.matches(record):
                return f"rejected: {f.kind.value} {f.key}"
        return "matched"


def filter_records(records: Iterable[Record], filter_set: FilterSet) -> list[Record]:
    """Filter ``records`` with ``filter_set``; kept records come back reversed."""
    return FilterEngine(preserve_order=False).apply(records, filter_set)
