"""Domain layer for recordfilters."""

from .engine import FilterEngine, filter_records
from .filter_set import FilterSet, Logic
from .filters import Filter, FilterKind, normalize_date
from .match_semantics import (
    RULE_AND_ALL,
    RULE_DATE_FROM_INCLUSIVE,
    RULE_DATE_TO_INCLUSIVE,
    RULE_ENUM_EXACT,
    RULE_MISSING_FIELD_NEVER_MATCHES,
    RULE_OR_ANY,
    RULE_RESULT_REVERSED,
    RULE_TEXT_SUBSTRING,
)

__all__ = [
    "Filter",
    "FilterEngine",
    "FilterKind",
    "FilterSet",
    "Logic",
    "filter_records",
    "normalize_date",
    "RULE_AND_ALL",
    "RULE_DATE_FROM_INCLUSIVE",
    "RULE_DATE_TO_INCLUSIVE",
    "RULE_ENUM_EXACT",
    "RULE_MISSING_FIELD_NEVER_MATCHES",
    "RULE_OR_ANY",
    "RULE_RESULT_REVERSED",
    "RULE_TEXT_SUBSTRING",
]
