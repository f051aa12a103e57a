"""Match semantics for filter kinds and set combination."""

# Rule names for reference in tests and audit
RULE_TEXT_SUBSTRING = "text: filter value occurs in record field (case-sensitive substring)"
RULE_ENUM_EXACT = "enum: record field equals filter value exactly"
RULE_DATE_FROM_INCLUSIVE = "date_from: record date >= filter date (epoch-day, inclusive)"
RULE_DATE_TO_INCLUSIVE = "date_to: record date <= filter date (epoch-day, inclusive)"
RULE_MISSING_FIELD_NEVER_MATCHES = "missing field: absent or None never matches, any kind"
RULE_AND_ALL = "and: every filter matches (ALL); empty set keeps every record"
RULE_OR_ANY = "or: at least one filter matches (ANY); empty set keeps nothing"
RULE_RESULT_REVERSED = "result: kept records are returned in reverse input order"
