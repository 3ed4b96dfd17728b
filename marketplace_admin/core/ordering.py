"""Listing Order — deterministic ordering for slider and product listings.

Invariants:
    - Primary key: priority descending (DEFAULT_PRIORITY when absent or invalid)
    - Tie-break: created_at descending (records without one sort last)
    - Equal keys keep their input order (stable, total order)
"""

from collections.abc import Iterable

from marketplace_admin.core.record_fields import created_at_of, priority_of


def sort_by_priority_then_recency(records: Iterable[dict]) -> list[dict]:
    # sorted() is stable, so reverse=True keeps input order for equal keys
    return sorted(
        records,
        key=lambda r: (priority_of(r), created_at_of(r)),
        reverse=True,
    )


def sort_by_recency(records: Iterable[dict]) -> list[dict]:
    """Newest first, stable for equal timestamps."""
    return sorted(records, key=created_at_of, reverse=True)
