"""Record Field Access — tolerant readers for untyped store documents.

Invariants:
    - Readers never raise: missing or malformed fields fall back to documented defaults
    - An empty string parent/owner is treated the same as None (legacy documents store "")
"""

from datetime import date, datetime, time, timezone

from marketplace_admin.core.domain_types import DEFAULT_PRIORITY

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def owner_of(record: dict) -> str | None:
    owner = record.get("owner_id")
    return owner if owner else None


def parent_of(record: dict) -> str | None:
    parent = record.get("parent_id")
    return parent if parent else None


def priority_of(record: dict) -> int:
    """Integer priority, DEFAULT_PRIORITY when absent or non-numeric."""
    value = record.get("priority")
    if isinstance(value, bool):
        return DEFAULT_PRIORITY
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_PRIORITY


def as_datetime(value) -> datetime | None:
    """Coerce a stored timestamp (datetime or ISO string) to an aware datetime."""
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if isinstance(value, str) and value:
        try:
            parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return None
        return parsed if parsed.tzinfo else parsed.replace(tzinfo=timezone.utc)
    return None


def created_at_of(record: dict) -> datetime:
    """Creation time; records without one sort as oldest."""
    return as_datetime(record.get("created_at")) or _EPOCH
