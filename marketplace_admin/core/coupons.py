"""Coupon Rules — activity window, code normalization, usage accounting.

Invariants:
    - A coupon is active iff is_active AND active_date <= now <= expiry_date
    - Inverted windows (active_date > expiry_date) are never active; they are not corrected
    - Missing or unparseable dates make a coupon inactive (never raise)
    - Codes are stored uppercased and stripped
"""

from datetime import datetime

from marketplace_admin.core.errors import RecordValidationError
from marketplace_admin.core.record_fields import as_datetime


def is_coupon_active(coupon: dict, now: datetime) -> bool:
    if not coupon.get("is_active"):
        return False
    active = as_datetime(coupon.get("active_date"))
    expiry = as_datetime(coupon.get("expiry_date"))
    moment = as_datetime(now)
    if active is None or expiry is None or moment is None:
        return False
    return active <= moment <= expiry


def normalize_coupon_code(code: str) -> str:
    normalized = (code or "").strip().upper()
    if not normalized:
        raise RecordValidationError("Coupon code is required", "code")
    return normalized


def coupon_usage_remaining(coupon: dict) -> int | None:
    """Remaining redemptions, or None when the coupon has no usage limit."""
    limit = coupon.get("usage_limit")
    if limit is None:
        return None
    used = coupon.get("used_count") or 0
    return max(0, int(limit) - int(used))
