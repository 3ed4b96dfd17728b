"""Notification Visibility — who sees which notification and read tracking.

Invariants:
    - Admin tier sees every notification
    - Other actors see customers_only and vendors_only notifications, plus ones they created
    - Anonymous actors see nothing
    - mark_read is idempotent: a reader appears in read_by at most once
    - Notifications without expiry_date never expire
"""

from collections.abc import Iterable
from datetime import datetime

from marketplace_admin.core.actor import Actor
from marketplace_admin.core.domain_types import NotificationAudience
from marketplace_admin.core.record_fields import as_datetime
from marketplace_admin.core.visibility import is_admin

_BROADCAST_AUDIENCES = frozenset({
    NotificationAudience.CUSTOMERS_ONLY.value,
    NotificationAudience.VENDORS_ONLY.value,
})


def visible_notifications(
    actor: Actor | None, notifications: Iterable[dict],
) -> list[dict]:
    if actor is None:
        return []
    if is_admin(actor):
        return list(notifications)
    return [
        n for n in notifications
        if n.get("target_audience") in _BROADCAST_AUDIENCES
        or n.get("created_by") == actor.id
    ]


def is_notification_read(notification: dict, reader: str) -> bool:
    return reader in (notification.get("read_by") or [])


def is_notification_expired(notification: dict, now: datetime) -> bool:
    expiry = as_datetime(notification.get("expiry_date"))
    if expiry is None:
        return False
    return expiry < as_datetime(now)


def mark_read(read_by: list[str] | None, reader: str) -> list[str]:
    """New read_by list including reader."""
    current = list(read_by or [])
    if reader not in current:
        current.append(reader)
    return current
