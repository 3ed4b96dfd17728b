"""Notification Visibility — tests for audience filtering and read tracking."""

from datetime import datetime, timezone

from marketplace_admin.core.actor import Actor
from marketplace_admin.core.domain_types import ActorId, Role
from marketplace_admin.core.notifications import (
    is_notification_expired, is_notification_read, mark_read,
    visible_notifications,
)

ADMIN = Actor(ActorId("admin-1"), Role.ADMIN)
VENDOR = Actor(ActorId("v-a"), Role.VENDOR)
NOW = datetime(2025, 1, 10, tzinfo=timezone.utc)

NOTIFICATIONS = [
    {"id": "1", "target_audience": "all", "created_by": "admin-1"},
    {"id": "2", "target_audience": "customers_only", "created_by": "admin-1"},
    {"id": "3", "target_audience": "vendors_only", "created_by": "admin-1"},
    {"id": "4", "target_audience": "all", "created_by": "v-a"},
]


def test_admin_sees_every_notification():
    assert len(visible_notifications(ADMIN, NOTIFICATIONS)) == 4


def test_vendor_sees_broadcasts_and_own():
    visible = [n["id"] for n in visible_notifications(VENDOR, NOTIFICATIONS)]
    assert visible == ["2", "3", "4"]


def test_anonymous_sees_no_notifications():
    assert visible_notifications(None, NOTIFICATIONS) == []


def test_read_tracking():
    assert not is_notification_read({"read_by": []}, "v-a")
    assert not is_notification_read({}, "v-a")
    assert is_notification_read({"read_by": ["v-a"]}, "v-a")


def test_mark_read_is_idempotent():
    once = mark_read([], "v-a")
    twice = mark_read(once, "v-a")
    assert once == ["v-a"]
    assert twice == ["v-a"]


def test_mark_read_does_not_mutate_input():
    read_by = ["admin-1"]
    assert mark_read(read_by, "v-a") == ["admin-1", "v-a"]
    assert read_by == ["admin-1"]


def test_expiry():
    assert is_notification_expired({"expiry_date": "2025-01-09T00:00:00Z"}, NOW)
    assert not is_notification_expired({"expiry_date": "2025-01-11T00:00:00Z"}, NOW)
    assert not is_notification_expired({}, NOW)
