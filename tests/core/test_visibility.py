"""Visibility Resolver — tests for role-scoped record filtering.

Tests cover:
    - Admin tier (admin, main_admin) sees every record, including unowned ones
    - Vendors see exactly their own records; unowned records are never visible to them
    - Anonymous actors see nothing and modify nothing
    - roots_only and parent_id are distinct one-level query modes
    - Output order equals input order; repeated calls give identical results
    - distinct_owners dedupes exactly, excludes None, keeps first-seen order
    - filter_by_owner, vendor_display_names, attach_owner_names
"""

from marketplace_admin.core.actor import Actor
from marketplace_admin.core.domain_types import (
    ADMIN_DISPLAY_NAME, ActorId, Collection, Role,
)
from marketplace_admin.core.visibility import (
    attach_owner_names, can_modify, distinct_owners, filter_by_owner, is_admin,
    vendor_display_names, visible_records,
)

ADMIN = Actor(ActorId("admin-1"), Role.ADMIN)
MAIN_ADMIN = Actor(ActorId("root-1"), Role.MAIN_ADMIN)
VENDOR_A = Actor(ActorId("v-a"), Role.VENDOR)
VENDOR_B = Actor(ActorId("v-b"), Role.VENDOR)

RECORDS = [
    {"id": "1", "kind": "categories", "owner_id": "v-a", "parent_id": None},
    {"id": "2", "kind": "categories", "owner_id": "admin", "parent_id": None},
    {"id": "3", "kind": "categories", "owner_id": None, "parent_id": None},
    {"id": "4", "kind": "categories", "owner_id": "v-a", "parent_id": "1"},
    {"id": "5", "kind": "categories", "owner_id": "v-b", "parent_id": "1"},
    {"id": "6", "kind": "categories", "owner_id": "v-a", "parent_id": "4"},
    {"id": "7", "kind": "products", "owner_id": "v-a"},
]


def _ids(records):
    return [r["id"] for r in records]


# ─── is_admin ────────────────────────────────────────────────────

def test_is_admin_for_both_admin_roles():
    assert is_admin(ADMIN)
    assert is_admin(MAIN_ADMIN)


def test_is_admin_false_for_vendor_and_anonymous():
    assert not is_admin(VENDOR_A)
    assert not is_admin(None)


# ─── visible_records ─────────────────────────────────────────────

def test_admin_sees_every_record_of_kind():
    assert _ids(visible_records(ADMIN, RECORDS, Collection.CATEGORIES)) == [
        "1", "2", "3", "4", "5", "6",
    ]


def test_main_admin_and_admin_see_the_same():
    assert visible_records(MAIN_ADMIN, RECORDS, "categories") == visible_records(
        ADMIN, RECORDS, "categories",
    )


def test_vendor_sees_only_own_records():
    visible = visible_records(VENDOR_A, RECORDS, "categories")
    assert _ids(visible) == ["1", "4", "6"]
    assert all(r["owner_id"] == "v-a" for r in visible)


def test_vendor_never_sees_unowned_or_admin_records():
    visible = _ids(visible_records(VENDOR_B, RECORDS, "categories"))
    assert "2" not in visible
    assert "3" not in visible
    assert visible == ["5"]


def test_anonymous_sees_nothing():
    assert visible_records(None, RECORDS, "categories") == []


def test_kind_filter_excludes_other_collections():
    assert _ids(visible_records(ADMIN, RECORDS, "products")) == ["7"]


def test_records_without_kind_are_taken_as_requested_kind():
    records = [{"id": "x", "owner_id": "v-a"}]
    assert _ids(visible_records(VENDOR_A, records, "products")) == ["x"]


def test_roots_only_keeps_records_without_parent():
    assert _ids(visible_records(ADMIN, RECORDS, "categories", roots_only=True)) == [
        "1", "2", "3",
    ]


def test_parent_id_returns_direct_children_only():
    children = visible_records(ADMIN, RECORDS, "categories", parent_id="1")
    assert _ids(children) == ["4", "5"]


def test_vendor_children_are_still_owner_scoped():
    children = visible_records(VENDOR_A, RECORDS, "categories", parent_id="1")
    assert _ids(children) == ["4"]


def test_unknown_parent_yields_empty():
    assert visible_records(ADMIN, RECORDS, "categories", parent_id="nope") == []


def test_empty_string_parent_counts_as_root():
    records = [{"id": "a", "parent_id": ""}, {"id": "b", "parent_id": "a"}]
    assert _ids(visible_records(ADMIN, records, roots_only=True)) == ["a"]


def test_input_is_not_mutated():
    records = [dict(r) for r in RECORDS]
    visible_records(VENDOR_A, records, "categories", roots_only=True)
    assert records == RECORDS


def test_visible_records_is_idempotent():
    for actor in (ADMIN, MAIN_ADMIN, VENDOR_A, VENDOR_B, None):
        for kwargs in ({}, {"roots_only": True}, {"parent_id": "1"}):
            first = visible_records(actor, RECORDS, "categories", **kwargs)
            assert visible_records(actor, RECORDS, "categories", **kwargs) == first


# ─── can_modify ──────────────────────────────────────────────────

def test_admin_can_modify_any_record():
    assert can_modify(ADMIN, {"owner_id": "v-b"})
    assert can_modify(MAIN_ADMIN, {"owner_id": None})


def test_vendor_can_modify_only_own_record():
    assert can_modify(VENDOR_A, {"owner_id": "v-a"})
    assert not can_modify(VENDOR_A, {"owner_id": "v-b"})
    assert not can_modify(VENDOR_A, {"owner_id": "admin"})
    assert not can_modify(VENDOR_A, {"owner_id": None})


def test_anonymous_cannot_modify():
    assert not can_modify(None, {"owner_id": "v-a"})


# ─── distinct_owners ─────────────────────────────────────────────

def test_distinct_owners_first_seen_order_without_none():
    records = [
        {"owner_id": "v-b"}, {"owner_id": None}, {"owner_id": "v-a"},
        {"owner_id": "v-b"}, {"owner_id": "admin"}, {},
    ]
    assert distinct_owners(records) == ["v-b", "v-a", "admin"]


def test_distinct_owners_is_exact():
    assert distinct_owners([{"owner_id": "V-A"}, {"owner_id": "v-a"}]) == [
        "V-A", "v-a",
    ]


# ─── filter_by_owner ─────────────────────────────────────────────

def test_filter_by_owner_all_keeps_everything():
    assert filter_by_owner(RECORDS, "all") == RECORDS
    assert filter_by_owner(RECORDS, None) == RECORDS


def test_filter_by_owner_narrows_to_one_owner():
    assert _ids(filter_by_owner(RECORDS, "v-b")) == ["5"]


# ─── names ───────────────────────────────────────────────────────

def test_vendor_display_names_fall_back_to_email_then_id():
    vendors = [
        {"id": "v-a", "restaurant_name": "Spice Hub", "email": "a@x.io"},
        {"id": "v-b", "email": "b@x.io"},
        {"id": "v-c"},
        {"restaurant_name": "no id"},
    ]
    assert vendor_display_names(vendors) == {
        "v-a": "Spice Hub", "v-b": "b@x.io", "v-c": "v-c",
    }


def test_attach_owner_names_resolves_admin_and_vendors():
    records = [
        {"id": "1", "owner_id": "admin"},
        {"id": "2", "owner_id": "v-a"},
        {"id": "3", "owner_id": "unknown-vendor"},
        {"id": "4", "owner_id": None},
    ]
    joined = attach_owner_names(records, {"v-a": "Spice Hub"})
    assert [r["owner_name"] for r in joined] == [
        ADMIN_DISPLAY_NAME, "Spice Hub", "unknown-vendor", None,
    ]
    assert "owner_name" not in records[0]


def test_can_modify_is_idempotent():
    for actor in (ADMIN, VENDOR_A, VENDOR_B, None):
        first = [can_modify(actor, r) for r in RECORDS]
        assert [can_modify(actor, r) for r in RECORDS] == first
