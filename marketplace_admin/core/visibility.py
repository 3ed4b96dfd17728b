"""Visibility Resolver — which records an actor may see and mutate.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - Admin tier (admin, main_admin) sees every record, including unowned/legacy ones
    - Vendors see exactly the records whose owner_id equals their own id
    - Anonymous callers (actor is None) see nothing and may modify nothing
    - Hierarchical listing is one level per call: roots, or direct children of one parent
    - Output preserves input order; inputs are never mutated

Design Decisions:
    - One shared predicate (is_admin) for every privilege check; no finer permission model
    - can_modify gates mutation only; visibility is decided by visible_records alone
"""

from collections.abc import Iterable

from marketplace_admin.core.actor import Actor
from marketplace_admin.core.domain_types import (
    ADMIN_DISPLAY_NAME, ADMIN_OWNER, ADMIN_ROLES, ALL_OWNERS, Collection,
)
from marketplace_admin.core.record_fields import owner_of, parent_of


def is_admin(actor: Actor | None) -> bool:
    """True iff the actor holds the admin capability tier."""
    return actor is not None and actor.role in ADMIN_ROLES


def _is_kind(record: dict, kind: Collection | str | None) -> bool:
    if kind is None:
        return True
    wanted = kind.value if isinstance(kind, Collection) else kind
    return record.get("kind", wanted) == wanted


def visible_records(
    actor: Actor | None,
    records: Iterable[dict],
    kind: Collection | str | None = None,
    *,
    parent_id: str | None = None,
    roots_only: bool = False,
) -> list[dict]:
    """Filter records down to what the actor may view.

    Records without a "kind" discriminator are assumed to be of the requested kind.
    With roots_only, only records without a parent are kept; with parent_id, only
    direct children of that parent. parent_id takes precedence over roots_only.
    """
    if actor is None:
        return []
    admin = is_admin(actor)
    visible = []
    for record in records:
        if not _is_kind(record, kind):
            continue
        if not admin and owner_of(record) != actor.id:
            continue
        if parent_id is not None:
            if parent_of(record) != parent_id:
                continue
        elif roots_only and parent_of(record) is not None:
            continue
        visible.append(record)
    return visible


def can_modify(actor: Actor | None, record: dict) -> bool:
    """True iff the actor is admin or owns the record."""
    if actor is None:
        return False
    return is_admin(actor) or owner_of(record) == actor.id


def distinct_owners(records: Iterable[dict]) -> list[str]:
    """Distinct non-null owner ids in first-seen order (facet for filter dropdowns)."""
    seen: dict[str, None] = {}
    for record in records:
        owner = owner_of(record)
        if owner is not None:
            seen.setdefault(owner, None)
    return list(seen)


def filter_by_owner(records: Iterable[dict], owner_id: str | None) -> list[dict]:
    """Narrow an already-visible list to one owner. "all" or empty keeps everything."""
    if not owner_id or owner_id == ALL_OWNERS:
        return list(records)
    return [r for r in records if owner_of(r) == owner_id]


def vendor_display_names(vendors: Iterable[dict]) -> dict[str, str]:
    """Map vendor id → display name (restaurant name, then email, then id)."""
    names = {}
    for vendor in vendors:
        vendor_id = vendor.get("id")
        if not vendor_id:
            continue
        names[vendor_id] = (
            vendor.get("restaurant_name") or vendor.get("email") or vendor_id
        )
    return names


def attach_owner_names(
    records: Iterable[dict], names: dict[str, str],
) -> list[dict]:
    """Return copies of records with owner_name resolved from a vendor name map."""
    joined = []
    for record in records:
        owner = owner_of(record)
        if owner is None:
            owner_name = None
        elif owner == ADMIN_OWNER:
            owner_name = ADMIN_DISPLAY_NAME
        else:
            owner_name = names.get(owner, owner)
        joined.append({**record, "owner_name": owner_name})
    return joined
