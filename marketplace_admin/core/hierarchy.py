"""Category Hierarchy — parent/child nesting rules for category trees.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no side effects
    - A category flagged is_last never offers a "create subcategory" affordance
    - A child may only be created under a parent that accepts children (not is_last)
    - Navigation to children is allowed when not is_last OR children already exist
    - Product category paths are at most MAX_CATEGORY_DEPTH (3) ids deep, without gaps
    - Deleting with cascade removes the whole subtree; without cascade, a parent
      with children is refused (never silently orphaned)

Design Decisions:
    - descendant_ids is the only multi-level walk, used for cascade planning;
      listing stays one level per call (see visibility.visible_records)
    - Validators raise typed errors; counting and predicates never raise
"""

from collections import deque
from collections.abc import Iterable

from marketplace_admin.core.domain_types import FoodType, MAX_CATEGORY_DEPTH
from marketplace_admin.core.errors import (
    CategoryHasChildrenError, LeafCategoryError, RecordValidationError,
)
from marketplace_admin.core.record_fields import parent_of

_PATH_FIELDS = ("category_id", "sub_category_id", "nested_sub_category_id")


def child_count(records: Iterable[dict], parent_id: str) -> int:
    """Number of records whose parent_id equals parent_id."""
    return sum(1 for r in records if parent_of(r) == parent_id)


def can_view_children(record: dict, records: Iterable[dict]) -> bool:
    """Whether a category row offers "view children".

    A node flagged is_last but already holding children stays navigable.
    """
    if not record.get("is_last"):
        return True
    return child_count(records, record.get("id")) > 0


def can_add_subcategory(record: dict) -> bool:
    return not record.get("is_last")


def check_parent_accepts_children(parent: dict) -> None:
    """Raise LeafCategoryError if parent is flagged is_last."""
    if not can_add_subcategory(parent):
        raise LeafCategoryError(parent.get("id", ""))


def check_can_mark_leaf(record: dict, records: Iterable[dict]) -> None:
    """Refuse to flag a category as leaf while it still has children."""
    count = child_count(records, record.get("id"))
    if count > 0:
        raise CategoryHasChildrenError(record.get("id", ""), count)


def inherit_food_type(parent: dict | None, requested: str | None = None) -> str:
    """Food type for a new category.

    Children take the parent's food type; roots keep the requested one.
    Both fall back to veg.
    """
    if parent is not None:
        return parent.get("food_type") or FoodType.VEG.value
    return requested or FoodType.VEG.value


def descendant_ids(records: Iterable[dict], root_id: str) -> list[str]:
    """All ids below root_id, breadth-first. Cycles are visited once."""
    children_of: dict[str, list[str]] = {}
    for record in records:
        parent = parent_of(record)
        if parent is not None and record.get("id"):
            children_of.setdefault(parent, []).append(record["id"])

    found: list[str] = []
    seen = {root_id}
    queue = deque(children_of.get(root_id, []))
    while queue:
        current = queue.popleft()
        if current in seen:
            continue
        seen.add(current)
        found.append(current)
        queue.extend(children_of.get(current, []))
    return found


def plan_category_delete(
    records: Iterable[dict], category_id: str, cascade: bool,
) -> list[str]:
    """Ids to delete for a category delete, deepest descendants first.

    Without cascade, a category with children raises CategoryHasChildrenError.
    """
    records = list(records)
    descendants = descendant_ids(records, category_id)
    if descendants and not cascade:
        raise CategoryHasChildrenError(
            category_id, child_count(records, category_id),
        )
    return list(reversed(descendants)) + [category_id]


def validate_category_path(path: list[str | None]) -> list[str]:
    """Validate a product's category path (root first) and return the set ids.

    Blank trailing levels are dropped; a blank level followed by a set one is a gap.
    """
    if not path or not path[0]:
        raise RecordValidationError("A product needs a category", "category_id")
    ids = [p for p in path if p]
    if len(ids) > MAX_CATEGORY_DEPTH:
        raise RecordValidationError(
            f"Category paths are limited to {MAX_CATEGORY_DEPTH} levels",
            "category_id",
        )
    if path[:len(ids)] != ids:
        raise RecordValidationError(
            "A nested subcategory needs its parent subcategory",
            "sub_category_id",
        )
    return ids


def check_path_links(path: list[str], categories: Iterable[dict]) -> None:
    """Each id in path must exist and be a direct child of the previous one."""
    by_id = {c.get("id"): c for c in categories}
    previous = None
    for depth, category_id in enumerate(path):
        category = by_id.get(category_id)
        if category is None:
            raise RecordValidationError(
                f"Unknown category '{category_id}'", _PATH_FIELDS[depth],
            )
        if parent_of(category) != previous:
            raise RecordValidationError(
                f"Category '{category_id}' is not nested under '{previous}'",
                _PATH_FIELDS[depth],
            )
        previous = category_id

