"""Actor — the authenticated user on whose behalf an operation runs.

Invariants:
    - Actor is immutable once built (frozen dataclass)
    - role is always a Role member; unknown roles never produce an Actor
    - A missing Actor (None) means anonymous — callers pass None, never a placeholder Actor
"""

from dataclasses import dataclass

from marketplace_admin.core.domain_types import ActorId, Role


@dataclass(frozen=True)
class Actor:
    """Current actor identity: vendor document id (or admin uid) plus role."""

    id: ActorId
    role: Role


def parse_actor(actor_id: str | None, role: str | None) -> Actor | None:
    """Build an Actor from raw session values. Returns None when either is unusable."""
    if not actor_id or not actor_id.strip():
        return None
    try:
        parsed_role = Role(role)
    except ValueError:
        return None
    return Actor(id=ActorId(actor_id.strip()), role=parsed_role)
