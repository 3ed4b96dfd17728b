"""Actor — tests for session value parsing."""

import dataclasses

import pytest

from marketplace_admin.core.actor import Actor, parse_actor
from marketplace_admin.core.domain_types import Role


def test_parse_valid_actor():
    actor = parse_actor(" v-1 ", "vendor")
    assert actor == Actor("v-1", Role.VENDOR)


@pytest.mark.parametrize("actor_id,role", [
    (None, "admin"),
    ("", "admin"),
    ("   ", "admin"),
    ("u-1", None),
    ("u-1", "superuser"),
])
def test_unusable_session_values_are_anonymous(actor_id, role):
    assert parse_actor(actor_id, role) is None


def test_actor_is_frozen():
    actor = Actor("u-1", Role.ADMIN)
    with pytest.raises(dataclasses.FrozenInstanceError):
        actor.role = Role.VENDOR
