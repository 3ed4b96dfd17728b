"""Vendor Routes — admin-only directory and moderation, vendor account self-service."""

from tests.services.request_helpers import ADMIN, MAIN_ADMIN, VENDOR_A, as_vendor


async def test_vendor_listing_is_admin_only(client, seed):
    await seed("vendors", restaurant_name="A", approved=True, status="Active")
    assert (await client.get("/api/v1/vendors", headers=VENDOR_A)).status_code == 403
    assert (await client.get("/api/v1/vendors")).status_code == 401
    res = await client.get("/api/v1/vendors", headers=MAIN_ADMIN)
    assert [v["restaurant_name"] for v in res.json()] == ["A"]


async def test_approved_tab_filter(client, seed):
    await seed("vendors", restaurant_name="Approved", approved=True, status="Active")
    await seed("vendors", restaurant_name="Waiting", approved=False, status="Pending")
    pending = await client.get("/api/v1/vendors?approved=false", headers=ADMIN)
    assert [v["restaurant_name"] for v in pending.json()] == ["Waiting"]


async def test_approve_sets_active_and_flag(client, seed):
    vendor = await seed("vendors", restaurant_name="W", approved=False, status="Pending")
    res = await client.put(
        f"/api/v1/vendors/{vendor['id']}/status", json={"action": "approve"},
        headers=ADMIN,
    )
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "Active"
    assert body["approved"] is True
    assert body["approved_at"]


async def test_delete_is_a_status_marker(client, seed, lookup):
    vendor = await seed("vendors", restaurant_name="W", approved=True, status="Active")
    res = await client.put(
        f"/api/v1/vendors/{vendor['id']}/status", json={"action": "delete"},
        headers=ADMIN,
    )
    assert res.json()["status"] == "Deleted"
    assert (await lookup("vendors", vendor["id"]))["deleted_at"]


async def test_vendor_cannot_moderate(client, seed):
    vendor = await seed("vendors", restaurant_name="W", status="Active")
    res = await client.put(
        f"/api/v1/vendors/{vendor['id']}/status", json={"action": "suspend"},
        headers=VENDOR_A,
    )
    assert res.status_code == 403


async def test_unknown_vendor_and_action(client):
    res = await client.put(
        "/api/v1/vendors/nonexistent/status", json={"action": "approve"}, headers=ADMIN,
    )
    assert res.status_code == 404
    res = await client.put(
        "/api/v1/vendors/nonexistent/status", json={"action": "explode"}, headers=ADMIN,
    )
    assert res.status_code == 400




async def test_activate_stamps_activated_at(client, seed):
    vendor = await seed("vendors", restaurant_name="W", approved=True, status="Suspended")
    res = await client.put(
        f"/api/v1/vendors/{vendor['id']}/status", json={"action": "activate"},
        headers=ADMIN,
    )
    assert res.json()["status"] == "Active"
    assert res.json()["activated_at"]


# ─── Display names ───────────────────────────────────────────────

async def test_admin_resolves_every_vendor_name(client, seed):
    slice_co = await seed("vendors", restaurant_name="Slice Co")
    curry = await seed("vendors", email="curry@x.io")
    res = await client.get("/api/v1/vendors/names", headers=ADMIN)
    assert res.json() == {slice_co["id"]: "Slice Co", curry["id"]: "curry@x.io"}


async def test_vendor_resolves_only_own_name(client, seed):
    own = await seed("vendors", restaurant_name="Slice Co")
    await seed("vendors", restaurant_name="Other Place", email="other@x.io")
    res = await client.get("/api/v1/vendors/names", headers=as_vendor(own["id"]))
    assert res.json() == {own["id"]: "Slice Co"}
    assert (await client.get("/api/v1/vendors/names", headers=VENDOR_A)).json() == {}
    assert (await client.get("/api/v1/vendors/names")).json() == {}


# ─── Own account ─────────────────────────────────────────────────

async def test_vendor_reads_own_account(client, seed):
    own = await seed("vendors", restaurant_name="Slice Co", status="Active")
    res = await client.get("/api/v1/vendors/me", headers=as_vendor(own["id"]))
    assert res.status_code == 200
    assert res.json()["restaurant_name"] == "Slice Co"


async def test_vendor_updates_own_profile(client, seed, lookup):
    own = await seed(
        "vendors", restaurant_name="Slice Co", email="old@x.io",
        status="Active", approved=True,
    )
    res = await client.patch(
        "/api/v1/vendors/me",
        json={
            "restaurant_name": "  Slice & Dice ",
            "email": "new@x.io",
            "phone": "555-0100",
            "address": "1 Main St",
            "location": {"latitude": 12.5, "longitude": 77.6, "full_address": "1 Main St"},
        },
        headers=as_vendor(own["id"]),
    )
    assert res.status_code == 200
    stored = await lookup("vendors", own["id"])
    assert stored["restaurant_name"] == "Slice & Dice"
    assert stored["email"] == "new@x.io"
    assert stored["location"]["latitude"] == 12.5
    assert stored["updated_at"]
    # moderation fields are not part of the profile
    assert stored["status"] == "Active"
    assert stored["approved"] is True


async def test_profile_update_cannot_touch_moderation_fields(client, seed, lookup):
    own = await seed("vendors", restaurant_name="W", status="Pending", approved=False)
    await client.patch(
        "/api/v1/vendors/me",
        json={"restaurant_name": "W2", "status": "Active", "approved": True},
        headers=as_vendor(own["id"]),
    )
    stored = await lookup("vendors", own["id"])
    assert stored["restaurant_name"] == "W2"
    assert stored["status"] == "Pending"
    assert stored["approved"] is False


async def test_vendor_edit_leaves_other_vendors_untouched(client, seed, lookup):
    own = await seed("vendors", restaurant_name="Mine")
    other = await seed("vendors", restaurant_name="Theirs")
    await client.patch(
        "/api/v1/vendors/me", json={"restaurant_name": "Renamed"},
        headers=as_vendor(own["id"]),
    )
    assert (await lookup("vendors", other["id"]))["restaurant_name"] == "Theirs"


async def test_actor_without_vendor_document_gets_404(client, seed):
    await seed("vendors", restaurant_name="Someone")
    res = await client.patch(
        "/api/v1/vendors/me", json={"restaurant_name": "Hijack"}, headers=VENDOR_A,
    )
    assert res.status_code == 404
    assert (await client.get("/api/v1/vendors/me", headers=ADMIN)).status_code == 404


async def test_anonymous_account_edit_is_401(client):
    res = await client.patch("/api/v1/vendors/me", json={"restaurant_name": "X"})
    assert res.status_code == 401


async def test_invalid_profile_is_400(client, seed):
    own = await seed("vendors", restaurant_name="W")
    res = await client.patch(
        "/api/v1/vendors/me", json={"email": "not-an-email"},
        headers=as_vendor(own["id"]),
    )
    assert res.status_code == 400
