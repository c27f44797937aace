def create_room(client, payload):
    return client.post("/api/rooms", json=payload).json()["data"]


def test_create_tenant_occupies_room(client, room_payload, tenant_payload):
    room = create_room(client, room_payload)

    response = client.post("/api/tenants", json=tenant_payload(room["id"]))

    assert response.status_code == 200, response.text
    tenant = response.json()["data"]
    assert tenant["status"] == "active"
    assert tenant["joinDate"] == "2024-01-15"
    assert tenant["emergencyContact"]["relation"] == "Father"
    assert tenant["room"]["roomNumber"] == "101"

    stored_room = client.get("/api/rooms").json()["data"][0]
    assert stored_room["status"] == "occupied"
    assert stored_room["tenantId"] == tenant["id"]
    assert stored_room["tenant"]["name"] == "John Doe"


def test_unknown_room_does_not_block_registration(client, tenant_payload):
    response = client.post("/api/tenants", json=tenant_payload("no-such-room"))

    assert response.status_code == 200
    tenant = response.json()["data"]
    assert tenant["roomId"] == "no-such-room"
    assert tenant["room"] is None
    assert len(client.get("/api/tenants").json()["data"]) == 1


def test_tenant_requires_emergency_contact(client, tenant_payload):
    payload = tenant_payload("room-1")
    del payload["emergencyContact"]

    response = client.post("/api/tenants", json=payload)

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_update_and_delete_tenant(client, room_payload, tenant_payload):
    room = create_room(client, room_payload)
    tenant = client.post("/api/tenants", json=tenant_payload(room["id"])).json()["data"]

    updated = client.put(
        f"/api/tenants/{tenant['id']}",
        json={"phone": "+91 9111111111", "address": {"city": "Bangalore"}},
    ).json()["data"]
    assert updated["phone"] == "+91 9111111111"
    assert updated["address"]["city"] == "Bangalore"
    assert updated["name"] == "John Doe"

    deleted = client.delete(f"/api/tenants/{tenant['id']}")
    assert deleted.json() == {"success": True, "message": "Tenant deleted successfully"}

    # No cascade: the room still points at the removed tenant
    stored_room = client.get("/api/rooms").json()["data"][0]
    assert stored_room["status"] == "occupied"
    assert stored_room["tenantId"] == tenant["id"]
    assert stored_room["tenant"] is None


def test_missing_tenant_is_not_found(client):
    response = client.put("/api/tenants/nope", json={"name": "X"})

    assert response.status_code == 404
    assert response.json()["error"] == "Tenant not found"
    assert client.delete("/api/tenants/nope").status_code == 404
