def create_room(client, payload):
    response = client.post("/api/rooms", json=payload)
    assert response.status_code == 200, response.text
    return response.json()["data"]


def test_create_and_list_rooms(client, room_payload):
    room = create_room(client, room_payload)

    assert room["roomNumber"] == "101"
    assert room["status"] == "available"
    assert room["tenant"] is None
    assert "id" in room and "createdAt" in room

    body = client.get("/api/rooms").json()
    assert body["success"] is True
    assert [r["id"] for r in body["data"]] == [room["id"]]


def test_update_room(client, room_payload):
    room = create_room(client, room_payload)

    response = client.put(f"/api/rooms/{room['id']}", json={"rent": 9000, "status": "maintenance"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["rent"] == 9000
    assert data["status"] == "maintenance"
    assert data["roomNumber"] == "101"


def test_missing_room_is_not_found(client):
    update = client.put("/api/rooms/does-not-exist", json={"rent": 1})
    delete = client.delete("/api/rooms/does-not-exist")

    for response in (update, delete):
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Room not found"}


def test_delete_room(client, room_payload):
    room = create_room(client, room_payload)

    response = client.delete(f"/api/rooms/{room['id']}")

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Room deleted successfully"}
    assert client.get("/api/rooms").json()["data"] == []


def test_room_number_is_unique_within_wing(client, room_payload):
    create_room(client, room_payload)
    create_room(client, {**room_payload, "wing": "B"})

    response = client.post("/api/rooms", json=room_payload)

    assert response.status_code == 500
    body = response.json()
    assert body["success"] is False
    assert "UNIQUE" in body["error"]


def test_invalid_room_is_rejected(client, room_payload):
    missing = {k: v for k, v in room_payload.items() if k != "roomNumber"}
    bad_wing = {**room_payload, "wing": "Z"}
    unknown = {**room_payload, "colour": "blue"}

    for payload in (missing, bad_wing, unknown):
        response = client.post("/api/rooms", json=payload)
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["error"]

    assert client.get("/api/rooms").json()["data"] == []


def test_null_for_required_field_is_rejected(client, room_payload):
    room = create_room(client, room_payload)

    response = client.put(f"/api/rooms/{room['id']}", json={"rent": None})

    assert response.status_code == 400
    assert "rent cannot be null" in response.json()["error"]
