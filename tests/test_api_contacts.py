def test_submit_list_and_mark_read(client):
    first = client.post("/api/contacts", json={"name": "Asha", "email": "asha@email.com", "message": "Rooms free?"})
    second = client.post("/api/contacts", json={"name": "Ravi", "phone": "+91 9000000000", "message": "Call me"})
    assert first.status_code == 200, first.text
    assert first.json()["data"]["isRead"] is False

    listed = client.get("/api/contacts").json()["data"]
    assert [m["name"] for m in listed] == ["Ravi", "Asha"]

    message_id = second.json()["data"]["id"]
    marked = client.put(f"/api/contacts/{message_id}/read")
    assert marked.status_code == 200
    assert marked.json()["data"]["isRead"] is True


def test_message_is_required(client):
    response = client.post("/api/contacts", json={"name": "Asha"})

    assert response.status_code == 400


def test_mark_read_of_missing_message(client):
    response = client.put("/api/contacts/nope/read")

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Message not found"}


def test_list_is_capped(client, engine):
    from pghostel.db.session import build_session_factory
    from pghostel.repositories import ContactMessageRepository
    from pghostel.services.inquiry import ContactService

    for n in range(5):
        client.post("/api/contacts", json={"name": f"Visitor {n}", "message": "Hello"})

    with build_session_factory(engine)() as db:
        result = ContactService(ContactMessageRepository(db), db, list_limit=3).list_messages()

    assert [m.name for m in result.data] == ["Visitor 4", "Visitor 3", "Visitor 2"]
