import pytest


@pytest.fixture
def tenant(client, room_payload, tenant_payload):
    room = client.post("/api/rooms", json=room_payload).json()["data"]
    return client.post("/api/tenants", json=tenant_payload(room["id"])).json()["data"]


def payment_payload(tenant, **overrides):
    payload = {
        "tenantId": tenant["id"],
        "roomId": tenant["roomId"],
        "month": "2099-05",
        "amount": 8000,
        "wing": "A",
    }
    payload.update(overrides)
    return payload


def test_create_derives_period_and_status(client, tenant):
    response = client.post("/api/rent-payments", json=payment_payload(tenant, status="paid"))

    assert response.status_code == 200, response.text
    payment = response.json()["data"]
    assert payment["year"] == 2099
    assert payment["monthName"] == "May"
    assert payment["dueDate"] == "2099-05-05"
    assert payment["paidAmount"] == 0
    assert payment["status"] == "pending"
    assert payment["tenant"]["name"] == "John Doe"
    assert payment["room"]["roomNumber"] == "101"


def test_past_due_payment_is_overdue(client, tenant):
    payment = client.post(
        "/api/rent-payments", json=payment_payload(tenant, month="2024-05")
    ).json()["data"]

    assert payment["dueDate"] == "2024-05-05"
    assert payment["status"] == "overdue"


def test_explicit_due_date_and_partial_payment(client, tenant):
    payment = client.post(
        "/api/rent-payments",
        json=payment_payload(tenant, dueDate="2099-05-10T00:00:00.000Z", paidAmount=3000, paymentMethod="upi"),
    ).json()["data"]

    assert payment["dueDate"] == "2099-05-10"
    assert payment["status"] == "partial"
    assert payment["paymentMethod"] == "upi"


def test_update_rederives_status(client, tenant):
    payment = client.post("/api/rent-payments", json=payment_payload(tenant)).json()["data"]

    partial = client.put(f"/api/rent-payments/{payment['id']}", json={"paidAmount": 4000})
    assert partial.json()["data"]["status"] == "partial"

    paid = client.put(
        f"/api/rent-payments/{payment['id']}",
        json={"paidAmount": 8000, "paidDate": "2099-05-03", "status": "overdue"},
    ).json()["data"]
    assert paid["status"] == "paid"
    assert paid["paidDate"] == "2099-05-03"

    raised = client.put(f"/api/rent-payments/{payment['id']}", json={"amount": 9000}).json()["data"]
    assert raised["status"] == "partial"


def test_missing_payment_is_not_found(client):
    update = client.put("/api/rent-payments/nope", json={"paidAmount": 1})
    delete = client.delete("/api/rent-payments/nope")

    for response in (update, delete):
        assert response.status_code == 404
        assert response.json()["error"] == "Rent payment not found"


def test_malformed_month_is_rejected(client, tenant):
    for month in ("2024-5", "2024-13", "05-2024"):
        response = client.post("/api/rent-payments", json=payment_payload(tenant, month=month))
        assert response.status_code == 400


def test_list_with_filters(client, tenant):
    client.post("/api/rent-payments", json=payment_payload(tenant, month="2099-05"))
    client.post("/api/rent-payments", json=payment_payload(tenant, month="2024-05"))

    everything = client.get("/api/rent-payments", params={"status": "all", "wing": "all"}).json()
    assert len(everything["data"]) == 2

    overdue = client.get("/api/rent-payments", params={"status": "overdue"}).json()["data"]
    assert [p["month"] for p in overdue] == ["2024-05"]

    by_month = client.get("/api/rent-payments", params={"month": "2099-05"}).json()["data"]
    assert [p["status"] for p in by_month] == ["pending"]

    assert client.get("/api/rent-payments", params={"search": "doe"}).json()["data"]
    assert client.get("/api/rent-payments", params={"search": "zzz-no-match"}).json()["data"] == []


def test_unknown_status_filter_is_rejected(client):
    response = client.get("/api/rent-payments", params={"status": "late"})

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_stats_endpoint(client, tenant):
    first = client.post("/api/rent-payments", json=payment_payload(tenant, amount=1000)).json()["data"]
    client.put(f"/api/rent-payments/{first['id']}", json={"paidAmount": 1000})
    client.post("/api/rent-payments", json=payment_payload(tenant, amount=2000, paidAmount=500))

    stats = client.get("/api/rent-payments/stats", params={"month": "2099-05"}).json()["data"]

    assert stats == {
        "total": 2,
        "paid": 1,
        "pending": 0,
        "partial": 1,
        "overdue": 0,
        "totalAmount": 3000,
        "collectedAmount": 1500,
        "pendingAmount": 1500,
        "overdueAmount": 0,
        "collectionRate": 50,
    }


def test_stats_without_payments(client):
    stats = client.get("/api/rent-payments/stats").json()["data"]

    assert stats["total"] == 0
    assert stats["collectionRate"] == 0


def test_generate_endpoint(client, tenant):
    first = client.post("/api/rent-payments/generate", json={"month": "2099-06"})
    second = client.post("/api/rent-payments/generate", json={"month": "2099-06"})

    assert first.json() == {"success": True, "data": {"created": 1}}
    assert second.json()["data"] == {"created": 0}

    generated = client.get("/api/rent-payments", params={"month": "2099-06"}).json()["data"]
    assert generated[0]["amount"] == 8000
    assert generated[0]["dueDate"] == "2099-06-05"
    assert generated[0]["monthName"] == "June"


@pytest.mark.parametrize(
    "body",
    [{"month": "2024-5"}, {"month": "2024-05\n"}, {"month": "2024-05 "}, {"month": 202405}, {}, None],
)
def test_generate_rejects_bad_month(client, tenant, body):
    response = client.post("/api/rent-payments/generate", json=body)

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "month is required in YYYY-MM format"}
    assert client.get("/api/rent-payments").json()["data"] == []


def test_payments_survive_room_and_tenant_deletion(client, tenant):
    payment = client.post("/api/rent-payments", json=payment_payload(tenant)).json()["data"]

    client.delete(f"/api/rooms/{tenant['roomId']}")
    client.delete(f"/api/tenants/{tenant['id']}")

    listed = client.get("/api/rent-payments").json()["data"]
    assert len(listed) == 1
    orphan = listed[0]
    assert orphan["id"] == payment["id"]
    assert orphan["tenantId"] == tenant["id"]
    assert orphan["roomId"] == tenant["roomId"]
    assert orphan["tenant"] is None
    assert orphan["room"] is None
