def expense_payload(**overrides):
    payload = {
        "category": "maintenance",
        "subcategory": "plumbing",
        "description": "Water pump repair",
        "amount": 5000,
        "date": "2024-05-10",
        "paymentMethod": "bank_transfer",
        "vendor": "ABC Plumbing Services",
        "wing": "A",
    }
    payload.update(overrides)
    return payload


def test_expenses_listed_latest_first(client):
    for day in ("2024-05-01", "2024-05-20", "2024-05-10"):
        response = client.post("/api/expenses", json=expense_payload(date=day))
        assert response.status_code == 200, response.text

    listed = client.get("/api/expenses").json()["data"]

    assert [e["date"] for e in listed] == ["2024-05-20", "2024-05-10", "2024-05-01"]
    assert listed[0]["status"] == "pending"


def test_update_and_delete_expense(client):
    expense = client.post("/api/expenses", json=expense_payload(wing="common")).json()["data"]

    updated = client.put(f"/api/expenses/{expense['id']}", json={"status": "paid", "amount": 5500})
    assert updated.json()["data"]["status"] == "paid"
    assert updated.json()["data"]["amount"] == 5500
    assert updated.json()["data"]["wing"] == "common"

    deleted = client.delete(f"/api/expenses/{expense['id']}")
    assert deleted.json() == {"success": True, "message": "Expense deleted successfully"}
    assert client.get("/api/expenses").json()["data"] == []


def test_missing_expense_is_not_found(client):
    response = client.put("/api/expenses/nope", json={"amount": 1})

    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Expense not found"}


def test_invalid_payment_method_is_rejected(client):
    response = client.post("/api/expenses", json=expense_payload(paymentMethod="cheque"))

    assert response.status_code == 400
