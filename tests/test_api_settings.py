def test_defaults_exist_after_startup(client):
    body = client.get("/api/settings").json()

    assert body["success"] is True
    settings = body["data"]
    assert settings["pgName"] == "Sunflower PG"
    assert settings["rentDueDate"] == 5
    assert settings["lateFeePercentage"] == 5
    assert settings["bankDetails"]["ifscCode"] == "SBIN0001234"
    assert settings["theme"] == {"primaryColor": "#fbbf24", "secondaryColor": "#92400e"}
    assert settings["notifications"] == {"email": True, "sms": False, "push": False}


def test_update_is_a_shallow_merge(client):
    before = client.get("/api/settings").json()["data"]

    response = client.put(
        "/api/settings",
        json={"pgName": "Marigold PG", "theme": {"primaryColor": "#000000", "secondaryColor": "#ffffff"}},
    )

    assert response.status_code == 200, response.text
    after = response.json()["data"]
    assert after["id"] == before["id"]
    assert after["pgName"] == "Marigold PG"
    assert after["address"] == before["address"]
    assert after["theme"] == {"primaryColor": "#000000", "secondaryColor": "#ffffff"}
    assert after["notifications"] == before["notifications"]

    assert client.get("/api/settings").json()["data"]["pgName"] == "Marigold PG"


def test_settings_recreated_when_missing(client, engine):
    from sqlalchemy import delete

    from pghostel.models import FacilitySettings

    with engine.begin() as connection:
        connection.execute(delete(FacilitySettings))

    response = client.put("/api/settings", json={"maintenanceFee": 500})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["maintenanceFee"] == 500
    assert data["pgName"] == "Sunflower PG"


def test_unknown_settings_field_is_rejected(client):
    response = client.put("/api/settings", json={"favouriteColour": "green"})

    assert response.status_code == 400
