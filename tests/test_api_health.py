from fastapi.testclient import TestClient
from sqlalchemy import create_engine, func, select
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from pghostel.main import create_app
from pghostel.models import FacilitySettings


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "message": "Server is running",
        "data": {"status": "OK"},
    }
    assert "X-Request-ID" in response.headers
    assert "X-Process-Time" in response.headers


def test_request_id_is_propagated(client):
    response = client.get("/api/health", headers={"X-Request-ID": "abc-123"})

    assert response.headers["X-Request-ID"] == "abc-123"


def test_startup_creates_tables_and_settings():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    with TestClient(create_app(engine=engine)) as client:
        assert client.get("/api/settings").json()["data"]["pgName"]

    with Session(engine) as db:
        assert db.scalar(select(func.count()).select_from(FacilitySettings)) == 1
    engine.dispose()
