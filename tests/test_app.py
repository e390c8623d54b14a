from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from event_hub_api.app.core.config import Settings
from event_hub_api.app.core.db import get_db
from event_hub_api.app.main import app


@pytest.fixture
def broken_client():
    """Client whose database fails every query."""
    broken = MagicMock()
    broken.__getitem__.return_value.find.side_effect = PyMongoError("connection reset")
    broken.__getitem__.return_value.find_one.side_effect = PyMongoError("connection reset")
    broken.list_collection_names.side_effect = ServerSelectionTimeoutError("no servers available")
    app.dependency_overrides[get_db] = lambda: broken
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_database_failure_is_server_error(broken_client):
    resp = broken_client.get("/events")
    assert resp.status_code == 500
    assert resp.json() == {"message": "Server error", "error": "connection reset"}


def test_database_failure_during_signup(broken_client):
    resp = broken_client.post("/signup", json={"name": "A", "email": "a@example.com", "password": "p"})
    assert resp.status_code == 500
    assert resp.json()["message"] == "Server error"


def test_health_reports_collections(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    body = resp.json()
    assert body["database"] == "connected"
    assert "users" in body["collections"]


def test_health_reports_unreachable_database(broken_client):
    resp = broken_client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["database"].startswith("error:")


def test_unknown_route_uses_message_envelope(client):
    resp = client.get("/no/such/route")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}


def test_wrong_method_uses_message_envelope(client):
    resp = client.delete("/events")
    assert resp.status_code == 405
    assert "message" in resp.json()


def test_malformed_json_is_bad_request(client):
    resp = client.post("/login", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json()["message"].startswith("Invalid request")


def test_cors_headers(client):
    resp = client.get("/events", headers={"Origin": "http://frontend.example"})
    assert "access-control-allow-origin" in resp.headers


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PORT", "MONGO_DB", "BCRYPT_ROUNDS", "CORS_ORIGINS", "DEBUG"):
            monkeypatch.delenv(name, raising=False)
        s = Settings()
        assert s.port == 5000
        assert s.mongo_db == "event_hub"
        assert s.bcrypt_rounds == 10
        assert s.cors_origin_list == ["*"]
        assert s.debug is False

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("PORT", "8080")
        monkeypatch.setenv("DEBUG", "yes")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example,")
        s = Settings()
        assert s.port == 8080
        assert s.debug is True
        assert s.cors_origin_list == ["http://a.example", "http://b.example"]


def test_unexpected_error_is_server_error_with_cors_headers():
    failing = MagicMock()
    failing.__getitem__.return_value.find.side_effect = RuntimeError("cursor exploded")
    app.dependency_overrides[get_db] = lambda: failing
    try:
        resp = TestClient(app).get("/events", headers={"Origin": "http://frontend.example"})
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    assert resp.json() == {"message": "Server error", "error": "cursor exploded"}
    assert "access-control-allow-origin" in resp.headers
