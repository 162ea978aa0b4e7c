"""Tests for the error contract: plain-text 500s and 400 field errors"""
from unittest.mock import patch

from fastapi.testclient import TestClient

from backend.main import app
from backend.app.services.profile_service import ProfileService


def test_root_and_health(client):
    assert client.get("/").text == "API Running"
    assert client.get("/health").json() == {"status": "healthy"}


def test_unexpected_error_returns_generic_500(db_session, caplog):
    client = TestClient(app, raise_server_exceptions=False)
    with patch.object(ProfileService, "list_profiles", side_effect=RuntimeError("connection reset by peer")):
        r = client.get("/api/profile")
    assert r.status_code == 500
    assert r.text == "Server error"
    assert "connection reset" not in r.text
    assert any("connection reset by peer" in rec.getMessage() for rec in caplog.records)


def test_missing_body_is_400(client, auth_headers):
    r = client.post("/api/profile", headers=auth_headers)
    assert r.status_code == 400
    assert "errors" in r.json()
