"""Tests for POST /api/users (registration)"""
import pytest

from backend.app.models.user import User


def test_register_returns_usable_token(client, db_session):
    r = client.post(
        "/api/users",
        json={"name": "Ada Lovelace", "email": "ada@example.com", "password": "engine42"},
    )
    assert r.status_code == 200
    token = r.json()["token"]

    me = client.get("/api/auth", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["name"] == "Ada Lovelace"


def test_register_stores_hash_and_avatar(client, db_session):
    client.post(
        "/api/users",
        json={"name": "Ada Lovelace", "email": "ada@example.com", "password": "engine42"},
    )
    user = db_session.query(User).filter(User.email == "ada@example.com").one()
    assert user.hashed_password != "engine42"
    assert user.hashed_password.startswith("$2")
    assert "s=200" in user.avatar and "d=mm" in user.avatar


def test_register_duplicate_email(client, test_user):
    r = client.post(
        "/api/users",
        json={"name": "Copy", "email": "test@example.com", "password": "whatever1"},
    )
    assert r.status_code == 400
    assert r.json() == {"errors": [{"msg": "User already exists"}]}


def test_register_reports_every_invalid_field(client, db_session):
    r = client.post("/api/users", json={"name": "", "email": "nope", "password": "123"})
    assert r.status_code == 400
    errors = r.json()["errors"]
    assert [e["param"] for e in errors] == ["name", "email", "password"]
    assert errors[2]["msg"] == "Please enter a password with 6 or more characters"
    assert all(e["location"] == "body" for e in errors)
    assert db_session.query(User).count() == 1  # only the fixture user


@pytest.mark.parametrize("bad_email", ["a@exa..mple.com", "x@-bad-.com", "no-at-sign.com"])
def test_register_rejects_malformed_email(client, db_session, bad_email):
    r = client.post("/api/users", json={"name": "Eve", "email": bad_email, "password": "secret99"})
    assert r.status_code == 400
    assert r.json()["errors"] == [
        {"msg": "Please include a valid email", "param": "email", "location": "body", "value": bad_email}
    ]
    assert db_session.query(User).filter(User.email == bad_email).count() == 0
