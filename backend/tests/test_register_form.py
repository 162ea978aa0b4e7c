"""Tests for the server-rendered /register form"""
from backend.app.models.user import User


def _form(**overrides):
    data = {
        "name": "Grace Hopper",
        "email": "grace@example.com",
        "password": "cobol1959",
        "password_confirmation": "cobol1959",
    }
    data.update(overrides)
    return data


def test_register_form_renders(client):
    r = client.get("/register")
    assert r.status_code == 200
    assert 'name="password_confirmation"' in r.text


def test_password_mismatch_shows_alert_and_creates_nothing(client, db_session):
    r = client.post("/register", data=_form(password_confirmation="different"))
    assert r.status_code == 400
    assert "Passwords do not match" in r.text
    assert 'value="grace@example.com"' in r.text
    assert db_session.query(User).filter(User.email == "grace@example.com").count() == 0


def test_matching_passwords_create_account(client, db_session):
    r = client.post("/register", data=_form())
    assert r.status_code == 201
    assert "Welcome, Grace Hopper" in r.text
    assert db_session.query(User).filter(User.email == "grace@example.com").count() == 1


def test_form_shows_field_errors(client):
    r = client.post("/register", data=_form(email="bad", password="123", password_confirmation="123"))
    assert r.status_code == 400
    assert "Please include a valid email" in r.text
    assert "Please enter a password with 6 or more characters" in r.text


def test_form_reports_existing_account(client, test_user):
    r = client.post("/register", data=_form(email=test_user.email))
    assert r.status_code == 400
    assert "User already exists" in r.text
