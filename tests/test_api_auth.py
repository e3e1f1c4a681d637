# tests/test_api_auth.py
from datetime import timedelta

from app.domain.models.user import User

from .conftest import ALICE_PASSWORD, login_via_api, register_via_api


def _stored_user(db_session, username="alice"):
    db_session.expire_all()
    return db_session.query(User).filter(User.username == username).one()


def test_health_and_root(client):
    assert client.get("/health").json() == {"status": "healthy"}
    assert client.get("/").json()["status"] == "running"


def test_register_returns_profile_without_secrets(client):
    body = register_via_api(client)
    assert body["username"] == "alice"
    assert "password_hash" not in body
    assert "password_reset_token" not in body


def test_register_duplicate_is_conflict(client):
    register_via_api(client)
    r = client.post(
        "/api/auth/register",
        json={"username": "alice", "email": "new@example.com", "password": "password123"},
    )
    assert r.status_code == 409
    assert r.json()["error"]["message"] == "Username already exists."


def test_register_validates_payload(client):
    r = client.post("/api/auth/register", json={"username": "al", "email": "not-an-email", "password": "x"})
    assert r.status_code == 422


def test_login_sets_session_and_logout_clears_it(client):
    register_via_api(client)
    assert client.get("/api/auth/me").status_code == 401

    r = login_via_api(client)
    assert r.status_code == 200
    assert r.json()["message"] == "Login successful."
    assert client.get("/api/auth/me").json()["username"] == "alice"

    assert client.post("/api/auth/logout").status_code == 200
    assert client.get("/api/auth/me").status_code == 401


def test_login_invalid_credentials_is_401_and_uniform(client):
    register_via_api(client)
    unknown = login_via_api(client, username="nobody")
    wrong = login_via_api(client, password="wrong-password")
    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json()["error"]["message"] == wrong.json()["error"]["message"]


def test_lockout_over_http(client, clock, db_session):
    register_via_api(client)
    assert login_via_api(client, password="bad").status_code == 401
    assert login_via_api(client, password="bad").status_code == 401

    third = login_via_api(client, password="bad")
    assert third.status_code == 423
    assert third.json()["error"]["code"] == "AccountLockedException"

    clock.advance(minutes=5)
    still_locked = login_via_api(client)
    assert still_locked.status_code == 423
    assert still_locked.json()["error"]["message"].startswith("Account is locked until")

    clock.now = _stored_user(db_session).lockout_end + timedelta(seconds=1)
    assert login_via_api(client).status_code == 200
    assert _stored_user(db_session).failed_login_attempts == 0


def test_forgot_and_reset_password_flow(client, clock, db_session):
    register_via_api(client)

    known = client.post("/api/auth/forgot-password", json={"email": "alice@example.com"})
    unknown = client.post("/api/auth/forgot-password", json={"email": "ghost@example.com"})
    assert known.status_code == unknown.status_code == 200
    assert known.json() == unknown.json()

    user = _stored_user(db_session)
    token = user.password_reset_token
    assert user.password_reset_token_expiry == clock.now + timedelta(hours=1)

    r = client.post("/api/auth/reset-password", json={"token": token, "new_password": "NewPass1"})
    assert r.status_code == 200
    assert _stored_user(db_session).password_reset_token is None

    again = client.post("/api/auth/reset-password", json={"token": token, "new_password": "NewPass2"})
    assert again.status_code == 400
    assert again.json()["error"]["message"] == "Invalid or expired reset token."

    assert login_via_api(client, password=ALICE_PASSWORD).status_code == 401
    assert login_via_api(client, password="NewPass1").status_code == 200


def test_request_id_header_is_returned(client):
    r = client.get("/health", headers={"X-Request-ID": "7c9e6679-7425-40de-944b-e07fc1f90ae7"})
    assert r.headers["X-Request-ID"] == "7c9e6679-7425-40de-944b-e07fc1f90ae7"


def test_requests_use_the_isolated_test_database(client, db_session):
    from sqlalchemy import inspect

    from app.config import get_settings
    from app.infrastructure.database import engine

    register_via_api(client)

    assert get_settings().DATABASE_URL == "sqlite://"
    assert db_session.query(User).filter(User.username == "alice").count() == 1
    assert not inspect(engine).has_table("users")
