# tests/test_api_profile.py
from .conftest import login_via_api, register_via_api

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


def _login(client):
    register_via_api(client)
    assert login_via_api(client).status_code == 200


def test_edit_profile(client):
    _login(client)
    r = client.patch("/api/profile", json={"first_name": "Alice", "email": "alice@wonderland.org"})
    assert r.status_code == 200
    assert client.get("/api/profile").json()["email"] == "alice@wonderland.org"


def test_edit_profile_email_conflict(client):
    register_via_api(client, username="bob", email="bob@example.com")
    _login(client)
    r = client.patch("/api/profile", json={"email": "bob@example.com"})
    assert r.status_code == 409


def test_picture_upload_and_remove(client):
    _login(client)

    r = client.post("/api/profile/picture", files={"file": ("me.png", PNG_BYTES, "image/png")})
    assert r.status_code == 200
    path = r.json()["profile_picture_path"]
    assert path.startswith("/uploads/profile-pictures/")

    r = client.delete("/api/profile/picture")
    assert r.status_code == 200
    assert r.json()["profile_picture_path"] is None


def test_picture_upload_rejects_wrong_type(client):
    _login(client)
    r = client.post("/api/profile/picture", files={"file": ("notes.txt", b"hello", "text/plain")})
    assert r.status_code == 400
    assert "Only image files" in r.json()["error"]["message"]


def test_picture_upload_over_size_limit_is_rejected(client, picture_storage):
    _login(client)
    oversized = b"\x00" * (picture_storage.max_size + 1)
    r = client.post("/api/profile/picture", files={"file": ("big.png", oversized, "image/png")})
    assert r.status_code == 400
    assert r.json()["error"]["message"] == "File size must be less than 5MB."
    assert client.get("/api/profile").json()["profile_picture_path"] is None
