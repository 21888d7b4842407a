from __future__ import annotations

from datetime import timedelta

from quillblog.core.security import (
    create_access_token,
    decode_access_token,
    get_password_hash,
    verify_password,
)

from tests.conftest import make_user


def test_password_hash_round_trip() -> None:
    hashed = get_password_hash("secret123")
    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("wrong", hashed)


def test_token_carries_user_identity() -> None:
    payload = decode_access_token(create_access_token(7, "carol"))
    assert payload["sub"] == 7
    assert payload["username"] == "carol"


def test_expired_and_tampered_tokens_are_rejected() -> None:
    assert decode_access_token(create_access_token(7, "carol", timedelta(seconds=-1))) is None
    assert decode_access_token(create_access_token(7, "carol") + "x") is None
    assert decode_access_token("not-a-token") is None


def test_register_returns_token(client) -> None:
    resp = client.post(
        "/api/auth/register",
        json={"username": "dave", "email": "dave@example.com", "password": "secret123"},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "User registered successfully"
    assert body["user"]["username"] == "dave"
    assert decode_access_token(body["token"])["sub"] == body["user"]["id"]


def test_register_duplicate_username_or_email(client, db) -> None:
    make_user(db, "erin")
    resp = client.post(
        "/api/auth/register",
        json={"username": "erin", "email": "other@example.com", "password": "secret123"},
    )
    assert resp.status_code == 409
    resp = client.post(
        "/api/auth/register",
        json={"username": "other", "email": "erin@example.com", "password": "secret123"},
    )
    assert resp.status_code == 409


def test_register_validation(client) -> None:
    resp = client.post(
        "/api/auth/register",
        json={"username": "ab", "email": "bad", "password": "123"},
    )
    assert resp.status_code == 400
    fields = {e["field"] for e in resp.json()["errors"]}
    assert fields == {"username", "email", "password"}


def test_login(client, db) -> None:
    user = make_user(db, "frank", password="hunter22")
    resp = client.post("/api/auth/login", json={"username": "frank", "password": "hunter22"})
    assert resp.status_code == 200
    assert resp.json()["user"] == {"id": user.id, "username": "frank"}

    resp = client.post("/api/auth/login", json={"username": "frank", "password": "nope"})
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Invalid credentials"

    resp = client.post("/api/auth/login", json={"username": "nobody", "password": "nope"})
    assert resp.status_code == 401


def test_protected_routes_reject_bad_tokens(client, db) -> None:
    user = make_user(db, "gina")
    resp = client.delete("/api/posts/1")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Access token required"

    resp = client.delete("/api/posts/1", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 403
    assert resp.json()["detail"] == "Invalid token"

    expired = create_access_token(user.id, user.username, timedelta(minutes=-5))
    resp = client.delete("/api/posts/1", headers={"Authorization": f"Bearer {expired}"})
    assert resp.status_code == 403
