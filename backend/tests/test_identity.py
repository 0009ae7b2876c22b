from datetime import timedelta

import pytest
from jose import jwt

from screenlist.config import get_settings
from screenlist.errors import AuthError
from screenlist.services.identity import (
    create_access_token,
    hash_password,
    verify_password,
    verify_token,
)


def test_token_round_trip_yields_user_id():
    token = create_access_token(42)
    assert verify_token(token) == 42


@pytest.mark.parametrize("token", [None, ""])
def test_missing_token_rejected(token):
    with pytest.raises(AuthError):
        verify_token(token)


def test_garbage_token_rejected():
    with pytest.raises(AuthError):
        verify_token("not.a.jwt")


def test_expired_token_rejected():
    token = create_access_token(1, expires_delta=timedelta(seconds=-5))
    with pytest.raises(AuthError):
        verify_token(token)


def test_token_signed_with_other_secret_rejected():
    token = jwt.encode({"sub": "1"}, "some-other-secret", algorithm="HS256")
    with pytest.raises(AuthError):
        verify_token(token)


def test_token_without_numeric_subject_rejected():
    token = jwt.encode({"sub": "alice"}, get_settings().jwt_secret, algorithm="HS256")
    with pytest.raises(AuthError):
        verify_token(token)


def test_all_rejections_share_one_message():
    messages = set()
    for bad in (None, "garbage", create_access_token(1, expires_delta=timedelta(seconds=-5))):
        with pytest.raises(AuthError) as exc:
            verify_token(bad)
        messages.add(exc.value.message)
    assert len(messages) == 1


def test_password_hash_is_salted_and_verifies():
    first = hash_password("hunter2")
    second = hash_password("hunter2")
    assert first != second
    assert verify_password("hunter2", first)
    assert not verify_password("hunter3", first)


async def test_protected_route_without_header_is_401(client):
    resp = await client.get("/api/watchlist")
    assert resp.status_code == 401
    assert resp.json()["error"]
    assert resp.headers["www-authenticate"] == "Bearer"


async def test_protected_route_with_bad_token_is_401(client):
    resp = await client.get("/api/progress", headers={"Authorization": "Bearer nope"})
    assert resp.status_code == 401
    assert set(resp.json()) == {"error", "code"}


async def test_protected_route_with_expired_token_is_401(client):
    token = create_access_token(1, expires_delta=timedelta(seconds=-5))
    resp = await client.get("/api/progress", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


async def test_health_is_public(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
