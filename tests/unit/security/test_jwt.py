import uuid
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from src.notethread.config import get_settings
from src.notethread.core.exceptions import InvalidTokenError
from src.notethread.security.jwt import (
    Identity,
    create_access_token,
    decode_access_token,
    verify_access_token,
)


def _encode(claims: dict, key: str = None) -> str:
    settings = get_settings()
    return jwt.encode(claims, key or settings.secret_key, algorithm=settings.algorithm)


def _claims(**overrides) -> dict:
    now = datetime.now(timezone.utc)
    claims = {
        "sub": str(uuid.uuid4()),
        "username": "alice",
        "iat": now,
        "exp": now + timedelta(minutes=5),
        "type": "access",
    }
    claims.update(overrides)
    return claims


def test_create_and_verify_roundtrip():
    uid = uuid.uuid4()
    token = create_access_token(uid, "alice")
    assert verify_access_token(token) == Identity(user_id=uid, username="alice")


def test_default_lifetime_comes_from_settings():
    payload = decode_access_token(create_access_token(uuid.uuid4(), "alice"))
    assert payload["type"] == "access"
    assert payload["exp"] - payload["iat"] == get_settings().access_token_expire_minutes * 60


def test_expired_token_rejected():
    token = create_access_token(uuid.uuid4(), "alice", expires_delta=timedelta(seconds=-5))
    with pytest.raises(InvalidTokenError):
        verify_access_token(token)


def test_token_signed_with_other_key_rejected():
    token = _encode(_claims(), key="some-other-secret")
    with pytest.raises(InvalidTokenError):
        decode_access_token(token)


def test_wrong_token_type_rejected():
    with pytest.raises(InvalidTokenError):
        decode_access_token(_encode(_claims(type="refresh")))


def test_garbage_token_rejected():
    with pytest.raises(InvalidTokenError):
        verify_access_token("not-a-jwt")


@pytest.mark.parametrize(
    "overrides",
    [
        {"sub": "not-a-uuid"},
        {"sub": None},
        {"username": None},
    ],
)
def test_missing_or_bad_identity_claims_rejected(overrides):
    claims = {k: v for k, v in _claims(**overrides).items() if v is not None}
    with pytest.raises(InvalidTokenError):
        verify_access_token(_encode(claims))
