from datetime import timedelta

import jwt
import pytest

from app.core.exceptions import InvalidToken
from app.schemas.auth import SessionUser
from app.services.token import TokenCodec


@pytest.fixture
def codec():
    return TokenCodec(secret_key="codec-secret", expires_in=timedelta(hours=1))


def test_issue_and_verify_returns_same_identity(codec):
    token = codec.issue(SessionUser(id=7, username="alice"))

    assert codec.verify(token) == SessionUser(id=7, username="alice")


def test_token_carries_expiry_claims(codec):
    token = codec.issue(SessionUser(id=7, username="alice"))
    payload = jwt.decode(token, "codec-secret", algorithms=["HS256"])

    assert payload["id"] == 7
    assert payload["username"] == "alice"
    assert payload["exp"] > payload["iat"]


def test_expired_token_is_rejected():
    codec = TokenCodec(secret_key="codec-secret", expires_in=timedelta(seconds=-10))
    token = codec.issue(SessionUser(id=1, username="bob"))

    with pytest.raises(InvalidToken) as exc_info:
        codec.verify(token)
    assert exc_info.value.message == "Token has expired"


def test_token_signed_with_other_key_is_rejected(codec):
    other = TokenCodec(secret_key="other-secret")
    token = other.issue(SessionUser(id=1, username="bob"))

    with pytest.raises(InvalidToken):
        codec.verify(token)


def test_tampered_token_is_rejected(codec):
    token = codec.issue(SessionUser(id=1, username="bob"))
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    with pytest.raises(InvalidToken):
        codec.verify(tampered)


@pytest.mark.parametrize("token", ["", "not-a-jwt", "a.b.c"])
def test_malformed_token_is_rejected(codec, token):
    with pytest.raises(InvalidToken):
        codec.verify(token)


def test_token_without_user_fields_is_rejected(codec):
    token = jwt.encode({"sub": "1", "exp": 9999999999}, "codec-secret", algorithm="HS256")

    with pytest.raises(InvalidToken):
        codec.verify(token)


def test_token_without_exp_is_rejected(codec):
    token = jwt.encode({"id": 1, "username": "bob"}, "codec-secret", algorithm="HS256")

    with pytest.raises(InvalidToken):
        codec.verify(token)
