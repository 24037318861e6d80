# File: tests/test_security.py

from datetime import timedelta

import jwt
import pytest

from onboard.core.errors import UnauthorizedError
from onboard.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)


@pytest.mark.parametrize("password", ["secret1", "pässwörd-ünïcode"])
def test_password_round_trip(password):
    hashed = hash_password(password)

    assert hashed != password
    assert verify_password(password, hashed)
    assert not verify_password(password + "!", hashed)


def test_hashes_are_salted():
    assert hash_password("secret1") != hash_password("secret1")


def test_wrong_password_and_malformed_hash():
    hashed = hash_password("secret1")

    assert not verify_password("secret2", hashed)
    assert not verify_password("secret1", "not-a-bcrypt-hash")


def test_token_round_trip(settings):
    token = create_access_token(settings, user_id="abc123", email="a@x.com")

    identity = decode_access_token(settings, token)

    assert identity.user_id == "abc123"
    assert identity.email == "a@x.com"


def test_token_carries_expiry(settings):
    token = create_access_token(settings, user_id="abc123", email="a@x.com")

    claims = jwt.decode(token, settings.signing_secret, algorithms=["HS256"])

    assert claims["exp"] - claims["iat"] == settings.jwt_expires_minutes * 60


def test_expired_token_rejected(settings):
    token = create_access_token(
        settings, user_id="abc123", email="a@x.com", expires_delta=timedelta(seconds=-1)
    )

    with pytest.raises(UnauthorizedError):
        decode_access_token(settings, token)


def test_token_missing_email_rejected(settings):
    token = jwt.encode(
        {"sub": "abc123", "exp": 9999999999},
        settings.signing_secret,
        algorithm="HS256",
    )

    with pytest.raises(UnauthorizedError):
        decode_access_token(settings, token)


def test_tampered_token_rejected(settings):
    header, _, signature = create_access_token(settings, user_id="abc123", email="a@x.com").split(".")
    forged = create_access_token(settings, user_id="someone-else", email="b@x.com")
    tampered = ".".join([header, forged.split(".")[1], signature])

    with pytest.raises(UnauthorizedError):
        decode_access_token(settings, tampered)


def test_password_longer_than_bcrypt_limit_never_matches():
    password = "a" * 72
    hashed = hash_password(password)

    assert verify_password(password, hashed)
    assert not verify_password(password + "b", hashed)
    with pytest.raises(ValueError):
        hash_password(password + "b")
