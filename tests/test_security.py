# File: tests/test_security.py

from datetime import timedelta

import pytest
from jose import jwt

from chronoboard.core import security
from chronoboard.core.exceptions import AuthenticationError


def test_password_hash_verifies():
    hashed = security.get_password_hash("correct horse")
    assert hashed != "correct horse"
    assert security.verify_password("correct horse", hashed)
    assert not security.verify_password("wrong horse", hashed)


def test_password_beyond_72_bytes_is_truncated():
    base = "x" * 72
    hashed = security.get_password_hash(base + "tail")
    assert security.verify_password(base + "other-tail", hashed)


def test_malformed_hash_does_not_verify():
    assert not security.verify_password("anything", "not-a-bcrypt-hash")


def test_access_token_carries_subject():
    token = security.create_access_token({"sub": "42"})
    payload = security.decode_token(token)
    assert payload["sub"] == "42"
    assert payload["type"] == "access"


def test_expired_token_is_rejected():
    token = security.create_access_token({"sub": "1"}, expires_delta=timedelta(seconds=-5))
    with pytest.raises(AuthenticationError, match="expired"):
        security.decode_token(token)


def test_token_with_other_type_is_rejected():
    token = jwt.encode({"sub": "1", "type": "refresh"}, security.SECRET_KEY, algorithm=security.ALGORITHM)
    with pytest.raises(AuthenticationError):
        security.decode_token(token)


def test_token_signed_with_other_key_is_rejected():
    token = jwt.encode({"sub": "1", "type": "access"}, "some-other-key", algorithm=security.ALGORITHM)
    with pytest.raises(AuthenticationError):
        security.decode_token(token)
