"""Tests for token issuance/decoding and password hashing."""

from datetime import timedelta

from jose import jwt

from jobly.services.access_policy import Identity
from jobly.services.auth_service import (
    create_access_token,
    decode_token,
    get_password_hash,
    verify_password,
)
from jobly.settings import settings


class TestTokens:
    def test_round_trip(self):
        token = create_access_token({"username": "u1", "isAdmin": False})

        assert decode_token(token) == Identity(username="u1", is_admin=False)

    def test_admin_claim(self):
        token = create_access_token({"username": "admin", "isAdmin": True})

        identity = decode_token(token)
        assert identity is not None
        assert identity.has_admin_rights is True

    def test_missing_admin_flag_defaults_false(self):
        token = create_access_token({"username": "u1"})

        assert decode_token(token).is_admin is False

    def test_none_and_empty(self):
        assert decode_token(None) is None
        assert decode_token("") is None

    def test_malformed_token(self):
        assert decode_token("eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ") is None
        assert decode_token("not-a-jwt") is None

    def test_wrong_signature(self):
        token = jwt.encode({"username": "u1", "isAdmin": True}, "another-secret", algorithm="HS256")

        assert decode_token(token) is None

    def test_expired_token(self):
        token = create_access_token({"username": "u1", "isAdmin": False}, expires_delta=timedelta(seconds=-10))

        assert decode_token(token) is None

    def test_missing_username(self):
        token = jwt.encode({"isAdmin": True}, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

        assert decode_token(token) is None

    def test_non_boolean_admin_claim_kept_as_is(self):
        token = jwt.encode(
            {"username": "u1", "isAdmin": "true"},
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

        identity = decode_token(token)
        assert identity.is_admin == "true"
        assert identity.has_admin_rights is False


class TestPasswords:
    def test_hash_and_verify(self):
        hashed = get_password_hash("password1")

        assert hashed != "password1"
        assert verify_password("password1", hashed) is True
        assert verify_password("wrong", hashed) is False

    def test_garbage_hash(self):
        assert verify_password("password1", "not-a-bcrypt-hash") is False
