"""Unit tests for JWTService."""

from datetime import datetime, timedelta

import jwt
import pytest

from study.config import AuthSettings
from study.domain.service import JWTService
from study.util.jwt import JWTError


@pytest.fixture
def jwt_service():
    return JWTService(AuthSettings(jwt_secret="unit-test-secret-0123456789abcdef0123"))


class TestJWTService:
    """Tests for token verification."""

    def test_round_trip_carries_identity(self, jwt_service):
        token = jwt_service.create_token("5b4a1d3e-1c1f-4c4a-9f57-5d6d2a0c9b11", "ada@x.edu")

        payload = jwt_service.verify_token(token)

        assert payload.user_id == "5b4a1d3e-1c1f-4c4a-9f57-5d6d2a0c9b11"
        assert payload.email == "ada@x.edu"

    def test_expired_token_is_rejected(self, jwt_service):
        token = jwt.encode(
            {"user_id": "u", "email": None, "exp": datetime.now() - timedelta(days=1)},
            jwt_service.auth_settings.jwt_secret,
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)

    def test_token_signed_with_other_secret_is_rejected(self, jwt_service):
        other = JWTService(AuthSettings(jwt_secret="another-secret-0123456789abcdef0123"))
        token = other.create_token("user")

        with pytest.raises(JWTError, match="Invalid token"):
            jwt_service.verify_token(token)

    def test_optional_lookups_treat_bad_tokens_as_anonymous(self, jwt_service):
        assert jwt_service.get_identity_from_token(None) is None
        assert jwt_service.get_user_id_from_token("not-a-token") is None

    def test_token_without_subject_is_rejected(self, jwt_service):
        token = jwt.encode(
            {"email": "ada@x.edu", "exp": datetime.now() + timedelta(days=1)},
            jwt_service.auth_settings.jwt_secret,
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="missing user_id"):
            jwt_service.verify_token(token)

    def test_issuer_is_checked_when_configured(self):
        secret = "unit-test-secret-0123456789abcdef0123"
        campus = JWTService(AuthSettings(jwt_secret=secret, jwt_issuer="campus-id"))
        elsewhere = JWTService(AuthSettings(jwt_secret=secret, jwt_issuer="elsewhere"))

        assert campus.verify_token(campus.create_token("user")).user_id == "user"
        with pytest.raises(JWTError, match="issuer"):
            campus.verify_token(elsewhere.create_token("user"))
