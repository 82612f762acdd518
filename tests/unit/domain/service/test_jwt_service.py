"""Unit tests for JWTService actor resolution."""

from datetime import timedelta
from uuid import uuid4

import pytest

from quill.config import AuthSettings
from quill.domain.service import JWTService
from quill.util.jwt import JWTError, create_token

SETTINGS = AuthSettings(jwt_secret="test-secret")


class TestResolveActor:
    """Tests for resolve_actor."""

    def test_valid_token_resolves_actor(self):
        # Arrange
        jwt_service = JWTService(SETTINGS)
        user_id = uuid4()
        token = jwt_service.create_token(str(user_id), "alice.example")

        # Act & Assert
        assert jwt_service.resolve_actor(token) == user_id

    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    def test_missing_or_garbage_token_is_anonymous(self, token):
        assert JWTService(SETTINGS).resolve_actor(token) is None

    def test_expired_token_is_anonymous(self):
        token = create_token(
            str(uuid4()), "alice.example", SETTINGS, expires_in=timedelta(seconds=-1)
        )

        assert JWTService(SETTINGS).resolve_actor(token) is None

    def test_token_signed_with_other_secret_is_anonymous(self):
        token = create_token(
            str(uuid4()), "alice.example", AuthSettings(jwt_secret="other")
        )

        assert JWTService(SETTINGS).resolve_actor(token) is None

    def test_non_uuid_actor_is_anonymous(self):
        token = create_token("not-a-uuid", "alice.example", SETTINGS)

        assert JWTService(SETTINGS).resolve_actor(token) is None


class TestVerifyToken:
    """Tests for verify_token."""

    def test_expired_token_raises(self):
        jwt_service = JWTService(SETTINGS)
        token = create_token(
            str(uuid4()), "alice.example", SETTINGS, expires_in=timedelta(seconds=-1)
        )

        with pytest.raises(JWTError, match="expired"):
            jwt_service.verify_token(token)
