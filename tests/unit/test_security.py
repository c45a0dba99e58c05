"""Tests for caller tokens and settings validation."""

from datetime import timedelta

import pytest
from jose import jwt
from pydantic import ValidationError

from src.zenkai.core.config import Settings, get_settings
from src.zenkai.core.security import ACCESS_TOKEN_TYPE, create_access_token, decode_token

pytestmark = pytest.mark.unit


class TestCallerToken:
    def test_roundtrip_carries_caller_id(self):
        payload = decode_token(create_access_token("user_abc"))
        assert payload is not None
        assert payload["sub"] == "user_abc"
        assert payload["type"] == ACCESS_TOKEN_TYPE

    def test_expired_token_rejected(self):
        token = create_access_token("user_abc", expires_delta=timedelta(seconds=-1))
        assert decode_token(token) is None

    def test_wrong_signature_rejected(self):
        settings = get_settings()
        token = jwt.encode(
            {"sub": "user_abc", "type": ACCESS_TOKEN_TYPE},
            "another-secret-key-with-at-least-32-characters",
            algorithm=settings.jwt_algorithm,
        )
        assert decode_token(token) is None

    def test_garbage_rejected(self):
        assert decode_token("not-a-jwt") is None


class TestSettingsValidation:
    def test_short_jwt_secret_rejected(self):
        with pytest.raises(ValidationError, match="at least 32 characters"):
            Settings(database_url="sqlite+aiosqlite://", jwt_secret_key="short")

    def test_placeholder_jwt_secret_rejected(self):
        with pytest.raises(ValidationError, match="must be changed"):
            Settings(
                database_url="sqlite+aiosqlite://",
                jwt_secret_key="change-this-to-a-secure-random-string",
            )

    def test_cors_wildcard_rejected(self):
        with pytest.raises(ValidationError, match="wildcard"):
            Settings(
                database_url="sqlite+aiosqlite://",
                jwt_secret_key="x" * 32,
                cors_origins=["*"],
            )

    def test_job_defaults(self):
        settings = Settings(database_url="sqlite+aiosqlite://", jwt_secret_key="x" * 32)
        assert settings.temporal_task_queue == "code-agent"
        assert settings.sandbox_template == "zenkai-nextjs-test"
        assert settings.sandbox_port == 3000
        assert settings.agent_name == "code-agent"
        assert settings.agent_model == "gpt-4.1"
