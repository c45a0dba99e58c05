"""Caller identity tokens.

Caller ids are issued by an external identity provider and arrive as the
``sub`` claim of a signed JWT. This service only verifies tokens; it never
stores credentials.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

from src.zenkai.core.config import get_settings

ACCESS_TOKEN_TYPE = "access"


def create_access_token(subject: str, expires_delta: timedelta | None = None) -> str:
    """Create a signed caller token (used by local tooling and tests)."""
    settings = get_settings()
    expire = datetime.now(UTC) + (expires_delta or timedelta(minutes=30))
    to_encode = {
        "sub": subject,
        "exp": expire,
        "type": ACCESS_TOKEN_TYPE,
    }
    return jwt.encode(  # type: ignore[no-any-return]
        to_encode,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> dict[str, Any] | None:
    """Decode and verify a JWT. Returns None if invalid or expired."""
    settings = get_settings()
    try:
        payload: dict[str, Any] = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
        return payload
    except JWTError:
        return None
