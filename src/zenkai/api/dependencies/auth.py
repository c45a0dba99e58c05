"""Caller identity dependency."""

from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from src.zenkai.core.logging import bind_caller_context
from src.zenkai.core.security import ACCESS_TOKEN_TYPE, decode_token


async def get_caller_id(
    authorization: Annotated[str | None, Header()] = None,
) -> str:
    """Validate the bearer token and return the externally issued caller id."""
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid authorization header",
        )

    payload = decode_token(authorization[7:])
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    if payload.get("type", ACCESS_TOKEN_TYPE) != ACCESS_TOKEN_TYPE:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token type",
        )

    caller_id = payload.get("sub")
    if not caller_id or not isinstance(caller_id, str):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token payload",
        )

    bind_caller_context(caller_id)
    return caller_id


CallerId = Annotated[str, Depends(get_caller_id)]
