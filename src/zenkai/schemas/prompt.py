"""Shared validation for natural-language prompt values."""

MAX_VALUE_LENGTH = 10000


def validate_value(v: str) -> str:
    """Enforce 1 <= len(value) <= MAX_VALUE_LENGTH with caller-facing messages."""
    if len(v) < 1:
        raise ValueError("Value is required.")
    if len(v) > MAX_VALUE_LENGTH:
        raise ValueError("Value is too long.")
    return v


def validate_project_id(v: str) -> str:
    """Only presence is checked here; an unknown or malformed id is a 404 later."""
    if len(v) < 1:
        raise ValueError("Project ID is required.")
    return v
