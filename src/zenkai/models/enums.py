"""Shared enums for models."""

from enum import Enum


class MessageRole(str, Enum):
    """Who authored a message."""

    USER = "USER"
    ASSISTANT = "ASSISTANT"


class MessageType(str, Enum):
    """Whether a message carries a result or reports a failure."""

    RESULT = "RESULT"
    ERROR = "ERROR"
