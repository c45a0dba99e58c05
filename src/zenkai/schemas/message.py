"""Message schemas for API request/response."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.zenkai.schemas.prompt import MAX_VALUE_LENGTH, validate_project_id, validate_value


class MessageCreate(BaseModel):
    """Schema for posting a follow-up prompt to a project."""

    value: str = Field(description=f"Instruction, 1-{MAX_VALUE_LENGTH} characters")
    project_id: str

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        return validate_value(v)

    @field_validator("project_id")
    @classmethod
    def validate_project_id(cls, v: str) -> str:
        return validate_project_id(v)


class FragmentRead(BaseModel):
    """Schema for reading an agent-produced fragment."""

    id: UUID
    sandbox_url: str
    title: str
    files: dict[str, Any]
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MessageRead(BaseModel):
    """Schema for reading a message."""

    id: UUID
    project_id: UUID
    content: str
    role: str
    type: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class MessageWithFragmentRead(MessageRead):
    """Message with its attached fragment, as shown in the chat view."""

    fragment: FragmentRead | None = None
