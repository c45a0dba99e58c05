"""Project schemas for API request/response."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from src.zenkai.schemas.prompt import MAX_VALUE_LENGTH, validate_value


class ProjectCreate(BaseModel):
    """Schema for creating a project from a first prompt."""

    value: str = Field(description=f"Task description, 1-{MAX_VALUE_LENGTH} characters")

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        return validate_value(v)


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: UUID
    name: str
    user_id: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
