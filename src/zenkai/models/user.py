"""User model."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.zenkai.models.base import utc_now


class User(SQLModel, table=True):
    """A caller known to the service.

    The primary key is the caller id issued by the external identity
    provider; rows are created lazily on first project creation.
    """

    __tablename__ = "users"

    id: str = Field(max_length=255, primary_key=True)
    external_id: str = Field(max_length=255, unique=True, index=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
