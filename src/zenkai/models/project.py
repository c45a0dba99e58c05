"""Project model."""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Field, Relationship, SQLModel

from src.zenkai.models.base import utc_now

if TYPE_CHECKING:
    from src.zenkai.models.message import Message


class Project(SQLModel, table=True):
    """A conversation with the code agent, owned by one user."""

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=200)
    user_id: str = Field(foreign_key="users.id", max_length=255, index=True)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, index=True)

    messages: list["Message"] = Relationship(
        back_populates="project",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )
