"""Message and Fragment models."""

from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional
from uuid import UUID, uuid4

from sqlalchemy import JSON, Column, Text
from sqlmodel import Field, Relationship, SQLModel

from src.zenkai.models.base import utc_now
from src.zenkai.models.enums import MessageRole, MessageType

if TYPE_CHECKING:
    from src.zenkai.models.project import Project


class Message(SQLModel, table=True):
    """One chat turn in a project. Immutable once written."""

    __tablename__ = "messages"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    project_id: UUID = Field(foreign_key="projects.id", index=True, ondelete="CASCADE")
    content: str = Field(sa_column=Column(Text, nullable=False))
    role: str = Field(default=MessageRole.USER.value, max_length=20)
    type: str = Field(default=MessageType.RESULT.value, max_length=20)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now, index=True)

    project: "Project" = Relationship(back_populates="messages")
    fragment: Optional["Fragment"] = Relationship(
        back_populates="message",
        sa_relationship_kwargs={"uselist": False, "cascade": "all, delete-orphan"},
    )


class Fragment(SQLModel, table=True):
    """Artifact produced by the code agent for an assistant message."""

    __tablename__ = "fragments"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    message_id: UUID = Field(foreign_key="messages.id", unique=True, ondelete="CASCADE")
    sandbox_url: str = Field(max_length=2048)
    title: str = Field(max_length=200)
    files: dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    message: Message = Relationship(back_populates="fragment")
