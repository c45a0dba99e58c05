"""Repository for Message entity."""

from uuid import UUID

from sqlalchemy.orm import selectinload
from sqlmodel import select

from src.zenkai.models import Message
from src.zenkai.repositories.base import BaseRepository


class MessageRepository(BaseRepository[Message]):
    """Repository for Message entity."""

    model = Message

    async def list_for_project(self, project_id: UUID) -> list[Message]:
        """List a project's messages with fragments, oldest first.

        Does not check ownership; callers must verify the project first.
        """
        result = await self.session.execute(
            select(Message)
            .where(Message.project_id == project_id)
            .options(selectinload(Message.fragment))  # type: ignore[arg-type]
            .order_by(Message.updated_at.asc(), Message.created_at.asc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())
