"""Repository for Project entity."""

from uuid import UUID

from sqlmodel import select

from src.zenkai.models import Project
from src.zenkai.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity. Every lookup is scoped to an owner."""

    model = Project

    async def get_owned(self, project_id: UUID, user_id: str) -> Project | None:
        """Get a project only if it belongs to the given user."""
        result = await self.session.execute(
            select(Project).where(Project.id == project_id, Project.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def list_by_owner(self, user_id: str) -> list[Project]:
        """List a user's projects, most recently updated first."""
        result = await self.session.execute(
            select(Project)
            .where(Project.user_id == user_id)
            .order_by(Project.updated_at.desc())  # type: ignore[attr-defined]
        )
        return list(result.scalars().all())
