"""Project procedures."""

from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.zenkai.core.logging import get_logger
from src.zenkai.models import Message, MessageRole, MessageType, Project
from src.zenkai.repositories import ProjectRepository, UserRepository
from src.zenkai.services.access import assert_owned
from src.zenkai.services.naming import generate_project_name
from src.zenkai.temporal.events import CodeAgentRunEvent, EventSender

logger = get_logger(__name__)


class ProjectService:
    """Project procedures - every call is scoped to the calling user."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        user_repo: UserRepository,
        session: AsyncSession,
        events: EventSender,
    ):
        self.project_repo = project_repo
        self.user_repo = user_repo
        self.session = session
        self.events = events

    async def ensure_caller(self, caller_id: str) -> None:
        """Upsert the caller's user row in its own transaction.

        Two first requests from the same caller can both miss the row; the
        second insert fails on the primary key and is rolled back, leaving
        the row committed by the first.
        """
        if not await self.user_repo.add_if_missing(caller_id):
            return
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            logger.info("Caller row created concurrently", caller_id=caller_id)

    async def list_projects(self, caller_id: str) -> list[Project]:
        """All projects owned by the caller, most recently updated first."""
        return await self.project_repo.list_by_owner(caller_id)

    async def get_project(self, caller_id: str, project_id: UUID | str) -> Project:
        """Get one of the caller's projects.

        Raises:
            ProjectNotFoundError: If the caller does not own the project.
        """
        return await assert_owned(self.project_repo, project_id, caller_id)

    async def create_project(self, caller_id: str, value: str) -> Project:
        """
        Create a project from the caller's first prompt and start the agent.

        The project and its first USER message are committed together. The
        ``code-agent/run`` event is emitted after the commit; the agent runs
        asynchronously and this call does not wait for it.

        Args:
            caller_id: Externally issued caller id
            value: Validated prompt text

        Returns:
            The created project
        """
        await self.ensure_caller(caller_id)

        project = Project(name=generate_project_name(), user_id=caller_id)
        message = Message(
            project_id=project.id,
            content=value,
            role=MessageRole.USER.value,
            type=MessageType.RESULT.value,
        )
        self.project_repo.add(project)
        self.session.add(message)

        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project created", project_id=str(project.id), name=project.name)

        await self.events.send(
            CodeAgentRunEvent(value=value, project_id=str(project.id)),
            event_id=str(message.id),
        )
        return project
