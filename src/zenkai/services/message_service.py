"""Message procedures."""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.zenkai.core.logging import get_logger
from src.zenkai.models import Message, MessageRole, MessageType
from src.zenkai.repositories import MessageRepository, ProjectRepository
from src.zenkai.services.access import assert_owned
from src.zenkai.temporal.events import CodeAgentRunEvent, EventSender

logger = get_logger(__name__)


class MessageService:
    """Message procedures - every call re-checks project ownership."""

    def __init__(
        self,
        message_repo: MessageRepository,
        project_repo: ProjectRepository,
        session: AsyncSession,
        events: EventSender,
    ):
        self.message_repo = message_repo
        self.project_repo = project_repo
        self.session = session
        self.events = events

    async def list_messages(self, caller_id: str, project_id: UUID | str) -> list[Message]:
        """Messages of one of the caller's projects, oldest first, with fragments.

        Raises:
            ProjectNotFoundError: If the caller does not own the project.
        """
        project = await assert_owned(self.project_repo, project_id, caller_id)
        return await self.message_repo.list_for_project(project.id)

    async def create_message(
        self, caller_id: str, project_id: UUID | str, value: str
    ) -> Message:
        """
        Post a follow-up prompt and start the agent for it.

        The ownership check and the insert share the session's transaction.
        The event is emitted only after the message is committed.

        Raises:
            ProjectNotFoundError: If the caller does not own the project.
        """
        project = await assert_owned(self.project_repo, project_id, caller_id)

        message = Message(
            project_id=project.id,
            content=value,
            role=MessageRole.USER.value,
            type=MessageType.RESULT.value,
        )
        self.message_repo.add(message)

        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Message created", project_id=str(project.id), message_id=str(message.id))

        await self.events.send(
            CodeAgentRunEvent(value=value, project_id=str(project.id)),
            event_id=str(message.id),
        )
        return message
