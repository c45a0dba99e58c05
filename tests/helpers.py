"""Test helper functions for common data creation patterns."""

from datetime import timedelta

from sqlalchemy.ext.asyncio import AsyncSession

from src.zenkai.core.security import create_access_token
from src.zenkai.models import Message, Project, User
from tests.factories import MessageFactory, ProjectFactory, UserFactory, utc_now


def auth_headers(caller_id: str) -> dict[str, str]:
    """Bearer header for a caller id."""
    return {"Authorization": f"Bearer {create_access_token(caller_id)}"}


async def create_project_with_messages(
    session: AsyncSession,
    caller_id: str,
    contents: list[str],
    **project_kwargs,
) -> tuple[Project, list[Message]]:
    """Create a caller's project with messages one second apart, oldest first.

    Args:
        session: Database session
        caller_id: Owner of the project
        contents: Message contents in chronological order
        **project_kwargs: Additional args passed to ProjectFactory

    Returns:
        Tuple of (project, messages)
    """
    if await session.get(User, caller_id) is None:
        session.add(UserFactory.for_caller(caller_id))
        await session.flush()

    project = ProjectFactory.build(user_id=caller_id, **project_kwargs)
    session.add(project)
    await session.flush()

    start = utc_now() - timedelta(minutes=10)
    messages = []
    for i, content in enumerate(contents):
        stamp = start + timedelta(seconds=i)
        message = MessageFactory.build(
            project_id=project.id, content=content, created_at=stamp, updated_at=stamp
        )
        session.add(message)
        messages.append(message)

    await session.commit()
    return project, messages
