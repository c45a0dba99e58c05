"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.zenkai.api.dependencies.db import DBSession
from src.zenkai.repositories import MessageRepository, ProjectRepository, UserRepository


def get_user_repository(session: DBSession) -> UserRepository:
    """Get user repository."""
    return UserRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    """Get project repository."""
    return ProjectRepository(session)


def get_message_repository(session: DBSession) -> MessageRepository:
    """Get message repository."""
    return MessageRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
MessageRepo = Annotated[MessageRepository, Depends(get_message_repository)]
