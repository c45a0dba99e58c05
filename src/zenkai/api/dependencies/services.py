"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.zenkai.api.dependencies.db import DBSession
from src.zenkai.api.dependencies.events import Events
from src.zenkai.api.dependencies.repositories import MessageRepo, ProjectRepo, UserRepo
from src.zenkai.services import MessageService, ProjectService


def get_project_service(
    project_repo: ProjectRepo,
    user_repo: UserRepo,
    session: DBSession,
    events: Events,
) -> ProjectService:
    """Get project service."""
    return ProjectService(project_repo, user_repo, session, events)


def get_message_service(
    message_repo: MessageRepo,
    project_repo: ProjectRepo,
    session: DBSession,
    events: Events,
) -> MessageService:
    """Get message service."""
    return MessageService(message_repo, project_repo, session, events)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
MessageServiceDep = Annotated[MessageService, Depends(get_message_service)]
