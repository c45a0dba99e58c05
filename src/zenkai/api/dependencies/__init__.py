"""FastAPI dependency injection definitions.

Re-exports all dependencies.
"""

# Auth
from src.zenkai.api.dependencies.auth import CallerId, get_caller_id

# Database
from src.zenkai.api.dependencies.db import DBSession, get_db_session

# Events
from src.zenkai.api.dependencies.events import Events, get_event_sender

# Repositories
from src.zenkai.api.dependencies.repositories import (
    MessageRepo,
    ProjectRepo,
    UserRepo,
    get_message_repository,
    get_project_repository,
    get_user_repository,
)

# Services
from src.zenkai.api.dependencies.services import (
    MessageServiceDep,
    ProjectServiceDep,
    get_message_service,
    get_project_service,
)

__all__ = [
    # Auth
    "CallerId",
    "get_caller_id",
    # Database
    "DBSession",
    "get_db_session",
    # Events
    "Events",
    "get_event_sender",
    # Repositories
    "MessageRepo",
    "ProjectRepo",
    "UserRepo",
    "get_message_repository",
    "get_project_repository",
    "get_user_repository",
    # Services
    "MessageServiceDep",
    "ProjectServiceDep",
    "get_message_service",
    "get_project_service",
]
