"""Repository layer - data access abstraction."""

from src.zenkai.repositories.base import BaseRepository
from src.zenkai.repositories.message import MessageRepository
from src.zenkai.repositories.project import ProjectRepository
from src.zenkai.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "MessageRepository",
    "ProjectRepository",
    "UserRepository",
]
