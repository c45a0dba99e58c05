"""Model exports.

Import from here: `from src.zenkai.models import Project, Message`
"""

from src.zenkai.models.enums import MessageRole, MessageType
from src.zenkai.models.message import Fragment, Message
from src.zenkai.models.project import Project
from src.zenkai.models.user import User

__all__ = [
    # Enums
    "MessageRole",
    "MessageType",
    # Tables
    "Fragment",
    "Message",
    "Project",
    "User",
]
