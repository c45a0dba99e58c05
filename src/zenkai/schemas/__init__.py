from src.zenkai.schemas.message import (
    FragmentRead,
    MessageCreate,
    MessageRead,
    MessageWithFragmentRead,
)
from src.zenkai.schemas.project import ProjectCreate, ProjectRead
from src.zenkai.schemas.prompt import MAX_VALUE_LENGTH

__all__ = [
    "MAX_VALUE_LENGTH",
    # Message
    "FragmentRead",
    "MessageCreate",
    "MessageRead",
    "MessageWithFragmentRead",
    # Project
    "ProjectCreate",
    "ProjectRead",
]
