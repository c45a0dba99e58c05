from src.zenkai.services.message_service import MessageService
from src.zenkai.services.project_service import ProjectService

__all__ = ["MessageService", "ProjectService"]
