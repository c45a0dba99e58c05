from fastapi import APIRouter

from src.zenkai.api.v1 import messages, projects

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(projects.router)
api_router.include_router(messages.router)
