"""Message endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from src.zenkai.api.dependencies import CallerId, MessageServiceDep
from src.zenkai.schemas import MessageCreate, MessageRead, MessageWithFragmentRead

router = APIRouter(prefix="/messages", tags=["messages"])


@router.get(
    "",
    response_model=list[MessageWithFragmentRead],
    summary="List messages",
    description="List a project's messages with their fragments, oldest first.",
    responses={
        200: {"description": "Messages of the project"},
        404: {"description": "Project not found"},
    },
)
async def list_messages(
    project_id: Annotated[str, Query(min_length=1, description="Project to read")],
    caller_id: CallerId,
    service: MessageServiceDep,
) -> list[MessageWithFragmentRead]:
    """List a project's messages."""
    messages = await service.list_messages(caller_id, project_id)
    return [MessageWithFragmentRead.model_validate(m) for m in messages]


@router.post(
    "",
    response_model=MessageRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create message",
    responses={
        201: {"description": "Message created and code agent started"},
        404: {"description": "Project not found"},
        422: {"description": "Prompt is empty or too long"},
    },
)
async def create_message(
    request: MessageCreate,
    caller_id: CallerId,
    service: MessageServiceDep,
) -> MessageRead:
    """Post a prompt to a project and start the code agent."""
    message = await service.create_message(caller_id, request.project_id, request.value)
    return MessageRead.model_validate(message)
