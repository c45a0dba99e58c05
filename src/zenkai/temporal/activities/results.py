"""Write-back activities: persist the job outcome as assistant messages."""

import asyncio
from dataclasses import dataclass, field
from typing import Any
from uuid import UUID

from sqlmodel import Session, select
from temporalio import activity
from temporalio.exceptions import ApplicationError

from src.zenkai.core.db import get_sync_engine
from src.zenkai.core.logging import bind_job_context
from src.zenkai.models import Fragment, Message, MessageRole, MessageType, Project
from src.zenkai.models.base import utc_now

FRAGMENT_TITLE = "Fragment"
ERROR_MESSAGE = "Something went wrong. Please try again."
PROJECT_MISSING_ERROR_TYPE = "ProjectMissing"


@dataclass
class SaveResultInput:
    message_id: str  # Generated by the workflow so retries write the same row
    project_id: str
    output: str
    sandbox_url: str
    title: str = FRAGMENT_TITLE
    files: dict[str, Any] = field(default_factory=dict)


@dataclass
class SaveErrorInput:
    message_id: str
    project_id: str
    content: str = ERROR_MESSAGE


def _touch_project(session: Session, project_id: UUID) -> None:
    project = session.scalars(select(Project).where(Project.id == project_id)).first()
    if project is None:
        raise ApplicationError(
            f"Project {project_id} not found",
            type=PROJECT_MISSING_ERROR_TYPE,
            non_retryable=True,
        )
    project.updated_at = utc_now()


def _sync_save_result(input: SaveResultInput) -> bool:
    """Insert the assistant message and its fragment. Returns False if already saved."""
    engine = get_sync_engine()
    message_id = UUID(input.message_id)
    with Session(engine) as session:
        if session.get(Message, message_id) is not None:
            return False

        project_id = UUID(input.project_id)
        _touch_project(session, project_id)
        message = Message(
            id=message_id,
            project_id=project_id,
            content=input.output,
            role=MessageRole.ASSISTANT.value,
            type=MessageType.RESULT.value,
        )
        session.add(message)
        session.add(
            Fragment(
                message_id=message_id,
                sandbox_url=input.sandbox_url,
                title=input.title,
                files=input.files,
            )
        )
        session.commit()
        return True


def _sync_save_error(input: SaveErrorInput) -> bool:
    """Insert the assistant error message. Returns False if already saved."""
    engine = get_sync_engine()
    message_id = UUID(input.message_id)
    with Session(engine) as session:
        if session.get(Message, message_id) is not None:
            return False

        project_id = UUID(input.project_id)
        _touch_project(session, project_id)
        session.add(
            Message(
                id=message_id,
                project_id=project_id,
                content=input.content,
                role=MessageRole.ASSISTANT.value,
                type=MessageType.ERROR.value,
            )
        )
        session.commit()
        return True


@activity.defn
async def save_result(input: SaveResultInput) -> bool:
    """
    Persist the agent's output as an ASSISTANT/RESULT message with a fragment.

    Idempotency: The message id is chosen by the workflow, so a retried
    attempt finds the row written by an earlier attempt and does nothing.

    Args:
        input: SaveResultInput with message_id, project_id, output and sandbox_url

    Returns:
        True if the message was written, False if it already existed

    Raises:
        ApplicationError: Non-retryable, if the project no longer exists
    """
    bind_job_context(input.project_id, workflow_id=activity.info().workflow_id)
    activity.logger.info(f"Saving agent result for project {input.project_id}")
    return await asyncio.to_thread(_sync_save_result, input)


@activity.defn
async def save_error(input: SaveErrorInput) -> bool:
    """
    Persist an ASSISTANT/ERROR message after the job failed.

    Idempotency: Same as save_result - keyed by the workflow-chosen message id.
    """
    bind_job_context(input.project_id, workflow_id=activity.info().workflow_id)
    activity.logger.info(f"Saving error message for project {input.project_id}")
    return await asyncio.to_thread(_sync_save_error, input)
