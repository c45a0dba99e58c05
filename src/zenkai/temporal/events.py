"""Trigger events for background jobs.

Request procedures emit events; each event starts one durable workflow.
"""

from dataclasses import dataclass

from temporalio.client import Client

from src.zenkai.core.logging import get_logger

logger = get_logger(__name__)

CODE_AGENT_RUN_EVENT = "code-agent/run"


@dataclass(frozen=True)
class CodeAgentRunEvent:
    """Payload of the ``code-agent/run`` event."""

    value: str
    project_id: str


class EventSender:
    """Starts the workflow that consumes each event."""

    def __init__(self, client: Client, task_queue: str):
        self.client = client
        self.task_queue = task_queue

    @staticmethod
    def get_workflow_id(event_id: str) -> str:
        """Deterministic workflow ID, so the same event never starts two jobs."""
        return f"code-agent-run-{event_id}"

    async def send(self, event: CodeAgentRunEvent, *, event_id: str) -> str:
        """Emit ``code-agent/run``. Returns the workflow ID without waiting for it."""
        # Deferred: the workflow module imports CodeAgentRunEvent from here
        from src.zenkai.temporal.workflows import CodeAgentRunWorkflow

        workflow_id = self.get_workflow_id(event_id)
        await self.client.start_workflow(
            CodeAgentRunWorkflow.run,
            event,
            id=workflow_id,
            task_queue=self.task_queue,
        )
        logger.info(
            "Event sent",
            event=CODE_AGENT_RUN_EVENT,
            project_id=event.project_id,
            workflow_id=workflow_id,
        )
        return workflow_id
