"""
Temporal Worker - Separate process from API.

Run with:
    uv run python -m src.zenkai.temporal.worker
"""

import asyncio
from collections.abc import Sequence

import uvicorn
from fastapi import FastAPI
from temporalio.client import Client
from temporalio.worker import Worker

from src.zenkai.core.config import get_settings
from src.zenkai.core.db import dispose_sync_engine
from src.zenkai.core.logging import get_logger, setup_logging
from src.zenkai.integrations.agent import configure_agent_provider
from src.zenkai.temporal.activities import CODE_AGENT_ACTIVITIES
from src.zenkai.temporal.workflows import CodeAgentRunWorkflow

logger = get_logger(__name__)

WORKER_HEALTH_PORT = 8001


def create_worker(
    client: Client,
    task_queue: str,
    workflows: Sequence[type],
    activities: Sequence[object],
    *,
    max_concurrent_activities: int = 20,
    max_concurrent_workflow_tasks: int = 20,
) -> Worker:
    """Create a worker with tuned settings.

    Args:
        client: Temporal client
        task_queue: Task queue name
        workflows: List of workflow classes
        activities: List of activity functions
        max_concurrent_activities: Max concurrent activity executions
        max_concurrent_workflow_tasks: Max concurrent workflow task executions

    Returns:
        Configured Worker instance
    """
    return Worker(
        client,
        task_queue=task_queue,
        workflows=list(workflows),
        activities=list(activities),  # type: ignore[arg-type]
        max_concurrent_activities=max_concurrent_activities,
        max_concurrent_workflow_tasks=max_concurrent_workflow_tasks,
    )


def create_health_app(task_queue: str) -> FastAPI:
    """Lightweight health app for K8s liveness and readiness checks."""
    health_app = FastAPI(title="Temporal Worker Health")

    @health_app.get("/health")
    async def health() -> dict[str, str]:
        return {
            "status": "healthy",
            "service": "temporal-worker",
            "task_queue": task_queue,
        }

    @health_app.get("/ready")
    async def ready() -> dict[str, str]:
        return {"status": "ready"}

    return health_app


async def run_health_server(task_queue: str, port: int = WORKER_HEALTH_PORT) -> None:
    """Serve the health app alongside the worker."""
    config = uvicorn.Config(
        create_health_app(task_queue),
        host="0.0.0.0",
        port=port,
        log_level="warning",
    )
    server = uvicorn.Server(config)
    logger.info(f"Starting health server on port {port}")
    await server.serve()


async def main() -> None:
    """Main entry point for the Temporal worker."""
    settings = get_settings()
    setup_logging(settings.debug)
    configure_agent_provider()

    client = await Client.connect(
        settings.temporal_host,
        namespace=settings.temporal_namespace,
    )

    worker = create_worker(
        client,
        settings.temporal_task_queue,
        workflows=[CodeAgentRunWorkflow],
        activities=CODE_AGENT_ACTIVITIES,
    )
    logger.info(f"Starting worker on queue: {settings.temporal_task_queue}")

    try:
        await asyncio.gather(
            worker.run(),
            run_health_server(settings.temporal_task_queue),
        )
    finally:
        dispose_sync_engine()


if __name__ == "__main__":
    asyncio.run(main())
