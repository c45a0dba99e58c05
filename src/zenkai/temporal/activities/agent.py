"""Code agent activities."""

from dataclasses import dataclass

from temporalio import activity

from src.zenkai.core.logging import bind_job_context
from src.zenkai.integrations.agent import run_code_agent


@dataclass
class InvokeAgentInput:
    project_id: str
    value: str


@dataclass
class InvokeAgentOutput:
    output: str


@activity.defn
async def invoke_agent(input: InvokeAgentInput) -> InvokeAgentOutput:
    """
    Run the user's instruction through the code agent once.

    Idempotency: A retry runs the model again and may produce different text;
    only the output of the attempt that completes is recorded.
    """
    bind_job_context(input.project_id, workflow_id=activity.info().workflow_id)
    activity.logger.info(f"Invoking code agent for project {input.project_id}")
    output = await run_code_agent(input.value)
    activity.logger.info(f"Code agent finished for project {input.project_id}")
    return InvokeAgentOutput(output=output)
