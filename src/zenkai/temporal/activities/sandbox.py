"""Sandbox activities."""

from dataclasses import dataclass

from temporalio import activity

from src.zenkai.core.config import get_settings
from src.zenkai.core.logging import bind_job_context
from src.zenkai.integrations.sandbox import create_sandbox, get_sandbox_url


@dataclass
class ProvisionSandboxInput:
    project_id: str
    template: str | None = None  # None: use the configured template


@dataclass
class ProvisionSandboxOutput:
    sandbox_id: str


@dataclass
class ResolveSandboxUrlInput:
    sandbox_id: str
    port: int | None = None  # None: use the configured port


@dataclass
class ResolveSandboxUrlOutput:
    sandbox_url: str


@activity.defn
async def provision_sandbox(input: ProvisionSandboxInput) -> ProvisionSandboxOutput:
    """
    Create a sandbox for one code agent run.

    Idempotency: Not idempotent - a retry after a lost response provisions a
    second sandbox. The orphan expires through the provider's sandbox timeout.
    Once this activity completes, its output is recorded in workflow history
    and the sandbox id is reused on replay instead of provisioning again.

    Args:
        input: ProvisionSandboxInput with project_id and optional template

    Returns:
        ProvisionSandboxOutput with the provider's sandbox id
    """
    bind_job_context(input.project_id, workflow_id=activity.info().workflow_id)
    template = input.template or get_settings().sandbox_template
    activity.logger.info(f"Provisioning sandbox from template {template} for {input.project_id}")
    sandbox_id = await create_sandbox(template, metadata={"project_id": input.project_id})
    return ProvisionSandboxOutput(sandbox_id=sandbox_id)


@activity.defn
async def resolve_sandbox_url(input: ResolveSandboxUrlInput) -> ResolveSandboxUrlOutput:
    """
    Reconnect to a sandbox and build the public URL of its app port.

    Idempotency: Fully idempotent - a read-only lookup that returns the same
    host for the same sandbox id.
    """
    port = input.port or get_settings().sandbox_port
    sandbox_url = await get_sandbox_url(input.sandbox_id, port)
    activity.logger.info(f"Sandbox {input.sandbox_id} reachable at {sandbox_url}")
    return ResolveSandboxUrlOutput(sandbox_url=sandbox_url)
