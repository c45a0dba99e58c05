"""Sandbox provider (E2B).

The sandbox is provisioned once per job and afterwards only looked up by id.
Nothing about a sandbox is kept locally between calls.
"""

from e2b_code_interpreter import AsyncSandbox, SandboxException

from src.zenkai.core.config import get_settings
from src.zenkai.core.exceptions import ExternalServiceError
from src.zenkai.core.logging import get_logger

logger = get_logger(__name__)

SERVICE_NAME = "sandbox"


async def create_sandbox(template: str, metadata: dict[str, str] | None = None) -> str:
    """Provision a sandbox from a template and return its id."""
    settings = get_settings()
    try:
        sandbox = await AsyncSandbox.create(
            template,
            api_key=settings.e2b_api_key,
            metadata=metadata,
        )
    except SandboxException as e:
        raise ExternalServiceError(SERVICE_NAME, f"create failed: {e}") from e

    logger.info("Sandbox created", sandbox_id=sandbox.sandbox_id, template=template)
    return sandbox.sandbox_id


async def get_sandbox(sandbox_id: str) -> AsyncSandbox:
    """Reconnect to an already provisioned sandbox."""
    settings = get_settings()
    try:
        return await AsyncSandbox.connect(sandbox_id, api_key=settings.e2b_api_key)
    except SandboxException as e:
        raise ExternalServiceError(SERVICE_NAME, f"connect to {sandbox_id} failed: {e}") from e


async def get_sandbox_url(sandbox_id: str, port: int) -> str:
    """Return the public URL of a port exposed by the sandbox."""
    sandbox = await get_sandbox(sandbox_id)
    host = sandbox.get_host(port)
    return f"http://{host}"
