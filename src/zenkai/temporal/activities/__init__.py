"""
Temporal Activities - Fine-grained operations with external side effects.

Activities should be:
1. Idempotent where the provider allows it - Safe to retry
2. Fine-grained - One checkpoint per external call
3. Side-effect aware - External calls go here, not in workflows
"""

from src.zenkai.temporal.activities.agent import (
    InvokeAgentInput,
    InvokeAgentOutput,
    invoke_agent,
)
from src.zenkai.temporal.activities.results import (
    SaveErrorInput,
    SaveResultInput,
    save_error,
    save_result,
)
from src.zenkai.temporal.activities.sandbox import (
    ProvisionSandboxInput,
    ProvisionSandboxOutput,
    ResolveSandboxUrlInput,
    ResolveSandboxUrlOutput,
    provision_sandbox,
    resolve_sandbox_url,
)

CODE_AGENT_ACTIVITIES = [
    provision_sandbox,
    invoke_agent,
    resolve_sandbox_url,
    save_result,
    save_error,
]

__all__ = [
    "CODE_AGENT_ACTIVITIES",
    # Dataclasses
    "InvokeAgentInput",
    "InvokeAgentOutput",
    "ProvisionSandboxInput",
    "ProvisionSandboxOutput",
    "ResolveSandboxUrlInput",
    "ResolveSandboxUrlOutput",
    "SaveErrorInput",
    "SaveResultInput",
    # Activities
    "invoke_agent",
    "provision_sandbox",
    "resolve_sandbox_url",
    "save_error",
    "save_result",
]
