"""
Code Agent Run Workflow.

Consumes the ``code-agent/run`` event:
1. Provision sandbox - checkpoint: sandbox id
2. Invoke agent - checkpoint: agent output
3. Resolve sandbox URL - checkpoint: public URL
4. Save result - ASSISTANT message with fragment

Each step is an activity, so after a crash Temporal replays completed steps
from history and only retries the step that was in flight.
"""

from dataclasses import dataclass

from temporalio import workflow

with workflow.unsafe.imports_passed_through():
    from src.zenkai.temporal.activities import (
        InvokeAgentInput,
        InvokeAgentOutput,
        ProvisionSandboxInput,
        ProvisionSandboxOutput,
        ResolveSandboxUrlInput,
        ResolveSandboxUrlOutput,
        SaveErrorInput,
        SaveResultInput,
        invoke_agent,
        provision_sandbox,
        resolve_sandbox_url,
        save_error,
        save_result,
    )
    from src.zenkai.temporal.events import CodeAgentRunEvent
    from src.zenkai.temporal.workflows._steps.common import (
        long_activity_opts,
        medium_activity_opts,
        short_activity_opts,
    )


@dataclass
class CodeAgentRunResult:
    output: str
    sandbox_url: str


@workflow.defn
class CodeAgentRunWorkflow:
    """
    Run one instruction through the code agent inside a fresh sandbox.

    Steps run strictly in order. If any step exhausts its retries, an
    ASSISTANT error message is written for the project and the workflow fails.
    """

    @workflow.run
    async def run(self, event: CodeAgentRunEvent) -> CodeAgentRunResult:
        """
        Run the code agent job.

        Args:
            event: The ``code-agent/run`` payload (value, project_id)

        Returns:
            CodeAgentRunResult with the agent output and the sandbox URL
        """
        try:
            # Step 1: provision-sandbox
            sandbox: ProvisionSandboxOutput = await workflow.execute_activity(
                provision_sandbox,
                ProvisionSandboxInput(project_id=event.project_id),
                **medium_activity_opts(),  # type: ignore[arg-type]
            )
            workflow.logger.info(f"Sandbox {sandbox.sandbox_id} ready for {event.project_id}")

            # Step 2: invoke-agent
            agent: InvokeAgentOutput = await workflow.execute_activity(
                invoke_agent,
                InvokeAgentInput(project_id=event.project_id, value=event.value),
                **long_activity_opts(),  # type: ignore[arg-type]
            )

            # Step 3: resolve-sandbox-url
            url: ResolveSandboxUrlOutput = await workflow.execute_activity(
                resolve_sandbox_url,
                ResolveSandboxUrlInput(sandbox_id=sandbox.sandbox_id),
                **short_activity_opts(),  # type: ignore[arg-type]
            )

            result = CodeAgentRunResult(output=agent.output, sandbox_url=url.sandbox_url)

            # Step 4: save-result
            await workflow.execute_activity(
                save_result,
                SaveResultInput(
                    message_id=str(workflow.uuid4()),
                    project_id=event.project_id,
                    output=result.output,
                    sandbox_url=result.sandbox_url,
                ),
                **short_activity_opts(),  # type: ignore[arg-type]
            )

            workflow.logger.info(f"Code agent run complete for {event.project_id}")
            return result

        except Exception as e:
            workflow.logger.error(f"Code agent run failed for {event.project_id}: {e}")
            try:
                await workflow.execute_activity(
                    save_error,
                    SaveErrorInput(
                        message_id=str(workflow.uuid4()),
                        project_id=event.project_id,
                    ),
                    **short_activity_opts(),  # type: ignore[arg-type]
                )
            except Exception as save_exc:
                # The run still fails with the step error, not this one
                workflow.logger.error(
                    f"Could not record failure for {event.project_id}: {save_exc}"
                )
            raise
