"""Temporal Workflows - Re-exports for worker registration."""

from src.zenkai.temporal.workflows.code_agent import CodeAgentRunResult, CodeAgentRunWorkflow

__all__ = [
    "CodeAgentRunResult",
    "CodeAgentRunWorkflow",
]
