"""Code agent (OpenAI Agents SDK).

Each invocation builds a fresh agent and runs a single instruction; no
conversation state is carried between runs.
"""

from agents import Agent, Runner, set_default_openai_key
from agents.exceptions import AgentsException
from openai import OpenAIError

from src.zenkai.core.config import get_settings
from src.zenkai.core.exceptions import ExternalServiceError
from src.zenkai.core.logging import get_logger
from src.zenkai.integrations.prompts import CODE_AGENT_PROMPT

logger = get_logger(__name__)

SERVICE_NAME = "agent"


def configure_agent_provider() -> None:
    """Install the configured OpenAI key for all agent runs in this process."""
    settings = get_settings()
    if settings.openai_api_key:
        set_default_openai_key(settings.openai_api_key)


def build_code_agent() -> Agent:
    """Agent with the fixed name, system prompt and model."""
    settings = get_settings()
    return Agent(
        name=settings.agent_name,
        instructions=CODE_AGENT_PROMPT,
        model=settings.agent_model,
    )


async def run_code_agent(instruction: str) -> str:
    """Run one instruction through the code agent and return its text output."""
    agent = build_code_agent()
    try:
        result = await Runner.run(agent, instruction)
    except (AgentsException, OpenAIError) as e:
        raise ExternalServiceError(SERVICE_NAME, str(e)) from e
    output = str(result.final_output)
    logger.info("Code agent finished", agent=agent.name, output_chars=len(output))
    return output
