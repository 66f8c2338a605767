"""Anthropic client factory and generation settings for the negotiation agent."""

from anthropic import AsyncAnthropic
from pydantic import BaseModel, ConfigDict

from collabdesk.domain.types import AgentOperation

DEFAULT_MODEL = "claude-sonnet-4-5-20250929"
DEFAULT_TIMEOUT_SECONDS = 30.0


class GenerationParams(BaseModel):
    """Sampling settings for one agent operation."""

    model_config = ConfigDict(frozen=True)

    temperature: float
    max_tokens: int


# Conversational turns get moderate randomness; the recommendation stays steadier.
GENERATION_PARAMS: dict[AgentOperation, GenerationParams] = {
    AgentOperation.FIRST_RESPONSE: GenerationParams(temperature=0.7, max_tokens=500),
    AgentOperation.CHAT_TURN: GenerationParams(temperature=0.7, max_tokens=300),
    AgentOperation.CLOSE_RECOMMENDATION: GenerationParams(temperature=0.5, max_tokens=500),
}


def get_anthropic_client(
    api_key: str | None = None,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> AsyncAnthropic:
    """Create an async Anthropic client with a bounded timeout and no retries.

    Retries are disabled so every agent operation makes at most one external
    call; a failure goes straight to the fallback text.

    Args:
        api_key: API key. When ``None`` the client reads ``ANTHROPIC_API_KEY``
            from the environment.
        timeout: Per-request timeout in seconds.

    Returns:
        Configured ``AsyncAnthropic`` client instance.
    """
    return AsyncAnthropic(api_key=api_key, timeout=timeout, max_retries=0)
