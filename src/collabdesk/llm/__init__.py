"""LLM-backed negotiation agent.

Exports the agent, the pure prompt composer, the client factory, and the
deterministic output checks.
"""

from collabdesk.llm.agent import NegotiationAgent
from collabdesk.llm.client import (
    DEFAULT_MODEL,
    GENERATION_PARAMS,
    GenerationParams,
    get_anthropic_client,
)
from collabdesk.llm.composer import compose
from collabdesk.llm.models import (
    ChatTurn,
    ComposedPrompt,
    Recommendation,
    UtteranceCheck,
    UtteranceFinding,
)
from collabdesk.llm.validation import check_utterance, discloses_rate, parse_recommendation

__all__ = [
    "DEFAULT_MODEL",
    "GENERATION_PARAMS",
    "ChatTurn",
    "ComposedPrompt",
    "GenerationParams",
    "NegotiationAgent",
    "Recommendation",
    "UtteranceCheck",
    "UtteranceFinding",
    "check_utterance",
    "compose",
    "discloses_rate",
    "get_anthropic_client",
    "parse_recommendation",
]
