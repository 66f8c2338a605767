"""Pydantic models defining the I/O contracts of the negotiation agent.

These models are used for:
- Composed prompts handed to the text-generation service
- Deterministic utterance check results
- Parsed closing recommendations
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from collabdesk.domain.types import AgentOperation, Language, Verdict


class ChatTurn(BaseModel):
    """One message in the Anthropic ``messages`` list."""

    model_config = ConfigDict(frozen=True)

    role: Literal["user", "assistant"]
    content: str


class ComposedPrompt(BaseModel):
    """A fully rendered prompt for one agent operation.

    Produced by the pure composer; the agent only forwards it to the model.
    """

    model_config = ConfigDict(frozen=True)

    operation: AgentOperation
    language: Language
    system: str = Field(description="Rendered system prompt text")
    messages: list[ChatTurn] = Field(description="Conversation turns, oldest first")

    def system_blocks(self) -> list[dict[str, str]]:
        """The system prompt in Anthropic text-block form."""
        return [{"type": "text", "text": self.system}]

    def message_params(self) -> list[dict[str, str]]:
        """The messages in Anthropic request form."""
        return [turn.model_dump() for turn in self.messages]


class UtteranceFinding(BaseModel):
    """A single deterministic check that flagged an agent utterance."""

    check: str = Field(description="Name of the check that fired")
    reason: str = Field(description="Human-readable explanation of the finding")


class UtteranceCheck(BaseModel):
    """Result of running the post-generation checks on an utterance.

    The checks are deterministic and advisory: the utterance is still
    returned to the business, findings are only logged.
    """

    passed: bool = Field(description="Whether no check fired")
    findings: list[UtteranceFinding] = Field(default_factory=list)


class Recommendation(BaseModel):
    """A closing recommendation split into its verdict and summary fields.

    Fields the model left out are ``None``; ``raw`` always holds the full text.
    """

    verdict: Verdict | None = None
    reason: str | None = None
    budget: str | None = None
    timeline: str | None = None
    deliverables: str | None = None
    raw: str
