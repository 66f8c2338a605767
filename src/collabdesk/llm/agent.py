"""Negotiation agent: the three model interactions of an inquiry lifecycle.

Each operation composes a prompt, issues exactly one text-generation request
and returns the model text verbatim.  Any failure of that request (timeout,
quota, malformed or empty response) degrades to the language's fallback text;
the agent never raises to its caller.
"""

from __future__ import annotations

from collections.abc import Sequence

import structlog
from anthropic import AsyncAnthropic

from collabdesk.domain.models import InquiryFacts, Message, NegotiationPolicy
from collabdesk.domain.types import AgentOperation, Language
from collabdesk.llm.client import DEFAULT_MODEL, GENERATION_PARAMS
from collabdesk.llm.composer import compose
from collabdesk.llm.models import ComposedPrompt
from collabdesk.llm.prompts import get_templates
from collabdesk.llm.validation import check_utterance, parse_recommendation
from collabdesk.observability.metrics import AGENT_FALLBACKS

logger = structlog.get_logger()


class NegotiationAgent:
    """Drives first responses, chat turns, and closing recommendations.

    Args:
        client: Async Anthropic client, or ``None`` when no API key is
            configured (every operation then answers with fallback text).
        model: Model ID used for all three operations.
    """

    def __init__(self, client: AsyncAnthropic | None, model: str = DEFAULT_MODEL) -> None:
        self._client = client
        self._model = model

    async def generate_first_response(
        self,
        facts: InquiryFacts,
        policy: NegotiationPolicy,
        language: Language,
    ) -> str:
        """Produce the agent's opening message for a new inquiry."""
        prompt = compose(AgentOperation.FIRST_RESPONSE, language, policy, facts)
        fallback = get_templates(language).fallback_first_response
        text = await self._complete(prompt, fallback)
        self._log_findings(text, policy, AgentOperation.FIRST_RESPONSE)
        return text

    async def generate_chat_turn(
        self,
        history: Sequence[Message],
        facts: InquiryFacts,
        policy: NegotiationPolicy,
        language: Language,
    ) -> str:
        """Produce the agent's reply to the latest business message.

        *history* must be the complete, chronologically ordered transcript;
        ``system`` entries are dropped by the composer.
        """
        prompt = compose(AgentOperation.CHAT_TURN, language, policy, facts, history)
        fallback = get_templates(language).fallback_chat_turn
        text = await self._complete(prompt, fallback)
        self._log_findings(text, policy, AgentOperation.CHAT_TURN)
        return text

    async def generate_closing_recommendation(
        self,
        history: Sequence[Message],
        facts: InquiryFacts,
        policy: NegotiationPolicy,
        language: Language,
    ) -> str:
        """Produce the structured recommendation shown to the influencer.

        The degraded answer is always ``NEEDS INFO`` with every summary field
        marked as not discussed, so a failure never implies a decision.
        """
        prompt = compose(AgentOperation.CLOSE_RECOMMENDATION, language, policy, facts, history)
        fallback = get_templates(language).fallback_recommendation
        text = await self._complete(prompt, fallback)
        if parse_recommendation(text).verdict is None:
            logger.warning("recommendation_without_verdict", language=str(language))
        return text

    async def _complete(self, prompt: ComposedPrompt, fallback: str) -> str:
        """Issue one generation request; return *fallback* on any failure."""
        operation = prompt.operation
        if self._client is None:
            logger.warning("agent_fallback", operation=str(operation), reason="client_disabled")
            AGENT_FALLBACKS.labels(operation=operation.value).inc()
            return fallback

        params = GENERATION_PARAMS[operation]
        try:
            response = await self._client.messages.create(
                model=self._model,
                max_tokens=params.max_tokens,
                temperature=params.temperature,
                system=prompt.system_blocks(),
                messages=prompt.message_params(),
            )
            text: str = response.content[0].text  # type: ignore[union-attr]
        except Exception:
            logger.warning("agent_fallback", operation=str(operation), exc_info=True)
            AGENT_FALLBACKS.labels(operation=operation.value).inc()
            return fallback

        if not text or not text.strip():
            logger.warning("agent_fallback", operation=str(operation), reason="empty_response")
            AGENT_FALLBACKS.labels(operation=operation.value).inc()
            return fallback

        logger.debug("agent_completed", operation=str(operation), model=self._model)
        return text

    @staticmethod
    def _log_findings(text: str, policy: NegotiationPolicy, operation: AgentOperation) -> None:
        result = check_utterance(text, policy.minimum_rate)
        if not result.passed:
            logger.warning(
                "utterance_check_findings",
                operation=str(operation),
                checks=[f.check for f in result.findings],
            )
