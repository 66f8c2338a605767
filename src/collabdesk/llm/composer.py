"""Prompt composition for the three negotiation agent operations.

``compose`` is a pure function: it picks the template set for the language,
interpolates the policy, the counter-offer band and the inquiry facts, and
returns a ``ComposedPrompt``.  It performs no I/O, so the exact prompt text
can be asserted in tests without a model.
"""

from collections.abc import Sequence

from collabdesk.domain.models import InquiryFacts, Message, NegotiationPolicy
from collabdesk.domain.types import AgentOperation, Language, MessageRole
from collabdesk.llm.models import ChatTurn, ComposedPrompt
from collabdesk.llm.prompts import PromptTemplateSet, get_templates
from collabdesk.pricing.band import OfferAssessment, assess_offer, counter_offer_band


def render_policy_block(templates: PromptTemplateSet, policy: NegotiationPolicy) -> str:
    """Render the influencer preference section of a system prompt."""
    guidelines_line = ""
    if policy.additional_guidelines:
        guidelines_line = templates.guidelines_line.format(
            additional_guidelines=policy.additional_guidelines,
        )
    return templates.policy_block.format(
        content_preferences=policy.content_preferences,
        minimum_rate=policy.minimum_rate,
        preferred_content_length=policy.preferred_content_length,
        guidelines_line=guidelines_line,
    )


def render_pricing_block(
    templates: PromptTemplateSet,
    policy: NegotiationPolicy,
    facts: InquiryFacts,
) -> str:
    """Render the counter-offer target range and the offer status hint."""
    band = counter_offer_band(policy.minimum_rate)
    hints = {
        OfferAssessment.NOT_STATED: templates.offer_hint_not_stated,
        OfferAssessment.BELOW_MINIMUM: templates.offer_hint_below_minimum,
        OfferAssessment.MEETS_MINIMUM: templates.offer_hint_meets_minimum,
    }
    return templates.pricing_block.format(
        band_low=band.low,
        band_high=band.high,
        offer_hint=hints[assess_offer(facts.price, policy.minimum_rate)],
    )


def render_facts_block(templates: PromptTemplateSet, facts: InquiryFacts) -> str:
    """Render the business-supplied inquiry facts."""
    company_line = ""
    if facts.company_info:
        company_line = templates.company_line.format(company_info=facts.company_info)
    if facts.price:
        budget_line = templates.budget_line_offered.format(price=facts.price)
    else:
        budget_line = templates.budget_line_missing
    return templates.facts_block.format(
        business_email=facts.business_email,
        company_line=company_line,
        budget_line=budget_line,
        message=facts.message,
    )


def render_transcript(templates: PromptTemplateSet, history: Sequence[Message]) -> str:
    """Render the chat history as labelled lines for the recommendation prompt."""
    labels = {
        MessageRole.USER: templates.transcript_business_label,
        MessageRole.ASSISTANT: templates.transcript_agent_label,
    }
    lines = [
        f"{labels[msg.role]}: {msg.content}"
        for msg in history
        if msg.role != MessageRole.SYSTEM
    ]
    return "\n".join(lines) if lines else templates.transcript_empty


def compose(
    operation: AgentOperation,
    language: Language,
    policy: NegotiationPolicy,
    facts: InquiryFacts,
    history: Sequence[Message] | None = None,
) -> ComposedPrompt:
    """Build the prompt for one agent operation.

    For ``chat_turn`` the inquiry facts become the first user turn, followed
    by every non-system message of *history* in the given (chronological)
    order.  For ``close_recommendation`` the history is flattened into a
    labelled transcript inside a single user turn.

    Args:
        operation: Which agent interaction the prompt is for.
        language: Selects the independently authored template set.
        policy: The effective negotiation policy.
        facts: The inquiry facts supplied by the business.
        history: Ordered chat messages. Ignored for ``first_response``.

    Returns:
        The rendered ``ComposedPrompt``.
    """
    templates = get_templates(language)
    history = list(history or [])

    policy_block = render_policy_block(templates, policy)
    facts_block = render_facts_block(templates, facts)
    system_values = {
        "language_directive": templates.language_directive,
        "policy_block": policy_block,
        "pricing_block": render_pricing_block(templates, policy, facts),
        "refusal_text": templates.refusal_text,
        "not_discussed": templates.not_discussed,
    }

    if operation == AgentOperation.FIRST_RESPONSE:
        system = templates.first_response_system.format(**system_values)
        messages = [
            ChatTurn(
                role="user",
                content=templates.first_response_user.format(facts_block=facts_block),
            )
        ]
    elif operation == AgentOperation.CHAT_TURN:
        system = templates.chat_turn_system.format(**system_values)
        messages = [
            ChatTurn(
                role="user",
                content=templates.chat_turn_facts.format(facts_block=facts_block),
            )
        ]
        messages.extend(
            ChatTurn(role=msg.role.value, content=msg.content)
            for msg in history
            if msg.role != MessageRole.SYSTEM
        )
    else:
        system = templates.recommendation_system.format(**system_values)
        messages = [
            ChatTurn(
                role="user",
                content=templates.recommendation_user.format(
                    facts_block=facts_block,
                    transcript=render_transcript(templates, history),
                ),
            )
        ]

    return ComposedPrompt(
        operation=operation,
        language=Language(language),
        system=system,
        messages=messages,
    )
