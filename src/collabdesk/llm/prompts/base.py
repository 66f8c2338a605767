"""The template interface every prompt language implements.

Each language provides one ``PromptTemplateSet`` authored natively in that
language; nothing is machine-translated at call time.  Templates use Python
``str.format`` placeholders.

Placeholders available to the three system prompts:
    ``{language_directive}``, ``{policy_block}``, ``{pricing_block}``,
    ``{refusal_text}``, ``{not_discussed}``.

Placeholders available to ``policy_block``:
    ``{content_preferences}``, ``{minimum_rate}``,
    ``{preferred_content_length}``, ``{guidelines_line}``.

Placeholders available to ``pricing_block``:
    ``{band_low}``, ``{band_high}``, ``{offer_hint}``.

Placeholders available to ``facts_block``:
    ``{business_email}``, ``{company_line}``, ``{budget_line}``, ``{message}``.

``first_response_user`` and ``chat_turn_facts`` take ``{facts_block}``;
``recommendation_user`` takes ``{facts_block}`` and ``{transcript}``.
"""

from pydantic import BaseModel, ConfigDict


class PromptTemplateSet(BaseModel):
    """All localized text the prompt composer and agent need for one language."""

    model_config = ConfigDict(frozen=True)

    language_directive: str

    # Shared building blocks
    policy_block: str
    guidelines_line: str
    pricing_block: str
    offer_hint_not_stated: str
    offer_hint_below_minimum: str
    offer_hint_meets_minimum: str
    facts_block: str
    company_line: str
    budget_line_offered: str
    budget_line_missing: str

    # first_response
    first_response_system: str
    first_response_user: str

    # chat_turn
    chat_turn_system: str
    chat_turn_facts: str

    # close_recommendation
    recommendation_system: str
    recommendation_user: str
    transcript_business_label: str
    transcript_agent_label: str
    transcript_empty: str

    # Fixed phrases
    refusal_text: str
    not_discussed: str
    budget_label: str
    timeline_label: str
    deliverables_label: str

    # Deterministic fallbacks used when the text-generation call fails
    fallback_first_response: str
    fallback_chat_turn: str
    fallback_recommendation: str
