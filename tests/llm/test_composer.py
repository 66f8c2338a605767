"""Tests for the pure prompt composer.

The composer performs no I/O, so these tests assert on the exact prompt text
the agent would send for each operation and language.
"""

from __future__ import annotations

import pytest

from collabdesk.domain.models import InquiryFacts, NegotiationPolicy
from collabdesk.domain.types import AgentOperation, Language, MessageRole
from collabdesk.llm.composer import compose, render_transcript
from collabdesk.llm.prompts import CHINESE, ENGLISH
from factories import make_message


@pytest.fixture()
def history():
    return [
        make_message(MessageRole.ASSISTANT, "Thanks! What's the timeline?", 0),
        make_message(MessageRole.SYSTEM, "internal note", 1),
        make_message(MessageRole.USER, "Two weeks, one reel.", 2),
    ]


# ---------------------------------------------------------------------------
# first_response
# ---------------------------------------------------------------------------


class TestFirstResponse:
    def test_system_prompt_carries_policy_and_rules(
        self, sample_policy: NegotiationPolicy, sample_facts: InquiryFacts
    ) -> None:
        prompt = compose(AgentOperation.FIRST_RESPONSE, Language.EN, sample_policy, sample_facts)

        assert prompt.operation == AgentOperation.FIRST_RESPONSE
        assert prompt.language == Language.EN
        assert "Fitness and healthy food" in prompt.system
        assert "No early-morning shoots" in prompt.system
        assert "NEVER state it" in prompt.system
        assert "I can't help with this." in prompt.system
        assert ENGLISH.language_directive in prompt.system

    def test_counter_offer_band_in_prompt(
        self, sample_policy: NegotiationPolicy, sample_facts: InquiryFacts
    ) -> None:
        prompt = compose(AgentOperation.FIRST_RESPONSE, Language.EN, sample_policy, sample_facts)

        assert "Counter-offer target range: $1200 to $1300" in prompt.system
        assert ENGLISH.offer_hint_below_minimum in prompt.system

    def test_single_user_turn_with_facts(
        self, sample_policy: NegotiationPolicy, sample_facts: InquiryFacts
    ) -> None:
        prompt = compose(AgentOperation.FIRST_RESPONSE, Language.EN, sample_policy, sample_facts)

        assert len(prompt.messages) == 1
        turn = prompt.messages[0]
        assert turn.role == "user"
        assert "From: brand@acme.com" in turn.content
        assert "Company: Acme Foods" in turn.content
        assert "Offered Budget: $100" in turn.content
        assert "protein bars" in turn.content

    def test_missing_price_and_company(self, sample_policy: NegotiationPolicy) -> None:
        facts = InquiryFacts(business_email="b@acme.com", message="Hello there")
        prompt = compose(AgentOperation.FIRST_RESPONSE, Language.EN, sample_policy, facts)

        assert "Budget: Not specified" in prompt.messages[0].content
        assert "Company:" not in prompt.messages[0].content
        assert ENGLISH.offer_hint_not_stated in prompt.system

    def test_no_guidelines_line_without_guidelines(self, sample_facts: InquiryFacts) -> None:
        policy = NegotiationPolicy(
            influencer_id="inf-1",
            content_preferences="Tech",
            minimum_rate=500,
            preferred_content_length="Short",
        )
        prompt = compose(AgentOperation.FIRST_RESPONSE, Language.EN, policy, sample_facts)
        assert "Additional Guidelines" not in prompt.system

    def test_chinese_prompt(
        self, sample_policy: NegotiationPolicy, sample_facts: InquiryFacts
    ) -> None:
        prompt = compose(AgentOperation.FIRST_RESPONSE, "zh", sample_policy, sample_facts)

        assert prompt.language == Language.ZH
        assert CHINESE.language_directive in prompt.system
        assert "这个我没法参与" in prompt.system
        assert "$1200 - $1300" in prompt.system
        assert "品牌邮箱：brand@acme.com" in prompt.messages[0].content


# ---------------------------------------------------------------------------
# chat_turn
# ---------------------------------------------------------------------------


class TestChatTurn:
    def test_facts_first_then_history_in_order(
        self, sample_policy: NegotiationPolicy, sample_facts: InquiryFacts, history
    ) -> None:
        prompt = compose(
            AgentOperation.CHAT_TURN, Language.EN, sample_policy, sample_facts, history
        )

        roles = [turn.role for turn in prompt.messages]
        assert roles == ["user", "assistant", "user"]
        assert "do not ask for these again" in prompt.messages[0].content
        assert prompt.messages[1].content == "Thanks! What's the timeline?"
        assert prompt.messages[2].content == "Two weeks, one reel."

    def test_system_messages_are_dropped(
        self, sample_policy: NegotiationPolicy, sample_facts: InquiryFacts, history
    ) -> None:
        prompt = compose(
            AgentOperation.CHAT_TURN, Language.EN, sample_policy, sample_facts, history
        )
        assert all(turn.content != "internal note" for turn in prompt.messages)

    def test_chat_rules_apply_at_any_point(
        self, sample_policy: NegotiationPolicy, sample_facts: InquiryFacts
    ) -> None:
        prompt = compose(AgentOperation.CHAT_TURN, Language.EN, sample_policy, sample_facts)
        assert "(AT ANY POINT)" in prompt.system
        assert "CHAT STYLE RULES" in prompt.system

    def test_message_params_shape(
        self, sample_policy: NegotiationPolicy, sample_facts: InquiryFacts, history
    ) -> None:
        prompt = compose(
            AgentOperation.CHAT_TURN, Language.EN, sample_policy, sample_facts, history
        )
        assert prompt.system_blocks() == [{"type": "text", "text": prompt.system}]
        assert prompt.message_params()[2] == {"role": "user", "content": "Two weeks, one reel."}


# ---------------------------------------------------------------------------
# close_recommendation
# ---------------------------------------------------------------------------


class TestCloseRecommendation:
    def test_transcript_in_single_user_turn(
        self, sample_policy: NegotiationPolicy, sample_facts: InquiryFacts, history
    ) -> None:
        prompt = compose(
            AgentOperation.CLOSE_RECOMMENDATION,
            Language.EN,
            sample_policy,
            sample_facts,
            history,
        )

        assert len(prompt.messages) == 1
        content = prompt.messages[0].content
        assert "AI Agent: Thanks! What's the timeline?" in content
        assert "Business: Two weeks, one reel." in content
        assert "internal note" not in content

    def test_format_instructions(
        self, sample_policy: NegotiationPolicy, sample_facts: InquiryFacts
    ) -> None:
        prompt = compose(
            AgentOperation.CLOSE_RECOMMENDATION, Language.EN, sample_policy, sample_facts
        )
        assert "**APPROVE**, **REJECT**, or **NEEDS INFO**" in prompt.system
        assert '- Budget: [amount or "Not discussed"]' in prompt.system

    def test_chinese_keeps_english_verdict_tokens(
        self, sample_policy: NegotiationPolicy, sample_facts: InquiryFacts
    ) -> None:
        prompt = compose(
            AgentOperation.CLOSE_RECOMMENDATION, Language.ZH, sample_policy, sample_facts
        )
        assert "NEEDS INFO" in prompt.system
        assert "未讨论" in prompt.system

    def test_empty_transcript(self) -> None:
        assert render_transcript(ENGLISH, []) == "(no messages)"
        assert render_transcript(CHINESE, []) == "（暂无消息）"


@pytest.mark.parametrize("operation", list(AgentOperation))
@pytest.mark.parametrize("language", list(Language))
def test_every_operation_renders_in_every_language(
    operation, language, sample_policy: NegotiationPolicy, sample_facts: InquiryFacts
) -> None:
    prompt = compose(operation, language, sample_policy, sample_facts, [])
    assert "{" not in prompt.system
    assert prompt.messages
