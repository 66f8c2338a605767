"""Domain enumerations for inquiries, chat messages, and agent operations."""

from enum import StrEnum


class InquiryStatus(StrEnum):
    """Influencer decision on an inquiry."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    NEEDS_INFO = "needs_info"


class MessageRole(StrEnum):
    """Author of a chat message.

    ``USER`` is the business side, ``ASSISTANT`` is the negotiation agent.
    ``SYSTEM`` is reserved and never sent back to the model as a chat turn.
    """

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"


class Language(StrEnum):
    """Languages with an independently authored prompt template set."""

    EN = "en"
    ZH = "zh"


class AgentOperation(StrEnum):
    """The three model interactions in an inquiry lifecycle."""

    FIRST_RESPONSE = "first_response"
    CHAT_TURN = "chat_turn"
    CLOSE_RECOMMENDATION = "close_recommendation"


class ChatState(StrEnum):
    """Chat sub-state of an inquiry, derived from ``chat_active``."""

    OPEN = "open"
    CLOSED = "closed"


class Verdict(StrEnum):
    """Leading verdict token of a closing recommendation."""

    APPROVE = "APPROVE"
    REJECT = "REJECT"
    NEEDS_INFO = "NEEDS INFO"


# Statuses that trigger a notification to the business contact.
NOTIFIABLE_STATUSES: frozenset[InquiryStatus] = frozenset(
    {InquiryStatus.APPROVED, InquiryStatus.REJECTED, InquiryStatus.NEEDS_INFO}
)


def normalize_language(value: object, default: Language = Language.EN) -> Language:
    """Coerce an arbitrary value to a supported ``Language``.

    Unknown or missing values fall back to *default*.

    Args:
        value: A language tag such as ``"zh"`` or ``"EN"``.
        default: Language to use when *value* is not supported.

    Returns:
        The matching ``Language`` member.
    """
    if isinstance(value, str):
        try:
            return Language(value.strip().lower())
        except ValueError:
            return default
    return default
