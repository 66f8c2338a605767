"""Domain types, models, and errors for the collaboration inbox."""

from collabdesk.domain.errors import (
    ChatClosedError,
    CollabDeskError,
    ConflictError,
    InvalidInputError,
    InvalidTransitionError,
    NotFoundError,
    StorageError,
    UnauthorizedError,
    UsernameTakenError,
)
from collabdesk.domain.models import (
    Influencer,
    Inquiry,
    InquiryFacts,
    Message,
    NegotiationPolicy,
    NewInquiry,
    PolicyInput,
)
from collabdesk.domain.types import (
    NOTIFIABLE_STATUSES,
    AgentOperation,
    ChatState,
    InquiryStatus,
    Language,
    MessageRole,
    Verdict,
    normalize_language,
)

__all__ = [
    "NOTIFIABLE_STATUSES",
    "AgentOperation",
    "ChatClosedError",
    "ChatState",
    "CollabDeskError",
    "ConflictError",
    "Influencer",
    "Inquiry",
    "InquiryFacts",
    "InquiryStatus",
    "InvalidInputError",
    "InvalidTransitionError",
    "Language",
    "Message",
    "MessageRole",
    "NegotiationPolicy",
    "NewInquiry",
    "NotFoundError",
    "PolicyInput",
    "StorageError",
    "UnauthorizedError",
    "UsernameTakenError",
    "Verdict",
    "normalize_language",
]
