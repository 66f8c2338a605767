"""Request and response bodies for the HTTP API.

Domain models (``NewInquiry``, ``PolicyInput``, ``Inquiry``, ``Message``)
are used directly where their shape already fits the wire.
"""

from __future__ import annotations

from pydantic import BaseModel

from collabdesk.domain.models import Influencer, Inquiry, Message
from collabdesk.domain.types import Language
from collabdesk.llm.models import Recommendation
from collabdesk.llm.validation import parse_recommendation


class ChatMessageRequest(BaseModel):
    content: str


class StatusUpdateRequest(BaseModel):
    """Influencer decision; ``message`` is forwarded to the business."""

    status: str
    message: str | None = None


class UsernameUpdateRequest(BaseModel):
    username: str


class LanguageUpdateRequest(BaseModel):
    language: str


class InquiryResponse(Inquiry):
    """An inquiry plus its recommendation split into fields, once closed."""

    recommendation: Recommendation | None = None

    @classmethod
    def from_inquiry(cls, inquiry: Inquiry) -> InquiryResponse:
        recommendation = None
        if inquiry.ai_recommendation is not None:
            recommendation = parse_recommendation(inquiry.ai_recommendation)
        return cls(**inquiry.model_dump(), recommendation=recommendation)


class SubmitInquiryResponse(BaseModel):
    inquiry: InquiryResponse
    message: Message


class ChatTurnResponse(BaseModel):
    user_message: Message
    assistant_message: Message


class CurrentUserResponse(BaseModel):
    id: str
    username: str | None
    email: str | None
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    language: Language
    display_name: str

    @classmethod
    def from_influencer(cls, influencer: Influencer) -> CurrentUserResponse:
        return cls(**influencer.model_dump(), display_name=influencer.display_name)


class PublicProfileResponse(BaseModel):
    """What a business sees before submitting an inquiry (no contact email)."""

    id: str
    username: str | None
    first_name: str | None
    last_name: str | None
    profile_image_url: str | None
    language: Language

    @classmethod
    def from_influencer(cls, influencer: Influencer) -> PublicProfileResponse:
        return cls(**influencer.model_dump(exclude={"email"}))


class MessageResponse(BaseModel):
    message: str
