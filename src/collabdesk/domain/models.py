"""Pydantic v2 models for the collaboration inbox domain."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator, model_validator

from collabdesk.domain.types import InquiryStatus, Language, MessageRole


class Influencer(BaseModel):
    """An influencer account as seen by the core (identity + directory data)."""

    model_config = ConfigDict(frozen=True)

    id: str
    username: str | None = None
    email: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    profile_image_url: str | None = None
    language: Language = Language.EN

    @property
    def display_name(self) -> str:
        """Name used when addressing the business on the influencer's behalf."""
        if self.first_name:
            if self.last_name:
                return f"{self.first_name} {self.last_name}"
            return self.first_name
        return self.username or "The influencer"


class PolicyInput(BaseModel):
    """Fields an influencer supplies when saving their negotiation policy."""

    model_config = ConfigDict(frozen=True)

    content_preferences: str
    minimum_rate: int
    preferred_content_length: str
    additional_guidelines: str | None = None

    @field_validator("content_preferences", "preferred_content_length")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        """Ensure required free-text fields are not empty or whitespace-only."""
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("minimum_rate")
    @classmethod
    def rate_must_be_positive(cls, v: int) -> int:
        """Ensure the minimum rate is a positive integer."""
        if v <= 0:
            raise ValueError("minimum_rate must be positive")
        return v


class NegotiationPolicy(PolicyInput):
    """An influencer's negotiation policy (content rules, rate floor, guidelines).

    ``minimum_rate`` is handed to the agent as a private floor and is never
    quoted to the business.
    """

    influencer_id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class InquiryFacts(BaseModel):
    """The business-supplied facts of an inquiry that every prompt reuses."""

    model_config = ConfigDict(frozen=True)

    business_email: str
    message: str
    price: int | None = None
    company_info: str | None = None


class NewInquiry(BaseModel):
    """A business submission, validated before anything is persisted."""

    model_config = ConfigDict(frozen=True)

    influencer_id: str
    business_email: EmailStr
    message: str
    price: int | None = None
    company_info: str | None = None
    attachment_url: str | None = None

    @field_validator("influencer_id", "message")
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        """Ensure required fields are not empty or whitespace-only."""
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("price")
    @classmethod
    def price_must_not_be_negative(cls, v: int | None) -> int | None:
        """Ensure an offered price, when present, is not negative."""
        if v is not None and v < 0:
            raise ValueError("price must not be negative")
        return v


class Inquiry(BaseModel):
    """A business's collaboration proposal to one influencer.

    ``ai_recommendation`` is set exactly when the chat closes, so it is
    present if and only if ``chat_active`` is false.
    """

    id: str
    influencer_id: str
    business_email: str
    message: str
    price: int | None = None
    company_info: str | None = None
    attachment_url: str | None = None
    status: InquiryStatus = InquiryStatus.PENDING
    chat_active: bool = True
    ai_response: str | None = None
    ai_recommendation: str | None = None
    created_at: datetime
    updated_at: datetime

    @model_validator(mode="after")
    def recommendation_matches_chat_state(self) -> "Inquiry":
        """Ensure a recommendation exists exactly when the chat is closed."""
        if self.chat_active and self.ai_recommendation is not None:
            raise ValueError("an open chat must not carry a recommendation")
        if not self.chat_active and self.ai_recommendation is None:
            raise ValueError("a closed chat must carry a recommendation")
        return self

    @property
    def facts(self) -> InquiryFacts:
        """The immutable business-supplied facts of this inquiry."""
        return InquiryFacts(
            business_email=self.business_email,
            message=self.message,
            price=self.price,
            company_info=self.company_info,
        )


class Message(BaseModel):
    """One chat turn within an inquiry conversation."""

    model_config = ConfigDict(frozen=True)

    id: str
    inquiry_id: str
    role: MessageRole
    content: str = Field(min_length=1)
    created_at: datetime
