"""HTTP routes for the influencer dashboard and the business chat page.

Influencer-only routes depend on ``current_influencer``.  Business-facing
inquiry routes need no login: knowing the inquiry id is the capability.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from collabdesk.api.identity import current_influencer
from collabdesk.api.schemas import (
    ChatMessageRequest,
    ChatTurnResponse,
    CurrentUserResponse,
    InquiryResponse,
    LanguageUpdateRequest,
    MessageResponse,
    PublicProfileResponse,
    StatusUpdateRequest,
    SubmitInquiryResponse,
    UsernameUpdateRequest,
)
from collabdesk.domain.models import Influencer, Message, NegotiationPolicy, NewInquiry, PolicyInput
from collabdesk.inquiries.service import InquiryService

router = APIRouter(prefix="/api")


def get_inquiry_service(request: Request) -> InquiryService:
    """Return the shared ``InquiryService`` from the app's services."""
    service: InquiryService = request.app.state.services["inquiry_service"]
    return service


Service = Annotated[InquiryService, Depends(get_inquiry_service)]
CurrentInfluencer = Annotated[Influencer, Depends(current_influencer)]


# ---------------------------------------------------------------------------
# Account
# ---------------------------------------------------------------------------


@router.get("/auth/user")
async def get_current_user(influencer: CurrentInfluencer) -> CurrentUserResponse:
    return CurrentUserResponse.from_influencer(influencer)


@router.patch("/auth/username")
async def update_username(
    body: UsernameUpdateRequest,
    influencer: CurrentInfluencer,
    service: Service,
) -> CurrentUserResponse:
    updated = await service.update_username(influencer.id, body.username)
    return CurrentUserResponse.from_influencer(updated)


@router.patch("/auth/language")
async def update_language(
    body: LanguageUpdateRequest,
    influencer: CurrentInfluencer,
    service: Service,
) -> CurrentUserResponse:
    updated = await service.update_language(influencer.id, body.language)
    return CurrentUserResponse.from_influencer(updated)


@router.get("/users/{username}")
async def get_public_profile(username: str, service: Service) -> PublicProfileResponse:
    """Public profile shown on the business inquiry form."""
    influencer = await service.get_public_profile(username)
    return PublicProfileResponse.from_influencer(influencer)


# ---------------------------------------------------------------------------
# Negotiation policy
# ---------------------------------------------------------------------------


@router.get("/preferences")
async def get_preferences(
    influencer: CurrentInfluencer,
    service: Service,
) -> NegotiationPolicy | None:
    """The stored policy, or ``null`` when the influencer never saved one."""
    return await service.get_policy(influencer.id)


@router.post("/preferences")
async def save_preferences(
    body: PolicyInput,
    influencer: CurrentInfluencer,
    service: Service,
) -> NegotiationPolicy:
    return await service.upsert_policy(influencer.id, body)


# ---------------------------------------------------------------------------
# Inquiries
# ---------------------------------------------------------------------------


@router.get("/inquiries")
async def list_inquiries(
    influencer: CurrentInfluencer,
    service: Service,
) -> list[InquiryResponse]:
    inquiries = await service.list_inquiries(influencer.id)
    return [InquiryResponse.from_inquiry(inquiry) for inquiry in inquiries]


@router.post("/inquiries", status_code=201)
async def submit_inquiry(body: NewInquiry, service: Service) -> SubmitInquiryResponse:
    """Business submission; the response carries the agent's first message."""
    inquiry, message = await service.submit_inquiry(body)
    return SubmitInquiryResponse(inquiry=InquiryResponse.from_inquiry(inquiry), message=message)


@router.get("/inquiries/{inquiry_id}")
async def get_inquiry(inquiry_id: str, service: Service) -> InquiryResponse:
    inquiry = await service.get_inquiry(inquiry_id)
    return InquiryResponse.from_inquiry(inquiry)


@router.patch("/inquiries/{inquiry_id}/status")
async def set_inquiry_status(
    inquiry_id: str,
    body: StatusUpdateRequest,
    influencer: CurrentInfluencer,
    service: Service,
) -> InquiryResponse:
    inquiry = await service.set_inquiry_status(
        inquiry_id, body.status, influencer.id, body.message
    )
    return InquiryResponse.from_inquiry(inquiry)


@router.delete("/inquiries/{inquiry_id}")
async def delete_inquiry(
    inquiry_id: str,
    influencer: CurrentInfluencer,
    service: Service,
) -> MessageResponse:
    await service.delete_inquiry(inquiry_id, influencer.id)
    return MessageResponse(message="Inquiry deleted successfully")


@router.get("/inquiries/{inquiry_id}/messages")
async def list_messages(inquiry_id: str, service: Service) -> list[Message]:
    return await service.list_messages(inquiry_id)


@router.post("/inquiries/{inquiry_id}/messages")
async def post_message(
    inquiry_id: str,
    body: ChatMessageRequest,
    service: Service,
) -> ChatTurnResponse:
    user_message, assistant_message = await service.post_chat_message(inquiry_id, body.content)
    return ChatTurnResponse(user_message=user_message, assistant_message=assistant_message)


@router.post("/inquiries/{inquiry_id}/close")
async def close_chat(inquiry_id: str, service: Service) -> InquiryResponse:
    """End the conversation (explicitly or on page unload) and store the recommendation."""
    inquiry = await service.close_chat(inquiry_id)
    return InquiryResponse.from_inquiry(inquiry)
