"""Inquiry lifecycle: submission, chat, closing, status decisions, deletion.

``InquiryService`` is the public surface of the core.  Every operation reads
the store afresh (no cross-request caching), and every agent turn is computed
from the complete transcript as of that moment.  Chat appends and closes on
the same inquiry are serialized with a per-inquiry lock.
"""

from __future__ import annotations

import asyncio
import re

import structlog

from collabdesk.domain.errors import (
    ChatClosedError,
    InvalidInputError,
    NotFoundError,
    UnauthorizedError,
    UsernameTakenError,
)
from collabdesk.domain.models import (
    Influencer,
    Inquiry,
    Message,
    NegotiationPolicy,
    NewInquiry,
    PolicyInput,
)
from collabdesk.domain.types import (
    NOTIFIABLE_STATUSES,
    InquiryStatus,
    Language,
    MessageRole,
)
from collabdesk.inquiries.locks import KeyedLocks
from collabdesk.llm.agent import NegotiationAgent
from collabdesk.llm.validation import parse_recommendation
from collabdesk.notifications.background import BackgroundTasks
from collabdesk.notifications.dispatcher import NotificationDispatcher
from collabdesk.observability.metrics import CHATS_CLOSED, INQUIRIES_SUBMITTED
from collabdesk.policy.resolver import PolicyResolver
from collabdesk.state.store import CollabStore
from collabdesk.state_machine import ChatEvent, ChatStateMachine

logger = structlog.get_logger()

USERNAME_PATTERN = re.compile(r"^[a-z0-9_-]{3,30}$")


class InquiryService:
    """Coordinates the store, policy resolver, agent, and notifications.

    Args:
        store: The repository (single source of truth).
        agent: The negotiation agent.
        resolver: Resolves the effective policy per influencer.
        dispatcher: Sends status notifications.
        background: Tracks fire-and-forget notification tasks.
        default_language: Agent language when an influencer record is missing.
        locks: Per-inquiry lock registry; a fresh one is created if omitted.
    """

    def __init__(
        self,
        store: CollabStore,
        agent: NegotiationAgent,
        resolver: PolicyResolver,
        dispatcher: NotificationDispatcher,
        background: BackgroundTasks,
        default_language: Language = Language.EN,
        locks: KeyedLocks | None = None,
    ) -> None:
        self._store = store
        self._agent = agent
        self._resolver = resolver
        self._dispatcher = dispatcher
        self._background = background
        self._default_language = default_language
        self._locks = locks or KeyedLocks()

    # ------------------------------------------------------------------
    # Business-facing chat
    # ------------------------------------------------------------------

    async def submit_inquiry(self, new_inquiry: NewInquiry) -> tuple[Inquiry, Message]:
        """Create an inquiry and generate the agent's first response.

        The inquiry is persisted before the agent runs, so a degraded or slow
        model call never loses the submission.

        Returns:
            The inquiry (with ``ai_response`` set) and the first assistant message.

        Raises:
            NotFoundError: If the target influencer does not exist.
        """
        influencer = await self._require_influencer(new_inquiry.influencer_id)
        inquiry = await asyncio.to_thread(self._store.create_inquiry, new_inquiry)
        INQUIRIES_SUBMITTED.inc()
        logger.info(
            "inquiry_created",
            inquiry_id=inquiry.id,
            influencer_id=influencer.id,
            price_offered=inquiry.price is not None,
        )

        policy = await self._resolver.resolve(influencer.id)
        utterance = await self._agent.generate_first_response(
            inquiry.facts, policy, influencer.language
        )

        async with self._locks.hold(inquiry.id):
            updated = await asyncio.to_thread(self._store.set_first_response, inquiry.id, utterance)
            if updated is None:
                raise NotFoundError("inquiry", inquiry.id)
            message = await asyncio.to_thread(
                self._store.append_message, inquiry.id, MessageRole.ASSISTANT, utterance
            )
        return updated, message

    async def post_chat_message(self, inquiry_id: str, content: str) -> tuple[Message, Message]:
        """Append a business message and the agent's reply.

        Returns:
            The stored user message and the stored assistant message.

        Raises:
            InvalidInputError: If *content* is blank.
            NotFoundError: If the inquiry does not exist.
            ChatClosedError: If the chat is closed; nothing is appended.
        """
        if not content or not content.strip():
            raise InvalidInputError("Message content is required")

        async with self._locks.hold(inquiry_id):
            inquiry = await self._require_inquiry(inquiry_id)
            ChatStateMachine.for_inquiry(inquiry.chat_active).trigger(ChatEvent.POST_MESSAGE)

            user_message = await asyncio.to_thread(
                self._store.append_message, inquiry_id, MessageRole.USER, content
            )
            history = await asyncio.to_thread(self._store.list_messages, inquiry_id)
            policy = await self._resolver.resolve(inquiry.influencer_id)
            language = await self._language_for(inquiry.influencer_id)

            reply = await self._agent.generate_chat_turn(history, inquiry.facts, policy, language)
            assistant_message = await asyncio.to_thread(
                self._store.append_message, inquiry_id, MessageRole.ASSISTANT, reply
            )

        logger.info("chat_message_appended", inquiry_id=inquiry_id, history_length=len(history) + 1)
        return user_message, assistant_message

    async def close_chat(self, inquiry_id: str) -> Inquiry:
        """Close an open chat and store the closing recommendation.

        A second close fails instead of regenerating the recommendation.

        Raises:
            NotFoundError: If the inquiry does not exist.
            ChatClosedError: If the chat is already closed.
        """
        async with self._locks.hold(inquiry_id):
            inquiry = await self._require_inquiry(inquiry_id)
            ChatStateMachine.for_inquiry(inquiry.chat_active).trigger(ChatEvent.CLOSE)

            history = await asyncio.to_thread(self._store.list_messages, inquiry_id)
            policy = await self._resolver.resolve(inquiry.influencer_id)
            language = await self._language_for(inquiry.influencer_id)
            recommendation = await self._agent.generate_closing_recommendation(
                history, inquiry.facts, policy, language
            )

            closed = await asyncio.to_thread(
                self._store.close_inquiry_chat, inquiry_id, recommendation
            )
            if closed is None:
                # Closed by another process between the read and the update.
                raise ChatClosedError(ChatEvent.CLOSE)

        verdict = parse_recommendation(recommendation).verdict
        CHATS_CLOSED.labels(verdict=verdict.value if verdict else "unknown").inc()
        logger.info(
            "chat_closed",
            inquiry_id=inquiry_id,
            verdict=verdict.value if verdict else None,
            message_count=len(history),
        )
        return closed

    async def get_inquiry(self, inquiry_id: str) -> Inquiry:
        """Load an inquiry by id (the id acts as the business's access token)."""
        return await self._require_inquiry(inquiry_id)

    async def list_messages(self, inquiry_id: str) -> list[Message]:
        """Return an inquiry's transcript in creation order."""
        await self._require_inquiry(inquiry_id)
        return await asyncio.to_thread(self._store.list_messages, inquiry_id)

    # ------------------------------------------------------------------
    # Influencer-facing decisions
    # ------------------------------------------------------------------

    async def list_inquiries(self, influencer_id: str) -> list[Inquiry]:
        """Return the influencer's inquiries, newest first."""
        return await asyncio.to_thread(self._store.list_inquiries_by_influencer, influencer_id)

    async def set_inquiry_status(
        self,
        inquiry_id: str,
        status: InquiryStatus | str,
        actor_id: str,
        message: str | None = None,
    ) -> Inquiry:
        """Record the influencer's decision and notify the business.

        Notification runs in the background for every status except
        ``pending``; its outcome never affects the returned inquiry.

        Raises:
            InvalidInputError: If *status* is not one of the four statuses.
            NotFoundError: If the inquiry does not exist.
            UnauthorizedError: If *actor_id* does not own the inquiry.
        """
        try:
            new_status = InquiryStatus(status)
        except ValueError as exc:
            raise InvalidInputError("Invalid status") from exc

        inquiry = await self._require_owned(inquiry_id, actor_id)
        updated = await asyncio.to_thread(self._store.update_inquiry_status, inquiry_id, new_status)
        if updated is None:
            raise NotFoundError("inquiry", inquiry_id)
        logger.info(
            "inquiry_status_changed",
            inquiry_id=inquiry_id,
            from_status=str(inquiry.status),
            to_status=str(new_status),
        )

        if new_status in NOTIFIABLE_STATUSES:
            influencer = await asyncio.to_thread(self._store.get_influencer, actor_id)
            display_name = influencer.display_name if influencer else "The influencer"
            self._background.spawn(
                self._dispatcher.notify(updated.business_email, display_name, new_status, message),
                name=f"notify:{inquiry_id}",
            )
        return updated

    async def delete_inquiry(self, inquiry_id: str, actor_id: str) -> None:
        """Hard-delete an inquiry and its transcript.

        Raises:
            NotFoundError: If the inquiry does not exist.
            UnauthorizedError: If *actor_id* does not own the inquiry.
        """
        async with self._locks.hold(inquiry_id):
            await self._require_owned(inquiry_id, actor_id)
            await asyncio.to_thread(self._store.delete_inquiry, inquiry_id)
        logger.info("inquiry_deleted", inquiry_id=inquiry_id)

    # ------------------------------------------------------------------
    # Policy and profile
    # ------------------------------------------------------------------

    async def get_policy(self, influencer_id: str) -> NegotiationPolicy | None:
        """Return the influencer's stored policy, or ``None`` if never saved."""
        return await asyncio.to_thread(self._store.get_policy, influencer_id)

    async def upsert_policy(self, influencer_id: str, policy: PolicyInput) -> NegotiationPolicy:
        """Create or replace the influencer's negotiation policy."""
        stored = await asyncio.to_thread(self._store.upsert_policy, influencer_id, policy)
        logger.info("policy_upserted", influencer_id=influencer_id)
        return stored

    async def get_public_profile(self, username: str) -> Influencer:
        """Look up an influencer by username for the public inquiry form."""
        influencer = await asyncio.to_thread(
            self._store.get_influencer_by_username, username.strip().lower()
        )
        if influencer is None:
            raise NotFoundError("user", username)
        return influencer

    async def update_username(self, influencer_id: str, username: str) -> Influencer:
        """Normalize and set the influencer's username.

        Raises:
            InvalidInputError: If the normalized name is not 3-30 characters of
                lowercase letters, digits, ``_`` or ``-``.
            UsernameTakenError: If another influencer already holds the name.
            NotFoundError: If the influencer does not exist.
        """
        normalized = (username or "").strip().lower()
        if not USERNAME_PATTERN.match(normalized):
            raise InvalidInputError(
                "Username must be 3-30 characters: lowercase letters, numbers, "
                "underscores, or hyphens"
            )

        current = await self._require_influencer(influencer_id)
        if current.username == normalized:
            return current

        holder = await asyncio.to_thread(self._store.get_influencer_by_username, normalized)
        if holder is not None and holder.id != influencer_id:
            raise UsernameTakenError()

        updated = await asyncio.to_thread(self._store.update_username, influencer_id, normalized)
        if updated is None:
            raise NotFoundError("user", influencer_id)
        logger.info("username_updated", influencer_id=influencer_id)
        return updated

    async def update_language(self, influencer_id: str, language: str) -> Influencer:
        """Set the influencer's language preference (``en`` or ``zh``)."""
        try:
            new_language = Language(language)
        except ValueError as exc:
            raise InvalidInputError("Invalid language") from exc
        updated = await asyncio.to_thread(self._store.update_language, influencer_id, new_language)
        if updated is None:
            raise NotFoundError("user", influencer_id)
        return updated

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _require_influencer(self, influencer_id: str) -> Influencer:
        influencer = await asyncio.to_thread(self._store.get_influencer, influencer_id)
        if influencer is None:
            raise NotFoundError("influencer", influencer_id)
        return influencer

    async def _require_inquiry(self, inquiry_id: str) -> Inquiry:
        inquiry = await asyncio.to_thread(self._store.get_inquiry, inquiry_id)
        if inquiry is None:
            raise NotFoundError("inquiry", inquiry_id)
        return inquiry

    async def _require_owned(self, inquiry_id: str, actor_id: str) -> Inquiry:
        inquiry = await self._require_inquiry(inquiry_id)
        if inquiry.influencer_id != actor_id:
            raise UnauthorizedError()
        return inquiry

    async def _language_for(self, influencer_id: str) -> Language:
        influencer = await asyncio.to_thread(self._store.get_influencer, influencer_id)
        return influencer.language if influencer else self._default_language
