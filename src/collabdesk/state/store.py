"""SQLite-backed repository for influencers, policies, inquiries, and messages.

Accepts a sqlite3.Connection, uses parameterized queries exclusively, and
commits synchronously after every write.  All ``sqlite3.Error`` failures are
re-raised as :class:`StorageError` and never retried.
"""

from __future__ import annotations

import sqlite3
import threading
import uuid
from collections.abc import Iterator
from contextlib import contextmanager

from collabdesk.domain.errors import StorageError, UsernameTakenError
from collabdesk.domain.models import (
    Influencer,
    Inquiry,
    Message,
    NegotiationPolicy,
    NewInquiry,
    PolicyInput,
)
from collabdesk.domain.types import InquiryStatus, Language, MessageRole
from collabdesk.state.serializers import (
    influencer_from_row,
    inquiry_from_row,
    message_from_row,
    policy_from_row,
    utc_now,
)


class CollabStore:
    """Typed CRUD operations over the collaboration inbox tables.

    The store is the single source of truth; nothing is cached between calls.
    A thread lock serializes access because the async service layer reaches
    the store through ``asyncio.to_thread``.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        """Initialize with an open database connection.

        Args:
            conn: An open sqlite3.Connection whose database already has the
                  tables created by ``init_tables``.
        """
        self._conn = conn
        self._conn.row_factory = sqlite3.Row
        self._lock = threading.Lock()

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Connection]:
        with self._lock:
            try:
                yield self._conn
                self._conn.commit()
            except sqlite3.IntegrityError as exc:
                self._conn.rollback()
                raise StorageError(f"Integrity constraint failed: {exc}") from exc
            except sqlite3.Error as exc:
                self._conn.rollback()
                raise StorageError(f"Storage operation failed: {exc}") from exc

    # ------------------------------------------------------------------
    # Influencers
    # ------------------------------------------------------------------

    def upsert_influencer(self, influencer: Influencer) -> Influencer:
        """Insert or update an influencer's directory record.

        Args:
            influencer: The record to persist, keyed by ``influencer.id``.

        Returns:
            The stored influencer.
        """
        now = utc_now()
        with self._cursor() as conn:
            conn.execute(
                """
                INSERT INTO influencers (
                    id, username, email, first_name, last_name,
                    profile_image_url, language, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT (id) DO UPDATE SET
                    username = excluded.username,
                    email = excluded.email,
                    first_name = excluded.first_name,
                    last_name = excluded.last_name,
                    profile_image_url = excluded.profile_image_url,
                    language = excluded.language,
                    updated_at = excluded.updated_at
                """,
                (
                    influencer.id,
                    influencer.username,
                    influencer.email,
                    influencer.first_name,
                    influencer.last_name,
                    influencer.profile_image_url,
                    influencer.language.value,
                    now,
                    now,
                ),
            )
            row = conn.execute(
                "SELECT * FROM influencers WHERE id = ?", (influencer.id,)
            ).fetchone()
        return influencer_from_row(row)

    def get_influencer(self, influencer_id: str) -> Influencer | None:
        """Load an influencer by id, or ``None`` if unknown."""
        with self._cursor() as conn:
            row = conn.execute(
                "SELECT * FROM influencers WHERE id = ?", (influencer_id,)
            ).fetchone()
        return influencer_from_row(row) if row else None

    def get_influencer_by_username(self, username: str) -> Influencer | None:
        """Load an influencer by username, or ``None`` if unknown."""
        with self._cursor() as conn:
            row = conn.execute(
                "SELECT * FROM influencers WHERE username = ?", (username,)
            ).fetchone()
        return influencer_from_row(row) if row else None

    def update_username(self, influencer_id: str, username: str) -> Influencer | None:
        """Set an influencer's username.

        Returns:
            The updated influencer, or ``None`` if the id is unknown.

        Raises:
            UsernameTakenError: If another influencer already holds *username*.
        """
        try:
            with self._cursor() as conn:
                conn.execute(
                    "UPDATE influencers SET username = ?, updated_at = ? WHERE id = ?",
                    (username, utc_now(), influencer_id),
                )
                row = conn.execute(
                    "SELECT * FROM influencers WHERE id = ?", (influencer_id,)
                ).fetchone()
        except StorageError as exc:
            if isinstance(exc.__cause__, sqlite3.IntegrityError):
                raise UsernameTakenError() from exc
            raise
        return influencer_from_row(row) if row else None

    def update_language(self, influencer_id: str, language: Language) -> Influencer | None:
        """Set an influencer's language preference.

        Returns:
            The updated influencer, or ``None`` if the id is unknown.
        """
        with self._cursor() as conn:
            conn.execute(
                "UPDATE influencers SET language = ?, updated_at = ? WHERE id = ?",
                (language.value, utc_now(), influencer_id),
            )
            row = conn.execute(
                "SELECT * FROM influencers WHERE id = ?", (influencer_id,)
            ).fetchone()
        return influencer_from_row(row) if row else None

    # ------------------------------------------------------------------
    # Negotiation policies
    # ------------------------------------------------------------------

    def get_policy(self, influencer_id: str) -> NegotiationPolicy | None:
        """Load the stored negotiation policy for an influencer, if any."""
        with self._cursor() as conn:
            row = conn.execute(
                "SELECT * FROM negotiation_policies WHERE influencer_id = ?",
                (influencer_id,),
            ).fetchone()
        return policy_from_row(row) if row else None

    def upsert_policy(self, influencer_id: str, policy: PolicyInput) -> NegotiationPolicy:
        """Create or replace an influencer's policy (one row per influencer).

        The original ``created_at`` survives updates.

        Args:
            influencer_id: Owning influencer.
            policy: The validated policy fields.

        Returns:
            The stored policy.
        """
        now = utc_now()
        with self._cursor() as conn:
            conn.execute(
                """
                INSERT INTO negotiation_policies (
                    influencer_id, content_preferences, minimum_rate,
                    preferred_content_length, additional_guidelines,
                    created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT (influencer_id) DO UPDATE SET
                    content_preferences = excluded.content_preferences,
                    minimum_rate = excluded.minimum_rate,
                    preferred_content_length = excluded.preferred_content_length,
                    additional_guidelines = excluded.additional_guidelines,
                    updated_at = excluded.updated_at
                """,
                (
                    influencer_id,
                    policy.content_preferences,
                    policy.minimum_rate,
                    policy.preferred_content_length,
                    policy.additional_guidelines,
                    now,
                    now,
                ),
            )
            row = conn.execute(
                "SELECT * FROM negotiation_policies WHERE influencer_id = ?",
                (influencer_id,),
            ).fetchone()
        return policy_from_row(row)

    # ------------------------------------------------------------------
    # Inquiries
    # ------------------------------------------------------------------

    def create_inquiry(self, new_inquiry: NewInquiry) -> Inquiry:
        """Persist a new inquiry as ``pending`` with an open chat.

        Args:
            new_inquiry: The validated business submission.

        Returns:
            The stored inquiry with its generated id.
        """
        inquiry_id = str(uuid.uuid4())
        now = utc_now()
        with self._cursor() as conn:
            conn.execute(
                """
                INSERT INTO inquiries (
                    id, influencer_id, business_email, message, price,
                    company_info, attachment_url, status, chat_active,
                    created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, 1, ?, ?)
                """,
                (
                    inquiry_id,
                    new_inquiry.influencer_id,
                    new_inquiry.business_email,
                    new_inquiry.message,
                    new_inquiry.price,
                    new_inquiry.company_info,
                    new_inquiry.attachment_url,
                    InquiryStatus.PENDING.value,
                    now,
                    now,
                ),
            )
            row = conn.execute("SELECT * FROM inquiries WHERE id = ?", (inquiry_id,)).fetchone()
        return inquiry_from_row(row)

    def get_inquiry(self, inquiry_id: str) -> Inquiry | None:
        """Load an inquiry by id, or ``None`` if it does not exist."""
        with self._cursor() as conn:
            row = conn.execute("SELECT * FROM inquiries WHERE id = ?", (inquiry_id,)).fetchone()
        return inquiry_from_row(row) if row else None

    def list_inquiries_by_influencer(self, influencer_id: str) -> list[Inquiry]:
        """List an influencer's inquiries, newest first."""
        with self._cursor() as conn:
            rows = conn.execute(
                "SELECT * FROM inquiries WHERE influencer_id = ? ORDER BY created_at DESC",
                (influencer_id,),
            ).fetchall()
        return [inquiry_from_row(row) for row in rows]

    def set_first_response(self, inquiry_id: str, ai_response: str) -> Inquiry | None:
        """Cache the agent's first utterance on the inquiry.

        Returns:
            The updated inquiry, or ``None`` if it no longer exists.
        """
        with self._cursor() as conn:
            conn.execute(
                "UPDATE inquiries SET ai_response = ?, updated_at = ? WHERE id = ?",
                (ai_response, utc_now(), inquiry_id),
            )
            row = conn.execute("SELECT * FROM inquiries WHERE id = ?", (inquiry_id,)).fetchone()
        return inquiry_from_row(row) if row else None

    def update_inquiry_status(self, inquiry_id: str, status: InquiryStatus) -> Inquiry | None:
        """Set an inquiry's status without touching its chat state.

        Returns:
            The updated inquiry, or ``None`` if it does not exist.
        """
        with self._cursor() as conn:
            conn.execute(
                "UPDATE inquiries SET status = ?, updated_at = ? WHERE id = ?",
                (status.value, utc_now(), inquiry_id),
            )
            row = conn.execute("SELECT * FROM inquiries WHERE id = ?", (inquiry_id,)).fetchone()
        return inquiry_from_row(row) if row else None

    def close_inquiry_chat(self, inquiry_id: str, ai_recommendation: str) -> Inquiry | None:
        """Close an open chat and store its recommendation in one update.

        The update only matches rows whose chat is still active, so a
        concurrent second close cannot overwrite the first recommendation.

        Returns:
            The closed inquiry, or ``None`` if the inquiry does not exist or
            its chat was already closed.
        """
        with self._cursor() as conn:
            cursor = conn.execute(
                """
                UPDATE inquiries
                SET chat_active = 0, ai_recommendation = ?, updated_at = ?
                WHERE id = ? AND chat_active = 1
                """,
                (ai_recommendation, utc_now(), inquiry_id),
            )
            if cursor.rowcount == 0:
                return None
            row = conn.execute("SELECT * FROM inquiries WHERE id = ?", (inquiry_id,)).fetchone()
        return inquiry_from_row(row)

    def delete_inquiry(self, inquiry_id: str) -> bool:
        """Hard-delete an inquiry; its messages cascade.

        Returns:
            ``True`` if a row was deleted.
        """
        with self._cursor() as conn:
            cursor = conn.execute("DELETE FROM inquiries WHERE id = ?", (inquiry_id,))
        return cursor.rowcount > 0

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def append_message(self, inquiry_id: str, role: MessageRole, content: str) -> Message:
        """Append one chat message to an inquiry's transcript.

        Args:
            inquiry_id: The inquiry the message belongs to.
            role: Author of the message.
            content: Message text.

        Returns:
            The stored message.
        """
        message_id = str(uuid.uuid4())
        with self._cursor() as conn:
            conn.execute(
                """
                INSERT INTO messages (id, inquiry_id, role, content, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (message_id, inquiry_id, role.value, content, utc_now()),
            )
            row = conn.execute("SELECT * FROM messages WHERE id = ?", (message_id,)).fetchone()
        return message_from_row(row)

    def list_messages(self, inquiry_id: str) -> list[Message]:
        """List an inquiry's messages in creation order.

        Ties on ``created_at`` fall back to insertion order (``seq``).
        """
        with self._cursor() as conn:
            rows = conn.execute(
                "SELECT * FROM messages WHERE inquiry_id = ? ORDER BY created_at, seq",
                (inquiry_id,),
            ).fetchall()
        return [message_from_row(row) for row in rows]

    def ping(self) -> None:
        """Run a trivial query; raises ``StorageError`` if the database is unusable."""
        with self._cursor() as conn:
            conn.execute("SELECT 1")
