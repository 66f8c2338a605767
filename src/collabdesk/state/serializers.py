"""Row <-> model conversion helpers for the SQLite store.

Timestamps are stored as ISO 8601 UTC strings with microsecond precision so
lexical order equals chronological order.
"""

from __future__ import annotations

import sqlite3
from datetime import UTC, datetime

from collabdesk.domain.models import Influencer, Inquiry, Message, NegotiationPolicy


def utc_now() -> str:
    """Return the current UTC time as a sortable ISO 8601 string."""
    return datetime.now(tz=UTC).isoformat(timespec="microseconds")


def influencer_from_row(row: sqlite3.Row) -> Influencer:
    """Build an ``Influencer`` from an ``influencers`` row."""
    return Influencer(
        id=row["id"],
        username=row["username"],
        email=row["email"],
        first_name=row["first_name"],
        last_name=row["last_name"],
        profile_image_url=row["profile_image_url"],
        language=row["language"],
    )


def policy_from_row(row: sqlite3.Row) -> NegotiationPolicy:
    """Build a ``NegotiationPolicy`` from a ``negotiation_policies`` row."""
    return NegotiationPolicy(
        influencer_id=row["influencer_id"],
        content_preferences=row["content_preferences"],
        minimum_rate=row["minimum_rate"],
        preferred_content_length=row["preferred_content_length"],
        additional_guidelines=row["additional_guidelines"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def inquiry_from_row(row: sqlite3.Row) -> Inquiry:
    """Build an ``Inquiry`` from an ``inquiries`` row.

    SQLite has no boolean type, so ``chat_active`` is stored as 0/1.
    """
    return Inquiry(
        id=row["id"],
        influencer_id=row["influencer_id"],
        business_email=row["business_email"],
        message=row["message"],
        price=row["price"],
        company_info=row["company_info"],
        attachment_url=row["attachment_url"],
        status=row["status"],
        chat_active=bool(row["chat_active"]),
        ai_response=row["ai_response"],
        ai_recommendation=row["ai_recommendation"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def message_from_row(row: sqlite3.Row) -> Message:
    """Build a ``Message`` from a ``messages`` row."""
    return Message(
        id=row["id"],
        inquiry_id=row["inquiry_id"],
        role=row["role"],
        content=row["content"],
        created_at=row["created_at"],
    )
