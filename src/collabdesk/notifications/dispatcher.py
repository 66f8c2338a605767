"""Best-effort delivery of influencer decisions to the business contact."""

from __future__ import annotations

import asyncio

import structlog

from collabdesk.domain.types import NOTIFIABLE_STATUSES, InquiryStatus
from collabdesk.email.client import GmailClient
from collabdesk.notifications.templates import render_notification
from collabdesk.observability.metrics import NOTIFICATIONS_FAILED

logger = structlog.get_logger()


class NotificationDispatcher:
    """Send status notifications through the Gmail sink.

    ``notify`` never raises: a missing sender, an unknown status or a delivery
    failure is logged and the call returns normally, so the status change that
    triggered it is never affected.

    Args:
        gmail_client: The configured sender, or ``None`` when Gmail is not
            set up (notifications are then logged and dropped).
    """

    def __init__(self, gmail_client: GmailClient | None) -> None:
        self._gmail = gmail_client

    async def notify(
        self,
        business_email: str,
        influencer_name: str,
        status: InquiryStatus,
        message: str | None = None,
    ) -> None:
        """Deliver the notification for *status* to *business_email*."""
        if status not in NOTIFIABLE_STATUSES:
            logger.debug("notification_skipped", status=str(status), reason="not_notifiable")
            return
        if self._gmail is None or not self._gmail.from_email:
            logger.warning("notification_skipped", status=str(status), reason="sender_not_configured")
            return

        outbound = render_notification(business_email, influencer_name, status, message)
        try:
            result = await asyncio.to_thread(self._gmail.send, outbound)
        except Exception:
            NOTIFICATIONS_FAILED.inc()
            logger.exception("notification_failed", status=str(status))
            return

        logger.info("notification_sent", status=str(status), gmail_message_id=result.get("id"))
