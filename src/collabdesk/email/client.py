"""Gmail API client wrapper used as the notification sink."""

from __future__ import annotations

import base64
from email.message import EmailMessage
from typing import Any

from collabdesk.email.models import OutboundEmail


class GmailClient:
    """Wrapper around the Gmail API service for sending email.

    All calls go through the provided Gmail API service resource (obtained
    via ``get_gmail_service``); the service object handles transport.  Calls
    are synchronous, so async callers run them in a worker thread.

    Args:
        service: An authenticated Gmail API v1 service resource.
        from_email: The email address to use as the ``From`` header.
    """

    def __init__(self, service: Any, from_email: str) -> None:
        self._service = service
        self._from_email = from_email

    @property
    def from_email(self) -> str:
        """The sender address used for every message."""
        return self._from_email

    def build_message(self, outbound: OutboundEmail) -> EmailMessage:
        """Build the RFC 2822 message, with an HTML alternative when present."""
        message = EmailMessage()
        message.set_content(outbound.body)
        if outbound.html_body:
            message.add_alternative(outbound.html_body, subtype="html")
        message["To"] = outbound.to
        message["From"] = self._from_email
        message["Subject"] = outbound.subject
        return message

    def send(self, outbound: OutboundEmail) -> dict[str, Any]:
        """Compose and send an email via ``users.messages.send``.

        Args:
            outbound: The email to send.

        Returns:
            The Gmail API response dict (contains ``id``, ``threadId``,
            ``labelIds``).
        """
        message = self.build_message(outbound)
        encoded = base64.urlsafe_b64encode(message.as_bytes()).decode()
        result: dict[str, Any] = (
            self._service.users().messages().send(userId="me", body={"raw": encoded}).execute()
        )
        return result
