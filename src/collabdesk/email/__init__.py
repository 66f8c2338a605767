"""Outbound email over the Gmail API."""

from collabdesk.email.client import GmailClient
from collabdesk.email.models import OutboundEmail

__all__ = [
    "GmailClient",
    "OutboundEmail",
]
