"""Inquiry lifecycle service (the public surface of the core)."""

from collabdesk.inquiries.locks import KeyedLocks
from collabdesk.inquiries.service import USERNAME_PATTERN, InquiryService

__all__ = [
    "USERNAME_PATTERN",
    "InquiryService",
    "KeyedLocks",
]
