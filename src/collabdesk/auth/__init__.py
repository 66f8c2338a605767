"""Google OAuth2 credential helpers for the notification sender."""

from collabdesk.auth.credentials import (
    CredentialsUnavailableError,
    get_gmail_credentials,
    get_gmail_service,
)

__all__ = [
    "CredentialsUnavailableError",
    "get_gmail_credentials",
    "get_gmail_service",
]
