"""Gmail OAuth2 credential management for the notification sender account.

Provides helpers for:
- Loading/refreshing Gmail OAuth2 credentials from token.json
- Building the Gmail API service client
"""

from __future__ import annotations

from pathlib import Path

import google.auth.transport.requests
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow  # type: ignore[import-untyped]
from googleapiclient.discovery import Resource, build

# Notifications only ever send.
DEFAULT_GMAIL_SCOPES: list[str] = [
    "https://www.googleapis.com/auth/gmail.send",
]

DEFAULT_TOKEN_PATH: str = "token.json"
DEFAULT_CREDENTIALS_PATH: str = "credentials.json"


class CredentialsUnavailableError(RuntimeError):
    """Raised when stored credentials are unusable and no interactive flow is allowed."""


def get_gmail_credentials(
    token_path: str | Path = DEFAULT_TOKEN_PATH,
    credentials_path: str | Path = DEFAULT_CREDENTIALS_PATH,
    scopes: list[str] | None = None,
    interactive: bool = True,
) -> Credentials:
    """Load Gmail OAuth2 credentials, refreshing or creating as needed.

    If ``token_path`` holds valid (or refreshable) credentials they are
    returned.  Otherwise, when *interactive* is true, an OAuth2 flow is run
    via ``InstalledAppFlow.run_local_server()``.  The resulting credentials
    are persisted to ``token_path``.

    Args:
        token_path: Path to the cached OAuth2 token file.
        credentials_path: Path to the OAuth2 client-secrets file.
        scopes: OAuth2 scopes to request.  Defaults to ``DEFAULT_GMAIL_SCOPES``.
        interactive: Allow the browser consent flow.  The server passes
            ``False`` so startup never blocks on a browser.

    Returns:
        A ``google.oauth2.credentials.Credentials`` instance.

    Raises:
        CredentialsUnavailableError: If the token is unusable and
            *interactive* is false.
    """
    if scopes is None:
        scopes = DEFAULT_GMAIL_SCOPES

    token_path = Path(token_path)
    credentials_path = Path(credentials_path)
    creds: Credentials | None = None

    if token_path.exists():
        creds = Credentials.from_authorized_user_file(str(token_path), scopes)  # type: ignore[no-untyped-call]

    if creds and creds.valid:
        return creds

    if creds and creds.expired and creds.refresh_token:
        creds.refresh(google.auth.transport.requests.Request())
    elif not interactive:
        raise CredentialsUnavailableError(f"No usable Gmail token at {token_path}")
    else:
        flow = InstalledAppFlow.from_client_secrets_file(str(credentials_path), scopes)
        creds = flow.run_local_server(port=0)

    token_path.write_text(creds.to_json())
    return creds


def get_gmail_service(credentials: Credentials) -> Resource:
    """Build and return a Gmail API v1 service client.

    Args:
        credentials: Loaded OAuth2 credentials.

    Returns:
        A ``googleapiclient.discovery.Resource`` for the Gmail API v1.
    """
    return build("gmail", "v1", credentials=credentials)
