"""Current-user identity for influencer-only routes.

Authentication itself happens upstream (the auth gateway); the core only
trusts the identity it is handed.  ``HeaderIdentityProvider`` reads the
gateway's ``X-User-Id`` header and resolves it against the influencer
directory.  Tests replace ``current_influencer`` via
``app.dependency_overrides``.
"""

from __future__ import annotations

import asyncio
from typing import Protocol

from fastapi import HTTPException, Request

from collabdesk.domain.models import Influencer
from collabdesk.state.store import CollabStore

USER_ID_HEADER = "X-User-Id"


class IdentityProvider(Protocol):
    """Resolves the authenticated influencer for a request, or ``None``."""

    async def identify(self, request: Request) -> Influencer | None: ...


class HeaderIdentityProvider:
    """Trust the upstream gateway's user-id header.

    Args:
        store: Directory used to resolve the id to an influencer record.
    """

    def __init__(self, store: CollabStore) -> None:
        self._store = store

    async def identify(self, request: Request) -> Influencer | None:
        user_id = request.headers.get(USER_ID_HEADER, "").strip()
        if not user_id:
            return None
        return await asyncio.to_thread(self._store.get_influencer, user_id)


async def current_influencer(request: Request) -> Influencer:
    """FastAPI dependency returning the authenticated influencer.

    Raises:
        HTTPException: 401 if no identity is present.
    """
    provider: IdentityProvider = request.app.state.services["identity_provider"]
    influencer = await provider.identify(request)
    if influencer is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return influencer
