"""Negotiation policy lookup with a system-wide default.

The agent must always have a usable policy, so influencers who never saved
one negotiate under ``DEFAULT_POLICY`` terms.  Resolving never writes.
"""

from __future__ import annotations

import asyncio

import structlog

from collabdesk.domain.models import NegotiationPolicy, PolicyInput
from collabdesk.state.store import CollabStore

logger = structlog.get_logger()

# Applied to any influencer without a stored policy.
DEFAULT_POLICY = PolicyInput(
    content_preferences="Various collaboration opportunities",
    minimum_rate=500,
    preferred_content_length="Flexible",
    additional_guidelines=None,
)


def default_policy_for(influencer_id: str) -> NegotiationPolicy:
    """Return the default policy bound to *influencer_id*."""
    return NegotiationPolicy(influencer_id=influencer_id, **DEFAULT_POLICY.model_dump())


class PolicyResolver:
    """Resolve the effective negotiation policy for an influencer.

    Args:
        store: The repository holding stored policies.
    """

    def __init__(self, store: CollabStore) -> None:
        self._store = store

    async def resolve(self, influencer_id: str) -> NegotiationPolicy:
        """Return the influencer's stored policy, or the default one.

        Storage failures propagate as ``StorageError``.

        Args:
            influencer_id: The influencer whose policy drives the agent.

        Returns:
            The effective ``NegotiationPolicy``.
        """
        policy = await asyncio.to_thread(self._store.get_policy, influencer_id)
        if policy is None:
            logger.debug("policy_default_applied", influencer_id=influencer_id)
            return default_policy_for(influencer_id)
        return policy
