"""Negotiation policy resolution."""

from collabdesk.policy.resolver import DEFAULT_POLICY, PolicyResolver, default_policy_for

__all__ = [
    "DEFAULT_POLICY",
    "PolicyResolver",
    "default_policy_for",
]
