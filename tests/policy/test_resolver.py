"""Tests for effective-policy resolution."""

from __future__ import annotations

import sqlite3

import pytest

from collabdesk.domain.errors import StorageError
from collabdesk.domain.models import Influencer, PolicyInput
from collabdesk.policy.resolver import DEFAULT_POLICY, PolicyResolver, default_policy_for
from collabdesk.state.store import CollabStore


class TestDefaultPolicy:
    def test_default_values(self) -> None:
        assert DEFAULT_POLICY.content_preferences == "Various collaboration opportunities"
        assert DEFAULT_POLICY.minimum_rate == 500
        assert DEFAULT_POLICY.preferred_content_length == "Flexible"
        assert DEFAULT_POLICY.additional_guidelines is None

    def test_bound_to_influencer(self) -> None:
        assert default_policy_for("inf-9").influencer_id == "inf-9"


class TestPolicyResolver:
    @pytest.mark.anyio()
    async def test_missing_policy_resolves_to_default_without_writing(
        self, store: CollabStore, influencer: Influencer
    ) -> None:
        resolver = PolicyResolver(store)

        policy = await resolver.resolve("inf-1")

        assert policy == default_policy_for("inf-1")
        assert store.get_policy("inf-1") is None

    @pytest.mark.anyio()
    async def test_stored_policy_wins(
        self, store: CollabStore, influencer: Influencer, policy_input: PolicyInput
    ) -> None:
        stored = store.upsert_policy("inf-1", policy_input)

        policy = await PolicyResolver(store).resolve("inf-1")

        assert policy == stored
        assert policy.minimum_rate == 1000

    @pytest.mark.anyio()
    async def test_storage_failure_propagates(self, conn: sqlite3.Connection) -> None:
        store = CollabStore(conn)
        conn.execute("DROP TABLE negotiation_policies")
        with pytest.raises(StorageError):
            await PolicyResolver(store).resolve("inf-1")
