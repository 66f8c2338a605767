"""Tests for CollabStore CRUD operations on an in-memory database."""

from __future__ import annotations

import sqlite3
from unittest.mock import MagicMock

import pytest

from collabdesk.domain.errors import StorageError, UsernameTakenError
from collabdesk.domain.models import Influencer, NewInquiry, PolicyInput
from collabdesk.domain.types import InquiryStatus, Language, MessageRole
from collabdesk.state.schema import init_db
from collabdesk.state.store import CollabStore


class TestSchema:
    """init_db creates every table the store relies on."""

    def test_tables_exist(self, conn: sqlite3.Connection) -> None:
        names = {
            row[0]
            for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")
        }
        assert {"influencers", "negotiation_policies", "inquiries", "messages"} <= names

    def test_init_db_is_idempotent(self, tmp_path) -> None:
        path = tmp_path / "collab.db"
        init_db(path).close()
        conn = init_db(path)
        conn.close()


class TestInfluencers:
    def test_upsert_and_get(self, store: CollabStore, influencer: Influencer) -> None:
        loaded = store.get_influencer("inf-1")
        assert loaded == influencer
        assert loaded.language == Language.EN

    def test_upsert_updates_existing(self, store: CollabStore, influencer: Influencer) -> None:
        store.upsert_influencer(influencer.model_copy(update={"first_name": "Alicia"}))
        assert store.get_influencer("inf-1").first_name == "Alicia"

    def test_get_unknown_returns_none(self, store: CollabStore) -> None:
        assert store.get_influencer("missing") is None

    def test_get_by_username(self, store: CollabStore, influencer: Influencer) -> None:
        assert store.get_influencer_by_username("alice").id == "inf-1"
        assert store.get_influencer_by_username("bob") is None

    def test_update_username_conflict(
        self, store: CollabStore, influencer: Influencer, zh_influencer: Influencer
    ) -> None:
        with pytest.raises(UsernameTakenError):
            store.update_username("inf-zh", "alice")
        assert store.get_influencer("inf-zh").username == "mei"

    def test_update_language(self, store: CollabStore, influencer: Influencer) -> None:
        updated = store.update_language("inf-1", Language.ZH)
        assert updated.language == Language.ZH

    def test_update_unknown_returns_none(self, store: CollabStore) -> None:
        assert store.update_language("missing", Language.ZH) is None


class TestPolicies:
    def test_get_missing_policy(self, store: CollabStore, influencer: Influencer) -> None:
        assert store.get_policy("inf-1") is None

    def test_upsert_creates_then_replaces(
        self, store: CollabStore, influencer: Influencer, policy_input: PolicyInput
    ) -> None:
        first = store.upsert_policy("inf-1", policy_input)
        assert first.minimum_rate == 1000

        second = store.upsert_policy(
            "inf-1", policy_input.model_copy(update={"minimum_rate": 1500})
        )
        assert second.minimum_rate == 1500
        assert second.created_at == first.created_at

        count = store._conn.execute("SELECT COUNT(*) FROM negotiation_policies").fetchone()[0]
        assert count == 1

    def test_policy_requires_known_influencer(
        self, store: CollabStore, policy_input: PolicyInput
    ) -> None:
        with pytest.raises(StorageError):
            store.upsert_policy("ghost", policy_input)


class TestInquiries:
    def test_create_defaults(
        self, store: CollabStore, influencer: Influencer, new_inquiry: NewInquiry
    ) -> None:
        inquiry = store.create_inquiry(new_inquiry)
        assert inquiry.status == InquiryStatus.PENDING
        assert inquiry.chat_active is True
        assert inquiry.ai_response is None
        assert inquiry.ai_recommendation is None
        assert inquiry.price == 100
        assert store.get_inquiry(inquiry.id) == inquiry

    def test_create_for_unknown_influencer_fails(
        self, store: CollabStore, new_inquiry: NewInquiry
    ) -> None:
        with pytest.raises(StorageError):
            store.create_inquiry(new_inquiry)

    def test_list_newest_first(
        self, store: CollabStore, influencer: Influencer, new_inquiry: NewInquiry
    ) -> None:
        first = store.create_inquiry(new_inquiry)
        second = store.create_inquiry(new_inquiry)
        store._conn.execute(
            "UPDATE inquiries SET created_at = ? WHERE id = ?",
            ("2025-01-01T00:00:00.000000+00:00", first.id),
        )
        listed = store.list_inquiries_by_influencer("inf-1")
        assert [i.id for i in listed] == [second.id, first.id]

    def test_set_first_response(
        self, store: CollabStore, influencer: Influencer, new_inquiry: NewInquiry
    ) -> None:
        inquiry = store.create_inquiry(new_inquiry)
        updated = store.set_first_response(inquiry.id, "Thanks for reaching out!")
        assert updated.ai_response == "Thanks for reaching out!"

    def test_status_update_keeps_chat_state(
        self, store: CollabStore, influencer: Influencer, new_inquiry: NewInquiry
    ) -> None:
        inquiry = store.create_inquiry(new_inquiry)
        updated = store.update_inquiry_status(inquiry.id, InquiryStatus.APPROVED)
        assert updated.status == InquiryStatus.APPROVED
        assert updated.chat_active is True

    def test_close_chat_only_once(
        self, store: CollabStore, influencer: Influencer, new_inquiry: NewInquiry
    ) -> None:
        inquiry = store.create_inquiry(new_inquiry)
        closed = store.close_inquiry_chat(inquiry.id, "**APPROVE**")
        assert closed.chat_active is False
        assert closed.ai_recommendation == "**APPROVE**"

        assert store.close_inquiry_chat(inquiry.id, "**REJECT**") is None
        assert store.get_inquiry(inquiry.id).ai_recommendation == "**APPROVE**"

    def test_delete_cascades_messages(
        self, store: CollabStore, influencer: Influencer, new_inquiry: NewInquiry
    ) -> None:
        inquiry = store.create_inquiry(new_inquiry)
        store.append_message(inquiry.id, MessageRole.ASSISTANT, "Hi")
        assert store.delete_inquiry(inquiry.id) is True
        assert store.get_inquiry(inquiry.id) is None
        assert store.list_messages(inquiry.id) == []
        assert store.delete_inquiry(inquiry.id) is False


class TestMessages:
    def test_append_and_list_in_order(
        self, store: CollabStore, influencer: Influencer, new_inquiry: NewInquiry
    ) -> None:
        inquiry = store.create_inquiry(new_inquiry)
        for index in range(5):
            role = MessageRole.USER if index % 2 else MessageRole.ASSISTANT
            store.append_message(inquiry.id, role, f"message {index}")

        messages = store.list_messages(inquiry.id)
        assert [m.content for m in messages] == [f"message {i}" for i in range(5)]
        assert messages[0].role == MessageRole.ASSISTANT

    def test_append_to_unknown_inquiry_fails(self, store: CollabStore) -> None:
        with pytest.raises(StorageError):
            store.append_message("missing", MessageRole.USER, "Hi")

    def test_ping(self, store: CollabStore) -> None:
        store.ping()

    def test_ping_wraps_driver_errors(self) -> None:
        conn = MagicMock()
        conn.execute.side_effect = sqlite3.OperationalError("disk I/O error")
        store = CollabStore(conn)
        with pytest.raises(StorageError):
            store.ping()
