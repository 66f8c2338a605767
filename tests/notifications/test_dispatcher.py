"""Tests for NotificationDispatcher with a mocked Gmail sink."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from prometheus_client import REGISTRY

from collabdesk.domain.types import InquiryStatus
from collabdesk.notifications.dispatcher import NotificationDispatcher


def _make_gmail(from_email: str = "team@collabdesk.test") -> MagicMock:
    gmail = MagicMock()
    gmail.from_email = from_email
    gmail.send.return_value = {"id": "gmail-1"}
    return gmail


def _failed_count() -> float:
    return REGISTRY.get_sample_value("collabdesk_notifications_failed_total") or 0.0


class TestNotify:
    @pytest.mark.anyio()
    async def test_sends_rendered_email(self) -> None:
        gmail = _make_gmail()

        await NotificationDispatcher(gmail).notify(
            "brand@acme.com", "Alice", InquiryStatus.APPROVED, "Let's do it"
        )

        gmail.send.assert_called_once()
        outbound = gmail.send.call_args.args[0]
        assert outbound.to == "brand@acme.com"
        assert outbound.subject.startswith("Great news!")
        assert "Let's do it" in outbound.body

    @pytest.mark.anyio()
    async def test_pending_is_skipped(self) -> None:
        gmail = _make_gmail()
        await NotificationDispatcher(gmail).notify("b@acme.com", "Alice", InquiryStatus.PENDING)
        gmail.send.assert_not_called()

    @pytest.mark.anyio()
    async def test_no_sender_configured(self) -> None:
        await NotificationDispatcher(None).notify("b@acme.com", "Alice", InquiryStatus.REJECTED)

    @pytest.mark.anyio()
    async def test_empty_from_address_is_skipped(self) -> None:
        gmail = _make_gmail(from_email="")
        await NotificationDispatcher(gmail).notify("b@acme.com", "Alice", InquiryStatus.REJECTED)
        gmail.send.assert_not_called()

    @pytest.mark.anyio()
    async def test_delivery_failure_is_swallowed_and_counted(self) -> None:
        gmail = _make_gmail()
        gmail.send.side_effect = RuntimeError("quota exceeded")
        before = _failed_count()

        await NotificationDispatcher(gmail).notify("b@acme.com", "Alice", InquiryStatus.REJECTED)

        assert _failed_count() == before + 1
