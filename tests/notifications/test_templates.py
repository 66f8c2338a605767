"""Tests for status notification rendering."""

from __future__ import annotations

import pytest

from collabdesk.domain.types import InquiryStatus
from collabdesk.notifications.templates import SIGNATURE, TEMPLATES, render_notification


class TestTemplates:
    def test_one_template_per_notifiable_status(self) -> None:
        assert set(TEMPLATES) == {
            InquiryStatus.APPROVED,
            InquiryStatus.REJECTED,
            InquiryStatus.NEEDS_INFO,
        }

    @pytest.mark.parametrize(
        ("status", "subject"),
        [
            (InquiryStatus.APPROVED, "Great news! Your collaboration proposal has been approved"),
            (InquiryStatus.REJECTED, "Update on your collaboration proposal"),
            (
                InquiryStatus.NEEDS_INFO,
                "More information needed for your collaboration proposal",
            ),
        ],
    )
    def test_subjects(self, status: InquiryStatus, subject: str) -> None:
        assert render_notification("b@acme.com", "Alice", status).subject == subject


class TestRenderNotification:
    def test_rejection_with_feedback(self) -> None:
        outbound = render_notification(
            "brand@acme.com", "Alice Lee", InquiryStatus.REJECTED, "  Not a fit right now "
        )

        assert outbound.to == "brand@acme.com"
        assert "collaborating with Alice Lee" in outbound.body
        assert "Feedback:\nNot a fit right now" in outbound.body
        assert outbound.body.endswith(f"Best regards,\n{SIGNATURE}")
        assert "<strong>Alice Lee</strong>" in outbound.html_body
        assert "<strong>Feedback:</strong><br>Not a fit right now" in outbound.html_body

    def test_without_note_omits_label(self) -> None:
        outbound = render_notification("b@acme.com", "Alice", InquiryStatus.APPROVED)
        assert "Message:" not in outbound.body
        assert "Message:" not in outbound.html_body

    def test_blank_note_treated_as_missing(self) -> None:
        outbound = render_notification("b@acme.com", "Alice", InquiryStatus.NEEDS_INFO, "   ")
        assert "What they need:" not in outbound.body

    def test_html_is_escaped(self) -> None:
        outbound = render_notification(
            "b@acme.com", "<Alice>", InquiryStatus.NEEDS_INFO, "<script>alert(1)</script>"
        )
        assert "<script>" not in outbound.html_body
        assert "&lt;script&gt;" in outbound.html_body
        assert "&lt;Alice&gt;" in outbound.html_body
        assert "<script>alert(1)</script>" in outbound.body

    def test_pending_has_no_template(self) -> None:
        with pytest.raises(KeyError):
            render_notification("b@acme.com", "Alice", InquiryStatus.PENDING)
