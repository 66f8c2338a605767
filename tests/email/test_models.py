"""Tests for the outbound email model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from collabdesk.email.models import OutboundEmail


class TestOutboundEmail:
    def test_html_body_optional(self) -> None:
        outbound = OutboundEmail(to="brand@acme.com", subject="Hi", body="Body")
        assert outbound.html_body is None

    def test_frozen(self) -> None:
        outbound = OutboundEmail(to="brand@acme.com", subject="Hi", body="Body")
        with pytest.raises(ValidationError):
            outbound.subject = "Changed"  # type: ignore[misc]
