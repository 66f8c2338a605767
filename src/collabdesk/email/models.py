"""Pydantic v2 models for outbound notification email."""

from pydantic import BaseModel, ConfigDict


class OutboundEmail(BaseModel):
    """An email to a business contact.

    ``html_body`` is sent as the rich alternative; ``body`` is the plain-text
    part every client can display.
    """

    model_config = ConfigDict(frozen=True)

    to: str
    subject: str
    body: str
    html_body: str | None = None
