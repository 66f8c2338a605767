"""Fixed notification templates for influencer decisions.

One template per notifiable status.  Each renders a subject, a plain-text
body and an HTML body; the influencer's optional note is inserted under a
status-specific heading.  All interpolated values are HTML-escaped.
"""

from __future__ import annotations

from html import escape

from pydantic import BaseModel, ConfigDict

from collabdesk.domain.types import InquiryStatus
from collabdesk.email.models import OutboundEmail

SIGNATURE = "The CollabDesk Team"


class NotificationTemplate(BaseModel):
    """Text for one status notification.

    ``intro`` may use the ``{influencer}`` placeholder.
    """

    model_config = ConfigDict(frozen=True)

    subject: str
    heading: str
    intro: str
    note_label: str
    closing: str


TEMPLATES: dict[InquiryStatus, NotificationTemplate] = {
    InquiryStatus.APPROVED: NotificationTemplate(
        subject="Great news! Your collaboration proposal has been approved",
        heading="Your proposal has been approved!",
        intro="{influencer} has reviewed your collaboration proposal and approved it.",
        note_label="Message:",
        closing="They will be in touch with you soon to discuss next steps.",
    ),
    InquiryStatus.REJECTED: NotificationTemplate(
        subject="Update on your collaboration proposal",
        heading="Update on your proposal",
        intro=(
            "Thank you for your interest in collaborating with {influencer}. "
            "After careful consideration, they've decided not to move forward with "
            "this particular collaboration at this time."
        ),
        note_label="Feedback:",
        closing=(
            "We appreciate you reaching out and wish you the best with your "
            "future campaigns."
        ),
    ),
    InquiryStatus.NEEDS_INFO: NotificationTemplate(
        subject="More information needed for your collaboration proposal",
        heading="Additional information needed",
        intro=(
            "{influencer} has reviewed your collaboration proposal and needs some "
            "additional information before making a decision."
        ),
        note_label="What they need:",
        closing=(
            "Please reply to this email with the requested information, and "
            "they'll review your proposal again."
        ),
    ),
}


def render_notification(
    to: str,
    influencer_name: str,
    status: InquiryStatus,
    note: str | None = None,
) -> OutboundEmail:
    """Render the notification email for a status decision.

    Args:
        to: The business contact address.
        influencer_name: Display name of the deciding influencer.
        status: The new, non-pending inquiry status.
        note: Optional free-text message from the influencer.

    Returns:
        The ``OutboundEmail`` to deliver.

    Raises:
        KeyError: If *status* has no template (``pending``).
    """
    template = TEMPLATES[status]
    note = note.strip() if note else None

    text_parts = [
        "Hi there,",
        template.intro.replace("{influencer}", influencer_name),
    ]
    if note:
        text_parts.append(f"{template.note_label}\n{note}")
    text_parts += [template.closing, f"Best regards,\n{SIGNATURE}"]

    bold_name = f"<strong>{escape(influencer_name)}</strong>"
    html_parts = [
        f"<h2>{escape(template.heading)}</h2>",
        "<p>Hi there,</p>",
        f"<p>{escape(template.intro).replace('{influencer}', bold_name)}</p>",
    ]
    if note:
        html_parts.append(
            f"<p><strong>{escape(template.note_label)}</strong><br>{escape(note)}</p>"
        )
    html_parts += [
        f"<p>{escape(template.closing)}</p>",
        f"<p>Best regards,<br>{escape(SIGNATURE)}</p>",
    ]

    return OutboundEmail(
        to=to,
        subject=template.subject,
        body="\n\n".join(text_parts),
        html_body="\n".join(html_parts),
    )
