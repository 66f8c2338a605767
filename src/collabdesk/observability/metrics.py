"""Prometheus metrics instrumentation for the collaboration inbox.

Provides:
- ``setup_metrics(app)``: Attach prometheus-fastapi-instrumentator to a FastAPI app,
  exposing ``/metrics`` with HTTP request duration/count plus the business counters.
- ``INQUIRIES_SUBMITTED``: Counter of accepted business inquiries.
- ``CHATS_CLOSED``: Counter of closed chats, labelled by recommendation verdict.
- ``AGENT_FALLBACKS``: Counter of agent operations answered with fallback text.
- ``NOTIFICATIONS_FAILED``: Counter of notification deliveries that failed.

Business counters are updated where the event happens, never by polling the database.
"""

from __future__ import annotations

from fastapi import FastAPI
from prometheus_client import Counter
from prometheus_fastapi_instrumentator import Instrumentator

INQUIRIES_SUBMITTED: Counter = Counter(
    "collabdesk_inquiries_submitted_total",
    "Total number of business inquiries accepted",
)

CHATS_CLOSED: Counter = Counter(
    "collabdesk_chats_closed_total",
    "Total number of inquiry chats closed, by recommendation verdict",
    ["verdict"],
)

AGENT_FALLBACKS: Counter = Counter(
    "collabdesk_agent_fallbacks_total",
    "Agent operations that degraded to fallback text",
    ["operation"],
)

NOTIFICATIONS_FAILED: Counter = Counter(
    "collabdesk_notifications_failed_total",
    "Status notifications that could not be delivered",
)


def setup_metrics(app: FastAPI) -> None:
    """Instrument *app* with Prometheus HTTP metrics and expose ``/metrics``.

    Excludes health/ready/metrics endpoints from instrumentation to avoid
    noise in dashboards.

    Args:
        app: The FastAPI application to instrument.
    """
    Instrumentator(
        should_group_status_codes=True,
        should_ignore_untemplated=True,
        excluded_handlers=["/health", "/ready", "/metrics"],
    ).instrument(app).expose(app, include_in_schema=False, should_gzip=True)
