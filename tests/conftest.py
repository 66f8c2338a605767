"""Shared pytest fixtures for the collaboration inbox test suite."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator

import pytest

from collabdesk.domain.models import (
    Influencer,
    InquiryFacts,
    NegotiationPolicy,
    NewInquiry,
    PolicyInput,
)
from collabdesk.domain.types import Language
from collabdesk.state.schema import init_db
from collabdesk.state.store import CollabStore


@pytest.fixture
def anyio_backend() -> str:
    """Run anyio-marked tests on asyncio only (the service uses asyncio locks)."""
    return "asyncio"


@pytest.fixture
def conn() -> Iterator[sqlite3.Connection]:
    """In-memory SQLite connection with all tables created."""
    connection = init_db(":memory:")
    yield connection
    connection.close()


@pytest.fixture
def store(conn: sqlite3.Connection) -> CollabStore:
    """CollabStore backed by the in-memory connection."""
    return CollabStore(conn)


@pytest.fixture
def influencer(store: CollabStore) -> Influencer:
    """A stored English-speaking influencer."""
    return store.upsert_influencer(
        Influencer(
            id="inf-1",
            username="alice",
            email="alice@example.com",
            first_name="Alice",
            last_name="Lee",
            language=Language.EN,
        )
    )


@pytest.fixture
def zh_influencer(store: CollabStore) -> Influencer:
    """A stored influencer who prefers Chinese."""
    return store.upsert_influencer(
        Influencer(id="inf-zh", username="mei", first_name="Mei", language=Language.ZH)
    )


@pytest.fixture
def policy_input() -> PolicyInput:
    """Policy fields with a 1000 floor and a gambling exclusion."""
    return PolicyInput(
        content_preferences="Fitness and healthy food. Will not promote gambling or vaping.",
        minimum_rate=1000,
        preferred_content_length="30-60 seconds",
        additional_guidelines="No early-morning shoots",
    )


@pytest.fixture
def sample_policy(policy_input: PolicyInput) -> NegotiationPolicy:
    """A NegotiationPolicy bound to inf-1."""
    return NegotiationPolicy(influencer_id="inf-1", **policy_input.model_dump())


@pytest.fixture
def sample_facts() -> InquiryFacts:
    """Inquiry facts with a low offer."""
    return InquiryFacts(
        business_email="brand@acme.com",
        message="We'd love a reel about our protein bars.",
        price=100,
        company_info="Acme Foods",
    )


@pytest.fixture
def new_inquiry() -> NewInquiry:
    """A valid business submission to inf-1."""
    return NewInquiry(
        influencer_id="inf-1",
        business_email="brand@acme.com",
        message="We'd love a reel about our protein bars.",
        price=100,
        company_info="Acme Foods",
    )
