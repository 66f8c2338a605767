"""Tests for header-based identity resolution."""

from __future__ import annotations

from fastapi import Depends, FastAPI
from fastapi.testclient import TestClient

from collabdesk.api.errors import register_exception_handlers
from collabdesk.api.identity import USER_ID_HEADER, HeaderIdentityProvider, current_influencer
from collabdesk.domain.models import Influencer
from collabdesk.state.store import CollabStore


def _make_app(store: CollabStore) -> FastAPI:
    app = FastAPI()
    app.state.services = {"identity_provider": HeaderIdentityProvider(store)}
    register_exception_handlers(app)

    @app.get("/me")
    async def me(influencer: Influencer = Depends(current_influencer)):
        return {"id": influencer.id}

    return app


class TestCurrentInfluencer:
    def test_resolves_header(self, store: CollabStore, influencer: Influencer) -> None:
        response = TestClient(_make_app(store)).get("/me", headers={USER_ID_HEADER: "inf-1"})
        assert response.status_code == 200
        assert response.json() == {"id": "inf-1"}

    def test_missing_header(self, store: CollabStore, influencer: Influencer) -> None:
        response = TestClient(_make_app(store)).get("/me")
        assert response.status_code == 401
        assert response.json() == {"message": "Not authenticated"}

    def test_blank_header(self, store: CollabStore, influencer: Influencer) -> None:
        response = TestClient(_make_app(store)).get("/me", headers={USER_ID_HEADER: "  "})
        assert response.status_code == 401

    def test_unknown_user(self, store: CollabStore) -> None:
        response = TestClient(_make_app(store)).get("/me", headers={USER_ID_HEADER: "ghost"})
        assert response.status_code == 401

    def test_dependency_override(self, store: CollabStore) -> None:
        app = _make_app(store)
        app.dependency_overrides[current_influencer] = lambda: Influencer(id="override")
        response = TestClient(app).get("/me")
        assert response.json() == {"id": "override"}
