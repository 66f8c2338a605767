"""Tests for the domain-error to HTTP response mapping."""

from __future__ import annotations

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from collabdesk.api.errors import GENERIC_ERROR_MESSAGE, register_exception_handlers
from collabdesk.domain.errors import (
    ChatClosedError,
    ConflictError,
    InvalidInputError,
    NotFoundError,
    StorageError,
    UnauthorizedError,
    UsernameTakenError,
)


def _make_app(exc: Exception) -> FastAPI:
    """Create an app whose only route raises *exc*."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    async def boom():
        raise exc

    return app


@pytest.mark.parametrize(
    ("exc", "status_code", "message"),
    [
        (InvalidInputError("Message content is required"), 400, "Message content is required"),
        (NotFoundError("inquiry", "x"), 404, "Inquiry not found"),
        (UnauthorizedError(), 403, "Unauthorized"),
        (UsernameTakenError(), 409, "Username already taken"),
        (ConflictError("Inquiry is already closed"), 400, "Inquiry is already closed"),
        (ChatClosedError("post_message"), 400, "This conversation has been closed"),
        (HTTPException(status_code=401, detail="Not authenticated"), 401, "Not authenticated"),
    ],
)
def test_domain_errors_map_to_status(exc: Exception, status_code: int, message: str) -> None:
    response = TestClient(_make_app(exc)).get("/boom")
    assert response.status_code == status_code
    assert response.json() == {"message": message}


def test_storage_error_is_generic() -> None:
    response = TestClient(_make_app(StorageError("disk I/O error at /var/db"))).get("/boom")
    assert response.status_code == 500
    assert response.json() == {"message": GENERIC_ERROR_MESSAGE}


def test_unexpected_error_is_generic() -> None:
    client = TestClient(_make_app(RuntimeError("secret internals")), raise_server_exceptions=False)
    response = client.get("/boom")
    assert response.status_code == 500
    assert response.json() == {"message": GENERIC_ERROR_MESSAGE}


def test_unknown_route_uses_message_shape() -> None:
    response = TestClient(_make_app(RuntimeError())).get("/nope")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}
