"""Exception handlers mapping domain errors to HTTP responses.

Every error body has the shape ``{"message": ...}``.  Storage failures and
unexpected exceptions get a generic message; details go to the log only.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from collabdesk.domain.errors import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    StorageError,
    UnauthorizedError,
    UsernameTakenError,
)

logger = structlog.get_logger()

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again later."

STATUS_CODES: dict[type[Exception], int] = {
    UsernameTakenError: 409,
    InvalidInputError: 400,
    NotFoundError: 404,
    UnauthorizedError: 403,
    ConflictError: 400,
}


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain-error handlers on *app*."""

    async def domain_error(request: Request, exc: Exception) -> JSONResponse:
        status_code = next(
            code for cls, code in STATUS_CODES.items() if isinstance(exc, cls)
        )
        logger.info(
            "request_rejected",
            path=request.url.path,
            error=type(exc).__name__,
            status_code=status_code,
        )
        return JSONResponse(status_code=status_code, content={"message": str(exc)})

    async def storage_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error("storage_failure", path=request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"message": GENERIC_ERROR_MESSAGE})

    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
        return JSONResponse(status_code=500, content={"message": GENERIC_ERROR_MESSAGE})

    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    for cls in STATUS_CODES:
        app.add_exception_handler(cls, domain_error)
    app.add_exception_handler(StorageError, storage_error)
    app.add_exception_handler(StarletteHTTPException, http_error)
    app.add_exception_handler(Exception, unexpected_error)
