"""Health and readiness endpoints for container orchestration.

Provides two top-level routes:

- ``GET /health`` -- Liveness probe.  Returns 200 if the process is alive.
- ``GET /ready``  -- Readiness probe.  Returns 200 only when the database
  answers a trivial query.  The agent and the Gmail sink are reported but do
  not gate readiness, because both degrade gracefully.
"""

from __future__ import annotations

import asyncio
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from collabdesk.domain.errors import StorageError


def register_health_routes(app: FastAPI) -> None:
    """Register ``/health`` and ``/ready`` endpoints on *app*.

    Args:
        app: The FastAPI application instance.
    """

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Liveness probe -- always returns 200 if the process is running."""
        return {"status": "healthy"}

    @app.get("/ready")
    async def ready(request: Request) -> JSONResponse:
        """Readiness probe -- checks the database; reports degraded collaborators."""
        services: dict[str, Any] = request.app.state.services
        checks: dict[str, str] = {}

        store = services.get("store")
        if store is not None:
            try:
                await asyncio.to_thread(store.ping)
                checks["database"] = "ok"
            except StorageError:
                checks["database"] = "fail"
        else:
            checks["database"] = "fail"

        all_ok = all(v == "ok" for v in checks.values())

        checks["agent"] = "ok" if services.get("anthropic_client") is not None else "degraded"
        checks["gmail"] = "ok" if services.get("gmail_client") is not None else "degraded"

        status = "ready" if all_ok else "not_ready"
        code = 200 if all_ok else 503
        return JSONResponse(content={"status": status, "checks": checks}, status_code=code)
