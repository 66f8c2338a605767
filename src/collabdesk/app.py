"""Application entry point for the collaboration inbox API.

Configures:
- **structlog** with JSON rendering (production) or colored console (development)
- **Sentry** error reporting through the structlog processor chain
- **Prometheus** HTTP and business metrics on ``/metrics``
- The SQLite store, negotiation agent, and Gmail notification sink
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

import structlog
import uvicorn
from fastapi import FastAPI

from collabdesk.api.errors import register_exception_handlers
from collabdesk.api.identity import HeaderIdentityProvider
from collabdesk.api.routes import router as api_router
from collabdesk.config import Settings, get_settings, validate_credentials
from collabdesk.domain.types import Language
from collabdesk.health import register_health_routes
from collabdesk.inquiries.service import InquiryService
from collabdesk.llm.agent import NegotiationAgent
from collabdesk.notifications.background import BackgroundTasks
from collabdesk.notifications.dispatcher import NotificationDispatcher
from collabdesk.observability.metrics import setup_metrics
from collabdesk.observability.middleware import RequestIdMiddleware
from collabdesk.observability.sentry import get_sentry_processor, init_sentry
from collabdesk.policy.resolver import PolicyResolver
from collabdesk.state.schema import close_db, init_db
from collabdesk.state.store import CollabStore

logger = structlog.get_logger()


def configure_logging(production: bool = False, sentry_enabled: bool = False) -> None:
    """Configure structlog for production (JSON) or development (console).

    Production mode (*production=True*): JSON rendering at INFO level.
    Development mode: colored console rendering at DEBUG level.

    Args:
        production: Enable production mode if ``True``.
        sentry_enabled: Insert the Sentry processor before the renderer.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if sentry_enabled:
        shared_processors.append(get_sentry_processor())

    if production:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        log_level = logging.INFO
    else:
        renderer = structlog.dev.ConsoleRenderer()
        log_level = logging.DEBUG

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service="collabdesk")


def initialize_services(settings: Settings | None = None) -> dict[str, Any]:
    """Set up all shared services for the application.

    Opens the SQLite database, builds the Anthropic client (if an API key is
    set), the Gmail client (if a token is present), the negotiation agent,
    the notification dispatcher, and the ``InquiryService`` that ties them
    together.  Missing credentials degrade the matching collaborator rather
    than failing startup.

    Args:
        settings: Application settings.  If ``None``, ``get_settings()`` is used.

    Returns:
        A dict of initialized service instances keyed by name.
    """
    if settings is None:
        settings = get_settings()

    services: dict[str, Any] = {"_settings": settings}

    # a. SQLite store
    db_path = settings.database_path
    if str(db_path) != ":memory:":
        db_path.parent.mkdir(parents=True, exist_ok=True)
    conn = init_db(db_path)
    store = CollabStore(conn)
    services["db_conn"] = conn
    services["store"] = store

    # b. Anthropic client (if anthropic_api_key is set)
    anthropic_client = None
    api_key = settings.anthropic_api_key.get_secret_value()
    if api_key:
        try:
            from collabdesk.llm.client import get_anthropic_client

            anthropic_client = get_anthropic_client(
                api_key=api_key,
                timeout=settings.llm_timeout_seconds,
            )
            logger.info("Anthropic client initialized", model=settings.agent_model)
        except Exception:
            logger.warning("Failed to initialize Anthropic client", exc_info=True)
    else:
        logger.info("ANTHROPIC_API_KEY not set, agent will answer with fallback text")
    services["anthropic_client"] = anthropic_client

    # c. GmailClient (if gmail token file exists)
    gmail_client = None
    if settings.gmail_token_path.exists():
        try:
            from collabdesk.auth.credentials import get_gmail_credentials, get_gmail_service
            from collabdesk.email.client import GmailClient

            credentials = get_gmail_credentials(
                token_path=settings.gmail_token_path,
                credentials_path=settings.gmail_credentials_path,
                interactive=False,
            )
            gmail_client = GmailClient(
                get_gmail_service(credentials), settings.notification_from_email
            )
            logger.info("GmailClient initialized")
        except Exception:
            logger.warning("Failed to initialize GmailClient", exc_info=True)
    else:
        logger.info("Gmail token file not found, notifications will be logged only")
    services["gmail_client"] = gmail_client

    # d. Core collaborators
    background_tasks = BackgroundTasks()
    services["background_tasks"] = background_tasks
    services["identity_provider"] = HeaderIdentityProvider(store)
    services["inquiry_service"] = InquiryService(
        store=store,
        agent=NegotiationAgent(anthropic_client, model=settings.agent_model),
        resolver=PolicyResolver(store),
        dispatcher=NotificationDispatcher(gmail_client),
        background=background_tasks,
        default_language=Language(settings.default_language),
    )

    return services


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Lifespan context manager for FastAPI startup and shutdown.

    On shutdown: waits for pending notifications, then closes the database.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application.
    """
    services = app.state.services
    logger.info("FastAPI application starting")
    yield
    background_tasks = services.get("background_tasks")
    if background_tasks is not None:
        await background_tasks.drain()
    conn = services.get("db_conn")
    if conn is not None:
        close_db(conn)
        logger.info("Database connection closed")


def create_app(services: dict[str, Any]) -> FastAPI:
    """Create the FastAPI app with lifespan, API router, health, and metrics.

    Args:
        services: The initialized services dict from ``initialize_services``.

    Returns:
        The configured FastAPI application.
    """
    fastapi_app = FastAPI(title="CollabDesk", lifespan=lifespan)
    fastapi_app.state.services = services
    fastapi_app.state.settings = services.get("_settings") or get_settings()
    fastapi_app.add_middleware(RequestIdMiddleware)
    register_exception_handlers(fastapi_app)
    fastapi_app.include_router(api_router)
    register_health_routes(fastapi_app)
    setup_metrics(fastapi_app)
    return fastapi_app


async def main() -> None:
    """Main entry point.

    1. Load settings, initialize Sentry, configure logging
    2. Validate credentials
    3. Initialize services and create the FastAPI app
    4. Serve with uvicorn until shutdown
    """
    settings = get_settings()
    sentry_enabled = init_sentry(
        settings.sentry_dsn.get_secret_value(),
        environment="production" if settings.production else "development",
    )
    configure_logging(production=settings.production, sentry_enabled=sentry_enabled)
    logger.info("Application starting")

    validate_credentials(settings)

    services = initialize_services(settings)
    fastapi_app = create_app(services)

    config = uvicorn.Config(
        fastapi_app,
        host="0.0.0.0",
        port=settings.port,
        log_level="info",
    )
    server = uvicorn.Server(config)
    await server.serve()


def run() -> None:
    """Console-script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
