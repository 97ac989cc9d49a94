"""FastAPI application for the partner desk service."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request

from partner_desk.clients.partner_sync_client import PartnerSyncClient
from partner_desk.logging import configure_logging, logging_context
from partner_desk.store import PartnerStore
from partner_desk.sync import PartnerSyncService
from partner_desk.utils import make_id

from .config import get_settings
from .routes.activity import router as activity_router
from .routes.dashboard import router as dashboard_router
from .routes.health import router as health_router
from .routes.partners import router as partners_router
from .routes.sync import router as sync_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the store at startup and, when configured, pull the remote partner snapshot."""
    settings = get_settings()
    configure_logging(json_output=settings.LOG_JSON, log_level=settings.LOG_LEVEL)

    logger.info("lifespan.startup", sync_enabled=bool(settings.PARTNER_SYNC_URL))

    store = PartnerStore()

    # Remote partner sync (optional, failure-isolated)
    client: PartnerSyncClient | None = None
    sync: PartnerSyncService | None = None
    if settings.PARTNER_SYNC_URL:
        client = PartnerSyncClient(
            base_url=settings.PARTNER_SYNC_URL,
            api_key=settings.PARTNER_SYNC_API_KEY,
            timeout_seconds=settings.PARTNER_SYNC_TIMEOUT_SECONDS,
        )
        sync = PartnerSyncService(store, client)
        outcome = await sync.refresh()
        if not outcome.success:
            logger.warning("lifespan.initial_sync_failed", error=str(outcome.error))

    # Store on app.state for request handlers
    app.state.store = store
    app.state.sync = sync

    logger.info("lifespan.ready", partner_count=len(store.partners))
    yield

    # Shutdown
    logger.info("lifespan.shutdown")
    if client is not None:
        await client.close()


app = FastAPI(
    title="partner-desk",
    description="Partner account management: partners, interactions, threads and dashboard rollups",
    lifespan=lifespan,
)


@app.middleware("http")
async def bind_request_id(request: Request, call_next):
    """Tag every log line emitted while serving a request with its request id."""
    request_id = request.headers.get("x-request-id") or make_id("req")
    with logging_context(request_id=request_id):
        response = await call_next(request)
    response.headers["x-request-id"] = request_id
    return response


app.include_router(health_router)
app.include_router(partners_router)
app.include_router(activity_router)
app.include_router(dashboard_router)
app.include_router(sync_router)
