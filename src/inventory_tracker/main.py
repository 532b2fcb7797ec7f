# src/inventory_tracker/main.py
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from inventory_tracker.api.dependencies import get_http_client
from inventory_tracker.api.v1.router import api_router
from inventory_tracker.core.config import get_settings
from inventory_tracker.core.logging_config import configure_logging
from inventory_tracker.core.metrics import REQUEST_COUNT
from inventory_tracker.core.rate_limit import limiter
from inventory_tracker.repositories.inventory_store import InventoryStore
from inventory_tracker.services.notification_service import NotificationService

settings = get_settings()
logger = logging.getLogger(__name__)


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        REQUEST_COUNT.labels(
            method=request.method,
            path=request.url.path,
            status_code=str(response.status_code),
        ).inc()
        return response


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # Startup: the store lives exactly as long as the application
    configure_logging(settings.log_level)
    store = InventoryStore(seed=settings.seed_examples)
    app.state.inventory_store = store

    client = get_http_client()
    notifications = None
    unsubscribe = None
    if settings.webhook_enabled:
        notifications = NotificationService(http_client=client, settings=settings)
        unsubscribe = store.subscribe(notifications.handle_event)

    logger.info("Inventory ready with %d products", len(store.list_products()))
    yield

    # Shutdown
    if unsubscribe is not None:
        unsubscribe()
    if notifications is not None:
        await notifications.aclose()
    await client.aclose()
    get_http_client.cache_clear()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Rate Limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)  # type: ignore[arg-type]

# Metrics Middleware
app.add_middleware(MetricsMiddleware)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["X-API-Key", "Content-Type"],
)

app.include_router(api_router)


@app.get("/healthz", tags=["Health"])
async def health_check() -> dict[str, str]:
    return {"status": "ok", "version": settings.app_version}


@app.get("/readyz", tags=["Health"])
async def readiness_check(request: Request) -> dict[str, str]:
    if getattr(request.app.state, "inventory_store", None) is None:
        return {"status": "starting"}
    return {"status": "ready"}


@app.get("/metrics", tags=["Monitoring"])
async def metrics_endpoint() -> Response:
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
