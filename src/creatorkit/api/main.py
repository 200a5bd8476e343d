"""FastAPI application for the creatorkit API."""

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import RequestResponseEndpoint
from starlette.responses import Response

from creatorkit import __version__
from creatorkit.api.exception_handlers import register_exception_handlers
from creatorkit.api.middleware import RequestIdMiddleware
from creatorkit.api.routers import calculators, health, tools
from creatorkit.config.database import db_manager
from creatorkit.config.log_config import configure_logging
from creatorkit.config.settings import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    # Startup
    configure_logging(settings.log_level)
    await db_manager.create_tables()
    logger.info(
        "creatorkit API %s started (daily quota %d, fetch timeout %.1fs)",
        __version__,
        settings.daily_quota_limit,
        settings.fetch_timeout_seconds,
    )
    yield
    # Shutdown
    await db_manager.close()


app = FastAPI(
    title=f"{settings.app_name} API",
    description="Free YouTube creator tools: channel lookups, monetization checks, tags and revenue estimates",
    version=__version__,
    lifespan=lifespan,
)


def _get_client_ip(request: Request) -> str:
    """Extract client IP from request, handling proxied requests."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        # First entry is the original client
        return forwarded_for.split(",")[0].strip()

    if request.client:
        return request.client.host
    return "unknown"


@app.middleware("http")
async def log_requests(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """
    Middleware to log incoming requests and outgoing responses.

    Logs request method, path, and client IP at INFO level.
    Logs response status code and timing with appropriate log level:
    - INFO for 2xx/3xx responses
    - WARNING for 4xx responses
    - ERROR for 5xx responses
    """
    start_time = time.perf_counter()

    method = request.method
    path = request.url.path
    logger.info("Request: %s %s from %s", method, path, _get_client_ip(request))

    response = await call_next(request)

    duration = time.perf_counter() - start_time
    status_code = response.status_code

    if status_code >= 500:
        log_level = logging.ERROR
    elif status_code >= 400:
        log_level = logging.WARNING
    else:
        log_level = logging.INFO

    logger.log(
        log_level,
        "Response: %s %s - %d (%.3fs)",
        method,
        path,
        status_code,
        duration,
    )

    return response


# Added last so it runs first: IDs exist before request logging
app.add_middleware(RequestIdMiddleware)

# Outermost, so preflight requests are answered before anything else runs
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Client-Info", "Apikey", "X-Request-ID"],
    expose_headers=["X-Request-ID"],
)

register_exception_handlers(app)

# Mount routers under /api/v1 prefix
app.include_router(health.router, prefix="/api/v1", tags=["health"])
app.include_router(tools.router, prefix="/api/v1", tags=["tools"])
app.include_router(calculators.router, prefix="/api/v1", tags=["calculators"])
