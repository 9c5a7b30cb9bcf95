# This file builds the FastAPI application and registers all board routers.
# It exists so startup behavior, middleware, and error handling are configured in one place.
# The app adds request IDs, timing headers, and Prometheus request metrics for operations visibility.
# The quote store itself is not created here; routes receive it through dependencies.

from __future__ import annotations

import logging
import time
import uuid

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest
from starlette.middleware.base import RequestResponseEndpoint

from src.common.logging import configure_logging
from src.qdb.base import StoreError
from src.quoteboard.board_config import get_board_config
from src.quoteboard.dependencies import get_quote_store
from src.quoteboard.error_handlers import register_error_handlers
from src.quoteboard.routers.board import router as board_router
from src.quoteboard.routers.health import router as health_router
from src.quoteboard.routers.quotes_api import router as quotes_api_router

logger = logging.getLogger(__name__)

BOARD_HTTP_REQUESTS_TOTAL = Counter(
    "quoteboard_http_requests_total",
    "Total number of HTTP requests processed by the quote board.",
    ["method", "path", "status_code"],
)
BOARD_HTTP_REQUEST_DURATION_SECONDS = Histogram(
    "quoteboard_http_request_duration_seconds",
    "Quote board request duration in seconds.",
    ["method", "path"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1, 2.5, 5, 10),
)
BOARD_HTTP_INFLIGHT_REQUESTS = Gauge(
    "quoteboard_http_inflight_requests",
    "Number of quote board requests currently being processed.",
    ["method", "path"],
)


def create_app() -> FastAPI:
    """Create configured FastAPI application instance."""

    configure_logging()
    config = get_board_config()

    app = FastAPI(
        title=config.board_name,
        description="Community quote board: browse, view, and submit quotes for moderation.",
        version=config.app_version,
        openapi_tags=[
            {"name": "board", "description": "HTML pages for browsing and submitting quotes."},
            {"name": "quotes", "description": "JSON quote listings with navigation state."},
            {"name": "health", "description": "Service liveness, readiness, and version metadata."},
        ],
    )

    if config.allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def request_context_middleware(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
        request.state.request_id = request_id

        method_label = request.method
        path_label = request.url.path
        started = time.perf_counter()
        status_code = 500
        BOARD_HTTP_INFLIGHT_REQUESTS.labels(method=method_label, path=path_label).inc()
        try:
            response: Response = await call_next(request)
            status_code = response.status_code
            duration_ms = (time.perf_counter() - started) * 1000.0

            response.headers["x-request-id"] = request_id
            response.headers["x-response-time-ms"] = f"{duration_ms:.2f}"
            return response
        finally:
            duration_s = time.perf_counter() - started
            BOARD_HTTP_REQUESTS_TOTAL.labels(
                method=method_label,
                path=path_label,
                status_code=str(status_code),
            ).inc()
            BOARD_HTTP_REQUEST_DURATION_SECONDS.labels(
                method=method_label,
                path=path_label,
            ).observe(duration_s)
            BOARD_HTTP_INFLIGHT_REQUESTS.labels(method=method_label, path=path_label).dec()

    @app.get("/metrics", include_in_schema=False)
    def metrics() -> Response:
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.on_event("startup")
    def startup_checks() -> None:
        try:
            store = get_quote_store()
            app.state.store_size_at_startup = store.size()
            logger.info("Quote store ready with %s quotes", app.state.store_size_at_startup)
        except StoreError:
            logger.exception("Quote store unavailable at startup")
            app.state.store_size_at_startup = None

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(board_router)
    app.include_router(quotes_api_router, prefix=config.api_version_path)

    return app


app = create_app()
