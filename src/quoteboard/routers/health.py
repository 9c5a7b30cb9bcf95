# This file defines liveness, readiness, and version endpoints for board operations.
# It exists so orchestration and monitoring systems can verify service health quickly.
# The bare /status check answers as long as the process is up; /ready also checks the store.

from __future__ import annotations

import logging
import subprocess
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from src.qdb.base import QuoteStore, StoreError
from src.quoteboard.board_config import BoardConfig
from src.quoteboard.dependencies import get_config, get_quote_store
from src.quoteboard.schema_versions import build_version_fields
from src.quoteboard.schemas.health_schemas import HealthResponse, ReadinessResponse, VersionResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])
ConfigDep = Annotated[BoardConfig, Depends(get_config)]
StoreDep = Annotated[QuoteStore, Depends(get_quote_store)]


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def _git_commit() -> str | None:
    try:
        completed = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            check=True,
            capture_output=True,
            text=True,
        )
        value = completed.stdout.strip()
        return value or None
    except Exception:
        return None


@router.get("/status", response_class=PlainTextResponse)
def status() -> str:
    return "Server OK"


@router.get("/health", response_model=HealthResponse)
def health(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        **build_version_fields(
            api_version_path=config.api_version_path,
            schema_version=config.schema_version,
        ),
        "request_id": request.state.request_id,
        "status": "ok",
        "environment": config.environment,
        "service_name": config.board_name,
        "timestamp": _utc_now(),
    }


@router.get("/ready", response_model=ReadinessResponse)
def ready(
    request: Request,
    config: ConfigDep,
    store: StoreDep,
) -> dict[str, object]:
    store_size: int | None = None
    queue_size: int | None = None
    try:
        store_size = store.size()
        queue_size = store.moderation_queue_size()
        store_reachable = True
    except StoreError:
        logger.warning("Quote store is not reachable", exc_info=True)
        store_reachable = False

    return {
        **build_version_fields(
            api_version_path=config.api_version_path,
            schema_version=config.schema_version,
        ),
        "request_id": request.state.request_id,
        "store_reachable": store_reachable,
        "store_size": store_size,
        "moderation_queue_size": queue_size,
        "ready": store_reachable,
        "timestamp": _utc_now(),
    }


@router.get("/version", response_model=VersionResponse)
def version(
    request: Request,
    config: ConfigDep,
) -> dict[str, object]:
    return {
        **build_version_fields(
            api_version_path=config.api_version_path,
            schema_version=config.schema_version,
        ),
        "request_id": request.state.request_id,
        "api_version_path": config.api_version_path,
        "app_version": config.app_version,
        "git_commit": _git_commit(),
        "project": config.board_name,
        "version": config.app_version,
        "timestamp": _utc_now(),
    }
