# This file builds response envelopes for the JSON quote endpoints in a consistent format.
# It exists so downstream clients always receive version metadata and request tracing fields.
# The helper returns a plain dictionary that the Pydantic response model validates at runtime.

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from src.quoteboard.schema_versions import build_version_fields


def utc_now() -> datetime:
    """Return timezone-aware UTC timestamp for response generation."""

    return datetime.now(tz=UTC)


def build_list_envelope(
    *,
    api_version_path: str,
    schema_version: str,
    request_id: str,
    data: list[dict[str, Any]],
    pagination: dict[str, Any],
) -> dict[str, Any]:
    """Build standard list response envelope."""

    return {
        **build_version_fields(api_version_path=api_version_path, schema_version=schema_version),
        "request_id": request_id,
        "generated_at": utc_now(),
        "data": data,
        "pagination": pagination,
    }
