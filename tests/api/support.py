# This file provides shared helpers for board endpoint tests.
# It exists so tests can swap the quote store without touching real databases.
# The helpers build consistent config objects and scoped TestClient contexts.

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from fastapi.testclient import TestClient

from src.quoteboard.app import app
from src.quoteboard.board_config import BoardConfig
from src.quoteboard.dependencies import get_config, get_quote_store


def build_test_config() -> BoardConfig:
    """Create deterministic board config for tests."""

    return BoardConfig(
        board_name="Test Quote Board",
        api_version_path="/api/v1",
        schema_version="1.0.0",
        host="0.0.0.0",
        port=8080,
        environment="test",
        store_url="memory://",
        allowed_origins=[],
        app_version="0.1.0",
    )


@contextmanager
def api_test_client(
    *,
    config: BoardConfig | None = None,
    store: Any | None = None,
    raise_server_exceptions: bool = True,
) -> Iterator[TestClient]:
    """Yield a TestClient with scoped dependency overrides."""

    resolved_config = config or build_test_config()

    app.dependency_overrides[get_config] = lambda: resolved_config
    if store is not None:
        app.dependency_overrides[get_quote_store] = lambda: store

    try:
        with TestClient(app, raise_server_exceptions=raise_server_exceptions) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
