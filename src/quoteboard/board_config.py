# This file defines runtime settings for the quote board web layer in one place.
# It exists so versioning and store selection can be configured without code edits.
# The config loader reads environment variables and applies safe defaults for local development.
# It also validates the version path and port before the app starts serving.

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator


class BoardConfig(BaseModel):
    """Typed quote board runtime configuration."""

    model_config = ConfigDict(extra="ignore")

    board_name: str = "Quote Board"
    api_version_path: str = "/api/v1"
    schema_version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8080
    environment: str = "local"
    store_url: str
    allowed_origins: list[str] = Field(default_factory=list)
    app_version: str = "0.1.0"

    @field_validator("api_version_path")
    @classmethod
    def validate_api_version_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("api_version_path must start with '/'.")
        parts = [part for part in value.split("/") if part]
        if len(parts) < 2 or parts[-1].startswith("v") is False:
            raise ValueError("api_version_path must look like '/api/v1'.")
        return value.rstrip("/")

    @field_validator("port")
    @classmethod
    def validate_positive_ints(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("Value must be greater than 0.")
        return value


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_list(name: str, default: list[str] | None = None) -> list[str]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return list(default or [])
    return [item.strip() for item in raw.split(",") if item.strip()]


def load_board_config(*, load_env: bool = True) -> BoardConfig:
    """Load board configuration from `.env` and process environment."""

    if load_env:
        load_dotenv()

    config_values: dict[str, object] = {
        "board_name": os.getenv("QUOTEBOARD_NAME", "Quote Board"),
        "api_version_path": os.getenv("QUOTEBOARD_API_VERSION_PATH", "/api/v1"),
        "schema_version": os.getenv("QUOTEBOARD_SCHEMA_VERSION", "1.0.0"),
        "host": os.getenv("QUOTEBOARD_HOST", "0.0.0.0"),
        "port": _env_int("QUOTEBOARD_PORT", 8080),
        "environment": os.getenv("ENV", "local"),
        "store_url": os.getenv("QUOTEBOARD_STORE_URL", ""),
        "allowed_origins": _env_list("QUOTEBOARD_ALLOWED_ORIGINS", []),
        "app_version": os.getenv("APP_VERSION", "0.1.0"),
    }
    if not config_values["store_url"]:
        raise RuntimeError("QUOTEBOARD_STORE_URL is required for board startup.")

    return BoardConfig.model_validate(config_values)


@lru_cache(maxsize=1)
def get_board_config() -> BoardConfig:
    """Cached accessor for board config."""

    return load_board_config()
