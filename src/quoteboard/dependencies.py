# This file provides dependency factories for FastAPI routes and middleware.
# It exists so the quote store is built once at first use and shared through dependency injection.
# Routes never reach for a module-level store; tests swap it out with dependency overrides.

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from fastapi.templating import Jinja2Templates

from src.qdb.base import QuoteStore
from src.qdb.factory import build_store
from src.quoteboard.board_config import BoardConfig, get_board_config
from src.quoteboard.text_format import render_quote_text

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@lru_cache(maxsize=1)
def get_quote_store() -> QuoteStore:
    config = get_board_config()
    return build_store(config.store_url)


@lru_cache(maxsize=1)
def get_templates() -> Jinja2Templates:
    templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    templates.env.filters["quote_text"] = render_quote_text
    return templates


def get_config() -> BoardConfig:
    return get_board_config()
