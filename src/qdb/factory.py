# This file selects and builds the quote store backend from a connection URL.
# It exists so startup code and scripts resolve the backend the same way.

from __future__ import annotations

from src.qdb.base import ModerationStore
from src.qdb.memory_store import MemoryQuoteStore
from src.qdb.sql_store import SqlQuoteStore

MEMORY_STORE_URL = "memory://"


def build_store(store_url: str) -> ModerationStore:
    """Build a store for `store_url`; `memory://` keeps everything in process."""

    if store_url == MEMORY_STORE_URL:
        return MemoryQuoteStore()

    store = SqlQuoteStore(database_url=store_url)
    store.create_schema()
    return store
