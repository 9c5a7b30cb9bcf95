"""
Store fixtures shared by unit and API tests.
They build seeded in-memory stores and small fakes for failure paths.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from src.qdb.base import Quote, SortRequest, StoreError
from src.qdb.memory_store import MemoryQuoteStore

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=UTC)


def make_quote(index: int, *, rating: int = 0, text: str | None = None) -> Quote:
    return Quote(
        text=text if text is not None else f"quote number {index}",
        submitted=BASE_TIME + timedelta(minutes=index),
        submitted_ip="127.0.0.1",
        rating=rating,
    )


def seeded_store(count: int, *, pending: int = 0) -> MemoryQuoteStore:
    """Store with `count` approved quotes (ids 1..count) and `pending` queued ones."""

    store = MemoryQuoteStore()
    for index in range(1, count + 1):
        # Ratings run opposite to submission order so the two sorts differ.
        store.add_approved(make_quote(index, rating=count - index))
    for index in range(pending):
        store.new_quote(make_quote(count + index + 1))
    return store


class FixedPagesStore:
    """Returns a canned bulk result so navigation math can be checked in isolation."""

    def __init__(self, *, total_pages: int, quotes: list[Quote] | None = None) -> None:
        self.total_pages = total_pages
        self.quotes = quotes or []
        self.last_request: SortRequest | None = None

    def size(self) -> int:
        return 42

    def moderation_queue_size(self) -> int:
        return 3

    def get_quote(self, quote_id: int) -> Quote:
        raise NotImplementedError

    def get_bulk_quotes(self, request: SortRequest) -> tuple[list[Quote], int]:
        self.last_request = request
        return list(self.quotes), self.total_pages

    def new_quote(self, quote: Quote) -> None:
        raise NotImplementedError


class RecordingStore(MemoryQuoteStore):
    """Memory store that remembers every submission it receives."""

    def __init__(self) -> None:
        super().__init__()
        self.submitted: list[Quote] = []

    def new_quote(self, quote: Quote) -> None:
        self.submitted.append(quote)
        super().new_quote(quote)


class FailingWriteStore(MemoryQuoteStore):
    """Memory store whose writes always fail."""

    def new_quote(self, quote: Quote) -> None:
        raise StoreError("disk is full")
