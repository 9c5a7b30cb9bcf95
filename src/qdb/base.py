# This file defines the quote store contract consumed by the listing engine.
# It exists so alternative storage backends can be swapped without touching request handling.
# The records here are plain dataclasses; backends own persistence and moderation state.
# Store failures are reported through a small exception hierarchy rooted at StoreError.

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol, runtime_checkable


class StoreError(Exception):
    """Raised when a store operation cannot be completed."""


class QuoteNotFoundError(StoreError):
    """Raised when a quote id is absent, invalid, or not yet approved."""

    def __init__(self, quote_id: int) -> None:
        self.quote_id = quote_id
        super().__init__(f"Quote {quote_id} not found")


@dataclass(frozen=True)
class SortRequest:
    by_rating: bool = False
    by_date: bool = True
    descending: bool = True
    page_size: int = 10
    offset: int = 0

    @property
    def sort_by(self) -> str:
        return "rating" if self.by_rating else "date"

    @property
    def sort_order(self) -> str:
        return "down" if self.descending else "up"


@dataclass(frozen=True)
class Quote:
    text: str
    submitted: datetime
    submitted_ip: str
    quote_id: int = 0
    rating: int = 0
    approved: bool = False


@runtime_checkable
class QuoteStore(Protocol):
    """Operations the listing engine and web shell need from a quote backend."""

    def size(self) -> int: ...

    def moderation_queue_size(self) -> int: ...

    def get_quote(self, quote_id: int) -> Quote: ...

    def get_bulk_quotes(self, request: SortRequest) -> tuple[list[Quote], int]: ...

    def new_quote(self, quote: Quote) -> None: ...


def compute_total_pages(*, total_count: int, page_size: int) -> int:
    """Compute deterministic total page count."""

    if total_count <= 0:
        return 0
    return ((total_count - 1) // page_size) + 1


def clamp_request(request: SortRequest) -> tuple[int, int]:
    """Return the (page_size, offset) a backend actually applies."""

    page_size = max(request.page_size, 1)
    offset = max(request.offset, 0)
    return page_size, offset


@runtime_checkable
class ModerationStore(QuoteStore, Protocol):
    """Store operations used by moderators to work the approval queue."""

    def pending_quotes(self) -> list[Quote]: ...

    def approve_quote(self, quote_id: int) -> None: ...

    def reject_quote(self, quote_id: int) -> None: ...
