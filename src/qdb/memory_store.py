# This file implements an in-process quote store backed by a dictionary.
# It exists for local development and tests where a database would only add setup noise.
# All state is guarded by one lock so concurrent requests never observe partial writes.
# Ordering and clamping rules match the SQL backend so either can serve the board.

from __future__ import annotations

import logging
import threading
from dataclasses import replace

from src.qdb.base import (
    Quote,
    QuoteNotFoundError,
    SortRequest,
    clamp_request,
    compute_total_pages,
)

logger = logging.getLogger(__name__)


class MemoryQuoteStore:
    """Thread-safe quote store kept entirely in memory."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._quotes: dict[int, Quote] = {}
        self._next_id = 1

    def size(self) -> int:
        with self._lock:
            return sum(1 for quote in self._quotes.values() if quote.approved)

    def moderation_queue_size(self) -> int:
        with self._lock:
            return sum(1 for quote in self._quotes.values() if not quote.approved)

    def get_quote(self, quote_id: int) -> Quote:
        with self._lock:
            quote = self._quotes.get(quote_id)
        if quote is None or not quote.approved:
            raise QuoteNotFoundError(quote_id)
        return quote

    def get_bulk_quotes(self, request: SortRequest) -> tuple[list[Quote], int]:
        page_size, offset = clamp_request(request)
        with self._lock:
            approved = [quote for quote in self._quotes.values() if quote.approved]

        if request.by_rating:
            approved.sort(key=lambda q: (q.rating, q.quote_id), reverse=request.descending)
        else:
            approved.sort(key=lambda q: (q.submitted, q.quote_id), reverse=request.descending)

        total_pages = compute_total_pages(total_count=len(approved), page_size=page_size)
        return approved[offset : offset + page_size], total_pages

    def new_quote(self, quote: Quote) -> None:
        with self._lock:
            stored = replace(quote, quote_id=self._next_id, approved=False)
            self._quotes[stored.quote_id] = stored
            self._next_id += 1
        logger.info("Queued quote %s for moderation", stored.quote_id)

    def pending_quotes(self) -> list[Quote]:
        with self._lock:
            pending = [quote for quote in self._quotes.values() if not quote.approved]
        return sorted(pending, key=lambda q: q.quote_id)

    def approve_quote(self, quote_id: int) -> None:
        with self._lock:
            quote = self._quotes.get(quote_id)
            if quote is None:
                raise QuoteNotFoundError(quote_id)
            self._quotes[quote_id] = replace(quote, approved=True)
        logger.info("Approved quote %s", quote_id)

    def reject_quote(self, quote_id: int) -> None:
        with self._lock:
            if self._quotes.pop(quote_id, None) is None:
                raise QuoteNotFoundError(quote_id)
        logger.info("Rejected quote %s", quote_id)

    def add_approved(self, quote: Quote) -> Quote:
        """Insert an already-moderated quote, used for seeding."""

        with self._lock:
            stored = replace(quote, quote_id=self._next_id, approved=True)
            self._quotes[stored.quote_id] = stored
            self._next_id += 1
        return stored
