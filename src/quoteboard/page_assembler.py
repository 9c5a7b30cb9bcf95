# This file turns a parsed SortRequest or a quote id into the view-model for one page.
# It exists so routes share a single place that queries the store and derives navigation.
# Lookups that fail produce an empty quote list instead of an error for the read path.
# The PageView returned here is rebuilt per request and never cached.

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.qdb.base import Quote, QuoteNotFoundError, QuoteStore, SortRequest
from src.quoteboard.pagination import build_nav_link, current_page_for, parse_int32

logger = logging.getLogger(__name__)

INVALID_QUOTE_ID = -1


@dataclass
class PageView:
    current_page: int
    total_pages: int
    store_size: int
    moderation_queue_size: int
    quotes: list[Quote] = field(default_factory=list)
    has_prev: bool = False
    has_next: bool = False
    prev_link: str | None = None
    next_link: str | None = None
    sort_request: SortRequest | None = None


def assemble_list(store: QuoteStore, request: SortRequest) -> PageView:
    """Query one page of quotes and compute previous/next navigation."""

    quotes, total_pages = store.get_bulk_quotes(request)
    current_page = current_page_for(request)

    view = PageView(
        current_page=current_page,
        total_pages=total_pages,
        store_size=store.size(),
        moderation_queue_size=store.moderation_queue_size(),
        quotes=list(quotes),
        has_prev=current_page > 1,
        # A non-positive count maps every page number back to offset 0.
        has_next=request.page_size > 0 and total_pages > 0 and current_page != total_pages,
        sort_request=request,
    )
    if view.has_prev:
        view.prev_link = build_nav_link(request, current_page - 1)
    if view.has_next:
        view.next_link = build_nav_link(request, current_page + 1)
    return view


def assemble_one(store: QuoteStore, raw_id: str | int | None) -> PageView:
    """Look up a single quote; unknown or malformed ids give an empty page."""

    if isinstance(raw_id, int):
        quote_id = raw_id
    else:
        parsed = parse_int32(raw_id)
        quote_id = parsed if parsed is not None else INVALID_QUOTE_ID

    try:
        quotes = [store.get_quote(quote_id)]
    except QuoteNotFoundError:
        logger.debug("Quote %s not found", quote_id)
        quotes = []

    return PageView(
        current_page=1,
        total_pages=0,
        store_size=store.size(),
        moderation_queue_size=store.moderation_queue_size(),
        quotes=quotes,
    )
