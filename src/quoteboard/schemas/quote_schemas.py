# This file defines the JSON contract for quote listings and single-quote lookups.
# It mirrors the page view-model so API clients get the same navigation state as the HTML pages.

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from src.quoteboard.schemas.common import EnvelopeFields


class QuoteRowV1(BaseModel):
    quote_id: int
    text: str
    submitted: datetime
    rating: int


class PageNavigationV1(BaseModel):
    page: int = Field(ge=1)
    total_pages: int = Field(ge=0)
    page_size: int | None = None
    sort_by: str | None = None
    sort_order: str | None = None
    has_prev: bool
    has_next: bool
    prev_link: str | None = None
    next_link: str | None = None
    store_size: int = Field(ge=0)
    moderation_queue_size: int = Field(ge=0)


class QuoteListResponseV1(EnvelopeFields):
    data: list[QuoteRowV1]
    pagination: PageNavigationV1
