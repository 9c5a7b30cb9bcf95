# This file handles sort and pagination parsing for the quote listing pages.
# It exists so every browsing route turns raw query strings into the same SortRequest.
# Parsing is deliberately forgiving: each malformed field falls back to its own default.
# The module also builds navigation links that echo the originating sort and page size.

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from starlette.datastructures import QueryParams

from src.qdb.base import SortRequest

DEFAULT_PAGE_SIZE = 10

_INT_RE = re.compile(r"^[+-]?[0-9]+$")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def parse_int32(raw: str | None) -> int | None:
    """Parse a base-10 32-bit signed integer, returning None when it does not fit."""

    if raw is None or not _INT_RE.match(raw):
        return None
    value = int(raw)
    if value < _INT32_MIN or value > _INT32_MAX:
        return None
    return value


def _first(query_params: Mapping[str, Sequence[str]], name: str) -> str | None:
    values = query_params.get(name)
    if not values:
        return None
    return values[0]


def query_params_to_mapping(params: QueryParams) -> dict[str, list[str]]:
    """Flatten Starlette query params into a name -> values mapping."""

    return {key: params.getlist(key) for key in params.keys()}


def parse_sort_config(query_params: Mapping[str, Sequence[str]]) -> SortRequest:
    """Build a SortRequest from query params; never raises."""

    by_rating = False
    by_date = True
    descending = True
    page_size = DEFAULT_PAGE_SIZE
    offset = 0

    raw_count = _first(query_params, "count")
    if raw_count is not None:
        count = parse_int32(raw_count)
        # Non-positive or oversized counts pass through; the store clamps them.
        page_size = count if count is not None else DEFAULT_PAGE_SIZE

    raw_page = _first(query_params, "page")
    if raw_page is not None:
        page = parse_int32(raw_page)
        if page is not None:
            offset = max((page - 1) * page_size, 0)

    if _first(query_params, "sort_by") == "rating":
        by_rating = True
        by_date = False

    raw_order = _first(query_params, "sort_order")
    if raw_order is not None:
        descending = raw_order == "down"

    return SortRequest(
        by_rating=by_rating,
        by_date=by_date,
        descending=descending,
        page_size=page_size,
        offset=offset,
    )


def current_page_for(request: SortRequest) -> int:
    """1-based page number that `request.offset` falls on."""

    if request.page_size < 1:
        return 1
    return request.offset // request.page_size + 1


def build_nav_link(request: SortRequest, page: int) -> str:
    """Relative link to `page` that keeps the request's count and sort."""

    return (
        f"/?count={request.page_size}&page={page}"
        f"&sort_by={request.sort_by}&sort_order={request.sort_order}"
    )
