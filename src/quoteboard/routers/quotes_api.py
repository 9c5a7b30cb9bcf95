# This file exposes the quote listing as JSON under the versioned API path.
# It accepts the same query parameters as the HTML board and returns the same navigation state.

from __future__ import annotations

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.qdb.base import QuoteStore
from src.quoteboard.board_config import BoardConfig
from src.quoteboard.dependencies import get_config, get_quote_store
from src.quoteboard.page_assembler import PageView
from src.quoteboard.response_envelope import build_list_envelope
from src.quoteboard.routers.board import build_page_view
from src.quoteboard.schemas.quote_schemas import PageNavigationV1, QuoteListResponseV1

router = APIRouter(prefix="/quotes", tags=["quotes"])
StoreDep = Annotated[QuoteStore, Depends(get_quote_store)]
ConfigDep = Annotated[BoardConfig, Depends(get_config)]


def _navigation(view: PageView) -> PageNavigationV1:
    sort_request = view.sort_request
    return PageNavigationV1(
        page=view.current_page,
        total_pages=view.total_pages,
        page_size=sort_request.page_size if sort_request else None,
        sort_by=sort_request.sort_by if sort_request else None,
        sort_order=sort_request.sort_order if sort_request else None,
        has_prev=view.has_prev,
        has_next=view.has_next,
        prev_link=view.prev_link,
        next_link=view.next_link,
        store_size=view.store_size,
        moderation_queue_size=view.moderation_queue_size,
    )


@router.get("", response_model=QuoteListResponseV1)
def list_quotes(
    request: Request,
    store: StoreDep,
    config: ConfigDep,
) -> dict[str, object]:
    view = build_page_view(request, store)
    return build_list_envelope(
        api_version_path=config.api_version_path,
        schema_version=config.schema_version,
        request_id=request.state.request_id,
        data=[asdict(quote) for quote in view.quotes],
        pagination=_navigation(view).model_dump(),
    )
