# This file defines the HTML pages of the quote board: browsing, single quotes, and submission.
# It exists so the HTTP shell stays thin and hands all listing logic to the page assembler.
# Read routes never fail on malformed parameters; they fall back to defaults or an empty page.
# Submission is strict: a missing Quote field is rejected before the store is touched.

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from starlette.concurrency import run_in_threadpool

from src.qdb.base import Quote, QuoteStore, StoreError
from src.quoteboard.dependencies import get_quote_store, get_templates
from src.quoteboard.error_handlers import APIError
from src.quoteboard.page_assembler import PageView, assemble_list, assemble_one
from src.quoteboard.pagination import parse_sort_config, query_params_to_mapping
from src.quoteboard.text_format import encode_newlines

logger = logging.getLogger(__name__)

router = APIRouter(tags=["board"])
StoreDep = Annotated[QuoteStore, Depends(get_quote_store)]
TemplatesDep = Annotated[Jinja2Templates, Depends(get_templates)]


def build_page_view(request: Request, store: QuoteStore) -> PageView:
    """Pick the single-quote or browsing path from the query string."""

    params = query_params_to_mapping(request.query_params)
    if "id" in params:
        return assemble_one(store, params["id"][0])
    return assemble_list(store, parse_sort_config(params))


@router.get("/", response_class=HTMLResponse)
@router.get("/viewquote.php", response_class=HTMLResponse)
def home_page(request: Request, store: StoreDep, templates: TemplatesDep) -> Response:
    view = build_page_view(request, store)
    return templates.TemplateResponse(request, "home.html", {"page": view})


@router.get("/add", response_class=HTMLResponse)
def add_quote_form(request: Request, templates: TemplatesDep) -> Response:
    return templates.TemplateResponse(request, "add.html", {})


@router.post("/add")
async def add_quote(request: Request, store: StoreDep) -> RedirectResponse:
    form = await request.form()
    # Present but empty is accepted; only an absent field is rejected.
    quote_text = form.get("Quote")
    if not isinstance(quote_text, str):
        raise APIError(
            status_code=400,
            error_code="MISSING_FIELD",
            message="Quote field missing in request",
        )

    quote = Quote(
        text=encode_newlines(quote_text),
        submitted=datetime.now(tz=UTC),
        submitted_ip=request.client.host if request.client else "",
    )
    try:
        await run_in_threadpool(store.new_quote, quote)
    except StoreError as exc:
        logger.error("Quote submission failed: %s", exc)
        raise APIError(status_code=500, error_code="STORE_ERROR", message=str(exc)) from exc

    return RedirectResponse(url="/", status_code=303)
