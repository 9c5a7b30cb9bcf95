# This file implements the quote store on top of a SQL database through SQLAlchemy.
# It exists so the board can persist quotes and the moderation queue across restarts.
# Every call runs in its own connection or transaction, so concurrent requests share only the pool.
# Driver errors are translated into StoreError so callers never depend on SQLAlchemy types.

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
    delete,
    func,
    insert,
    select,
    update,
)
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from src.qdb.base import (
    Quote,
    QuoteNotFoundError,
    SortRequest,
    StoreError,
    clamp_request,
    compute_total_pages,
)

logger = logging.getLogger(__name__)

metadata = MetaData()

quotes_table = Table(
    "quotes",
    metadata,
    Column("quote_id", Integer, primary_key=True, autoincrement=True),
    Column("text", Text, nullable=False),
    Column("submitted", DateTime(timezone=True), nullable=False),
    Column("submitted_ip", String(64), nullable=False, default=""),
    Column("rating", Integer, nullable=False, default=0),
    Column("approved", Boolean, nullable=False, default=False),
)


def _is_memory_sqlite(database_url: str) -> bool:
    return database_url in {"sqlite://", "sqlite:///:memory:"}


def _row_to_quote(row: RowMapping) -> Quote:
    return Quote(
        quote_id=int(row["quote_id"]),
        text=row["text"],
        submitted=row["submitted"],
        submitted_ip=row["submitted_ip"],
        rating=int(row["rating"]),
        approved=bool(row["approved"]),
    )


class SqlQuoteStore:
    """SQLAlchemy-backed quote store."""

    def __init__(self, *, database_url: str) -> None:
        engine_kwargs: dict[str, Any] = {"pool_pre_ping": True, "future": True}
        if _is_memory_sqlite(database_url):
            # One shared connection, otherwise each thread sees its own empty database.
            engine_kwargs["poolclass"] = StaticPool
            engine_kwargs["connect_args"] = {"check_same_thread": False}
        self._engine: Engine = create_engine(database_url, **engine_kwargs)

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_schema(self) -> None:
        try:
            metadata.create_all(self._engine)
        except SQLAlchemyError as exc:
            raise StoreError(f"Could not create quote schema: {exc}") from exc

    def size(self) -> int:
        query = select(func.count()).select_from(quotes_table).where(quotes_table.c.approved.is_(True))
        return int(self._scalar(query))

    def moderation_queue_size(self) -> int:
        query = select(func.count()).select_from(quotes_table).where(quotes_table.c.approved.is_(False))
        return int(self._scalar(query))

    def get_quote(self, quote_id: int) -> Quote:
        query = select(quotes_table).where(
            quotes_table.c.quote_id == quote_id,
            quotes_table.c.approved.is_(True),
        )
        rows = self._fetch_all(query)
        if not rows:
            raise QuoteNotFoundError(quote_id)
        return _row_to_quote(rows[0])

    def get_bulk_quotes(self, request: SortRequest) -> tuple[list[Quote], int]:
        page_size, offset = clamp_request(request)
        sort_column = quotes_table.c.rating if request.by_rating else quotes_table.c.submitted
        if request.descending:
            order_by = (sort_column.desc(), quotes_table.c.quote_id.desc())
        else:
            order_by = (sort_column.asc(), quotes_table.c.quote_id.asc())

        query = (
            select(quotes_table)
            .where(quotes_table.c.approved.is_(True))
            .order_by(*order_by)
            .limit(page_size)
            .offset(offset)
        )
        quotes = [_row_to_quote(row) for row in self._fetch_all(query)]
        total_pages = compute_total_pages(total_count=self.size(), page_size=page_size)
        return quotes, total_pages

    def new_quote(self, quote: Quote) -> None:
        statement = insert(quotes_table).values(
            text=quote.text,
            submitted=quote.submitted,
            submitted_ip=quote.submitted_ip,
            rating=quote.rating,
            approved=False,
        )
        try:
            with self._engine.begin() as connection:
                result = connection.execute(statement)
        except SQLAlchemyError as exc:
            logger.exception("Failed to store new quote")
            raise StoreError(f"Could not store quote: {exc}") from exc
        logger.info("Queued quote %s for moderation", result.inserted_primary_key[0])

    def pending_quotes(self) -> list[Quote]:
        query = (
            select(quotes_table)
            .where(quotes_table.c.approved.is_(False))
            .order_by(quotes_table.c.quote_id.asc())
        )
        return [_row_to_quote(row) for row in self._fetch_all(query)]

    def approve_quote(self, quote_id: int) -> None:
        statement = (
            update(quotes_table).where(quotes_table.c.quote_id == quote_id).values(approved=True)
        )
        self._execute_one(statement, quote_id)
        logger.info("Approved quote %s", quote_id)

    def reject_quote(self, quote_id: int) -> None:
        statement = delete(quotes_table).where(quotes_table.c.quote_id == quote_id)
        self._execute_one(statement, quote_id)
        logger.info("Rejected quote %s", quote_id)

    def _scalar(self, query: Any) -> Any:
        try:
            with self._engine.connect() as connection:
                return connection.execute(query).scalar_one()
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    def _fetch_all(self, query: Any) -> list[RowMapping]:
        try:
            with self._engine.connect() as connection:
                return list(connection.execute(query).mappings().all())
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc

    def _execute_one(self, statement: Any, quote_id: int) -> None:
        try:
            with self._engine.begin() as connection:
                result = connection.execute(statement)
        except SQLAlchemyError as exc:
            raise StoreError(str(exc)) from exc
        if result.rowcount == 0:
            raise QuoteNotFoundError(quote_id)
