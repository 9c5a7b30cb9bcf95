# This file marks the qdb package that holds the quote store contract and its backends.
# It exists so the web layer can depend on one abstract store interface.
# Backends live in sibling modules and are selected by the factory at startup.
# Re-exporting the contract keeps import lines short for callers.

from src.qdb.base import (
    ModerationStore,
    Quote,
    QuoteNotFoundError,
    QuoteStore,
    SortRequest,
    StoreError,
    compute_total_pages,
)

__all__ = [
    "ModerationStore",
    "Quote",
    "QuoteNotFoundError",
    "QuoteStore",
    "SortRequest",
    "StoreError",
    "compute_total_pages",
]
