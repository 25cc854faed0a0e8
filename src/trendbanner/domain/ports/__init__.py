"""Domain port definitions for adapters."""

from __future__ import annotations

from .catalog import CatalogSource
from .fetching import RejectedEntry, TrendingFeed, TrendingFetchResult

__all__ = [
    "CatalogSource",
    "RejectedEntry",
    "TrendingFeed",
    "TrendingFetchResult",
]
