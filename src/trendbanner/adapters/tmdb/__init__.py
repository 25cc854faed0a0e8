"""Public interface for the TMDb trending adapter."""

from __future__ import annotations

from .client import TmdbAPIError, TmdbTrendingFetcher
from .schema import ErrorResponse, TrendingMoviePayload, TrendingResponse
from .translator import parse_release_date, parse_trending_entry, parse_trending_results

__all__ = [
    "ErrorResponse",
    "TmdbAPIError",
    "TmdbTrendingFetcher",
    "TrendingMoviePayload",
    "TrendingResponse",
    "parse_release_date",
    "parse_trending_entry",
    "parse_trending_results",
]
