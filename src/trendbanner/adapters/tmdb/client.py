"""HTTP client for the TMDb trending endpoint."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from trendbanner.adapters.http_resilience import ResilientClient
from trendbanner.config.banner import DEFAULT_REFRESH_INTERVAL_HOURS
from trendbanner.config.tmdb import TMDB_BASE_URL, TmdbConfig, get_tmdb_config

from .schema import ErrorResponse, TrendingResponse
from .translator import parse_trending_results

if TYPE_CHECKING:
    from collections.abc import Callable

    import httpx

    from trendbanner.config.http_resilience import ResilienceConfig
    from trendbanner.domain.ports.fetching import TrendingFeed, TrendingFetchResult

log = getLogger(__name__)


def _default_config() -> TmdbConfig:
    return get_tmdb_config(refresh_interval_hours=DEFAULT_REFRESH_INTERVAL_HOURS)


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class TmdbAPIError(RuntimeError):
    """Raised when TMDb answers with an error status or an unexpected payload."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(slots=True)
class TmdbTrendingFetcher:
    """Fetch one page of TMDb's trending movies, most popular first."""

    config: TmdbConfig = field(default_factory=_default_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )

    def __call__(self) -> TrendingFetchResult:
        return asyncio.run(self._fetch_trending_async())

    async def _fetch_trending_async(self) -> TrendingFetchResult:
        async with self.client_factory(self.config.resilience) as client:
            response = await self._perform_request(client=client)

        result = parse_trending_results(response.results)
        for rejected in result.rejected:
            log.warning(
                "Skipping TMDb trending result #%s: %s", rejected.position + 1, rejected.reason
            )
        log.info(
            "Fetched %s trending movies from TMDb (%s rejected)",
            len(result.entries),
            len(result.rejected),
        )
        return result

    async def _perform_request(self, *, client: ResilientClient) -> TrendingResponse:
        base_url = (self.config.resilience.base_url or TMDB_BASE_URL).rstrip("/")
        url = f"{base_url}/trending/movie/{self.config.time_window}"
        response = await client.get(url, params={"api_key": self.config.api_key})

        payload = _json_or_none(response)
        if response.is_error:
            if isinstance(payload, dict) and "status_message" in payload:
                error_payload = ErrorResponse.model_validate(payload)
                log.error(
                    f"TMDb API error {error_payload.status_code}: {error_payload.status_message}"
                )
                raise TmdbAPIError(error_payload.status_message, status_code=response.status_code)
            raise TmdbAPIError(
                f"TMDb request failed with HTTP {response.status_code}",
                status_code=response.status_code,
            )

        if not isinstance(payload, dict) or "results" not in payload:
            raise TmdbAPIError("Unexpected TMDb trending payload", status_code=response.status_code)

        return TrendingResponse.model_validate(payload)


def _json_or_none(response: httpx.Response) -> object:
    try:
        return response.json()
    except ValueError:
        return None


if TYPE_CHECKING:
    _feed_check: TrendingFeed = TmdbTrendingFetcher()
