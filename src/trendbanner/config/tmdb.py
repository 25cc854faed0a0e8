"""TMDb configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Literal, cast

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig
from .storage import StorageConfig, get_storage_config

TMDB_BASE_URL: Final[str] = "https://api.themoviedb.org/3"
TMDB_TIMEOUT_SECONDS: Final[float] = 10.0

TimeWindow = Literal["day", "week"]
_TIME_WINDOWS: Final[frozenset[str]] = frozenset({"day", "week"})


@dataclass(frozen=True, slots=True)
class TmdbConfig:
    """Holds TMDb API configuration values."""

    api_key: str
    resilience: ResilienceConfig
    time_window: TimeWindow = "week"


def tmdb_resilience(
    *,
    refresh_interval_hours: int,
    storage: StorageConfig | None = None,
) -> ResilienceConfig:
    """TMDb client settings whose cache expires with the refresh interval.

    A non-positive interval disables the cache and leaves the data directory untouched.
    """

    cache: CacheConfig | None = None
    if refresh_interval_hours > 0:
        storage_config = storage or get_storage_config()
        cache = CacheConfig(
            sqlite_path=str(storage_config.http_cache_path()),
            default_ttl_seconds=refresh_interval_hours * 3600.0,
        )
    return ResilienceConfig(
        name="tmdb",
        base_url=TMDB_BASE_URL,
        timeout_seconds=TMDB_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=40, per_seconds=10.0),
        cache=cache,
    )


def get_tmdb_config(
    *,
    refresh_interval_hours: int,
    resilience: ResilienceConfig | None = None,
) -> TmdbConfig:
    values = require_env_vars(("TMDB_API_KEY",))
    time_window = optional_env_var("TMDB_TIME_WINDOW") or "week"
    if time_window not in _TIME_WINDOWS:
        raise ConfigurationError(
            f"TMDB_TIME_WINDOW must be one of {sorted(_TIME_WINDOWS)}, got {time_window!r}"
        )
    return TmdbConfig(
        api_key=values["TMDB_API_KEY"],
        resilience=resilience or tmdb_resilience(refresh_interval_hours=refresh_interval_hours),
        time_window=cast(TimeWindow, time_window),
    )
