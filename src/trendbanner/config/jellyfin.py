"""Jellyfin configuration values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .env import require_env_vars
from .http_resilience import ResilienceConfig

JELLYFIN_TIMEOUT_SECONDS: Final[float] = 30.0


@dataclass(frozen=True, slots=True)
class JellyfinConfig:
    """Holds Jellyfin server connection values."""

    base_url: str
    api_key: str
    resilience: ResilienceConfig


def get_jellyfin_config(*, resilience: ResilienceConfig | None = None) -> JellyfinConfig:
    values = require_env_vars(("JELLYFIN_URL", "JELLYFIN_API_KEY"))
    base_url = values["JELLYFIN_URL"].rstrip("/")
    api_key = values["JELLYFIN_API_KEY"]
    return JellyfinConfig(
        base_url=base_url,
        api_key=api_key,
        resilience=resilience
        or ResilienceConfig(
            name="jellyfin",
            base_url=base_url,
            timeout_seconds=JELLYFIN_TIMEOUT_SECONDS,
            cache=None,
            default_headers={"X-Emby-Token": api_key},
        ),
    )
