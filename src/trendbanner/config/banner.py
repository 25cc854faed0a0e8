"""Banner behaviour settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from .env import int_env_var, optional_env_var

DEFAULT_TOP_COUNT: Final[int] = 10
DEFAULT_REFRESH_INTERVAL_HOURS: Final[int] = 24


@dataclass(frozen=True, slots=True)
class BannerConfig:
    top_count: int = DEFAULT_TOP_COUNT
    refresh_interval_hours: int = DEFAULT_REFRESH_INTERVAL_HOURS
    web_path: Path | None = None


def get_banner_config() -> BannerConfig:
    web_path = optional_env_var("JELLYFIN_WEB_PATH")
    return BannerConfig(
        top_count=int_env_var("TRENDBANNER_TOP_COUNT", default=DEFAULT_TOP_COUNT),
        refresh_interval_hours=int_env_var(
            "TRENDBANNER_REFRESH_INTERVAL_HOURS",
            default=DEFAULT_REFRESH_INTERVAL_HOURS,
            minimum=0,
        ),
        web_path=Path(web_path) if web_path else None,
    )
