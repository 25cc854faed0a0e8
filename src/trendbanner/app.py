"""Application orchestration entry points."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from trendbanner.adapters.jellyfin import JellyfinCatalogSource, to_banner_item
from trendbanner.adapters.tmdb import TmdbTrendingFetcher
from trendbanner.adapters.web_index import InjectionOutcome, inject_client_script
from trendbanner.config import (
    BannerConfig,
    ConfigurationError,
    get_banner_config,
    get_jellyfin_config,
    get_tmdb_config,
)
from trendbanner.config.banner import DEFAULT_TOP_COUNT
from trendbanner.domain.matching import reconcile

if TYPE_CHECKING:
    from pathlib import Path

    from trendbanner.adapters.jellyfin import BannerItemDto
    from trendbanner.domain.model import MatchResult
    from trendbanner.domain.ports import CatalogSource, TrendingFeed

log = getLogger(__name__)


@dataclass(slots=True)
class TrendingBannerService:
    """Match the trending feed against the catalog for the banner widget.

    Failures of either collaborator are logged and turned into an empty banner.
    """

    feed: TrendingFeed
    catalog: CatalogSource
    top_count: int = DEFAULT_TOP_COUNT

    def trending_in_library(self, top_count: int | None = None) -> MatchResult:
        count = self.top_count if top_count is None else top_count
        if count <= 0:
            return []

        try:
            fetched = self.feed()
            if not fetched.entries:
                log.info("Trending feed returned no entries")
                return []
            catalog = self.catalog()
        except Exception:
            log.exception("Error getting trending movies")
            return []

        if fetched.rejected:
            log.warning("Ignored %s malformed trending feed entries", len(fetched.rejected))

        matched = reconcile(fetched.entries, catalog, count)
        log.info(
            "Found %s of %s trending movies in the library (%s feed entries, %s catalog items)",
            len(matched),
            count,
            len(fetched.entries),
            len(catalog),
        )
        return matched

    def banner_items(self, top_count: int | None = None) -> list[BannerItemDto]:
        return [to_banner_item(item) for item in self.trending_in_library(top_count)]


def build_trending_banner_service(config: BannerConfig | None = None) -> TrendingBannerService:
    """Wire the TMDb feed and the Jellyfin catalog from environment configuration."""

    banner_config = config or get_banner_config()
    tmdb_config = get_tmdb_config(refresh_interval_hours=banner_config.refresh_interval_hours)
    jellyfin_config = get_jellyfin_config()
    return TrendingBannerService(
        feed=TmdbTrendingFetcher(config=tmdb_config),
        catalog=JellyfinCatalogSource(config=jellyfin_config),
        top_count=banner_config.top_count,
    )


def fetch_banner_items(top_count: int | None = None) -> list[BannerItemDto]:
    """Return the banner records, or an empty list when the service cannot be configured."""

    try:
        service = build_trending_banner_service()
    except ConfigurationError as exc:
        log.warning("Trending banner is not configured: %s", exc)
        return []
    except Exception:
        log.exception("Error setting up the trending banner")
        return []
    return service.banner_items(top_count)


def install_client_script(web_path: Path | None = None) -> InjectionOutcome:
    """Patch the web client once; the explicit path wins over JELLYFIN_WEB_PATH."""

    return inject_client_script(web_path or get_banner_config().web_path)
