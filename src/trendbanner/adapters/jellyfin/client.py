"""HTTP client listing the movies of a Jellyfin server."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING, Final

from trendbanner.adapters.http_resilience import ResilientClient
from trendbanner.config.jellyfin import JellyfinConfig, get_jellyfin_config

from .schema import ItemsResponse
from .translator import parse_catalog_item

if TYPE_CHECKING:
    from collections.abc import Callable

    from trendbanner.config.http_resilience import ResilienceConfig
    from trendbanner.domain.model import CatalogItem
    from trendbanner.domain.ports.catalog import CatalogSource

log = getLogger(__name__)

DEFAULT_PAGE_SIZE: Final[int] = 500


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class JellyfinAPIError(RuntimeError):
    """Raised when the Jellyfin server rejects the items query."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(slots=True)
class JellyfinCatalogSource:
    """List every non-virtual movie in the Jellyfin library."""

    config: JellyfinConfig = field(default_factory=get_jellyfin_config)
    client_factory: Callable[[ResilienceConfig], ResilientClient] = field(
        default=_default_client_factory
    )
    page_size: int = DEFAULT_PAGE_SIZE

    def __call__(self) -> list[CatalogItem]:
        return asyncio.run(self._fetch_catalog_async())

    async def _fetch_catalog_async(self) -> list[CatalogItem]:
        items: list[CatalogItem] = []
        skipped_virtual = 0
        start_index = 0

        async with self.client_factory(self.config.resilience) as client:
            while True:
                page = await self._request_items(client=client, start_index=start_index)
                for payload in page.items:
                    if payload.is_virtual:
                        skipped_virtual += 1
                        continue
                    items.append(parse_catalog_item(payload))

                start_index += len(page.items)
                if not page.items or start_index >= page.total_record_count:
                    break

        log.info(
            "Loaded %s movies from Jellyfin (%s virtual items skipped)",
            len(items),
            skipped_virtual,
        )
        return items

    async def _request_items(self, *, client: ResilientClient, start_index: int) -> ItemsResponse:
        params: dict[str, str | int] = {
            "IncludeItemTypes": "Movie",
            "Recursive": "true",
            "IsMissing": "false",
            "Fields": "ProductionYear",
            "StartIndex": start_index,
            "Limit": self.page_size,
        }
        response = await client.get(
            f"{self.config.base_url}/Items",
            params=params,
            headers={"X-Emby-Token": self.config.api_key},
        )
        if response.is_error:
            log.error(f"Jellyfin items query failed with HTTP {response.status_code}")
            raise JellyfinAPIError(
                f"Jellyfin items query failed with HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise JellyfinAPIError("Jellyfin returned a non-JSON items payload") from exc
        if not isinstance(payload, dict) or "Items" not in payload:
            raise JellyfinAPIError("Unexpected Jellyfin items payload")

        return ItemsResponse.model_validate(payload)


if TYPE_CHECKING:
    _source_check: CatalogSource = JellyfinCatalogSource()
