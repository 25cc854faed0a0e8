"""Public interface for the Jellyfin catalog adapter."""

from __future__ import annotations

from .client import JellyfinAPIError, JellyfinCatalogSource
from .schema import BannerItemDto, ItemPayload, ItemsResponse
from .translator import parse_catalog_item, to_banner_item

__all__ = [
    "BannerItemDto",
    "ItemPayload",
    "ItemsResponse",
    "JellyfinAPIError",
    "JellyfinCatalogSource",
    "parse_catalog_item",
    "to_banner_item",
]
