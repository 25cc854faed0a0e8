"""Translate Jellyfin payloads to and from domain catalog items."""

from __future__ import annotations

from typing import TYPE_CHECKING

from trendbanner.domain.model import CatalogItem

from .schema import BannerItemDto, ItemPayload

if TYPE_CHECKING:
    from collections.abc import Mapping


def parse_catalog_item(payload: ItemPayload | Mapping[str, object]) -> CatalogItem:
    item = payload if isinstance(payload, ItemPayload) else ItemPayload.model_validate(payload)
    return CatalogItem(id=item.id, name=item.name or "", production_year=item.production_year)


def to_banner_item(item: CatalogItem) -> BannerItemDto:
    return BannerItemDto(id=item.id, name=item.name, server_id=item.id)
