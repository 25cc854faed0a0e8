"""Pydantic models for the Jellyfin items API and the banner records."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class JellyfinBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ItemPayload(JellyfinBaseModel):
    id: str = Field(alias="Id")
    name: str | None = Field(default=None, alias="Name")
    production_year: int | None = Field(default=None, alias="ProductionYear")
    type: str | None = Field(default=None, alias="Type")
    location_type: str | None = Field(default=None, alias="LocationType")

    @property
    def is_virtual(self) -> bool:
        return self.location_type == "Virtual"


class ItemsResponse(JellyfinBaseModel):
    items: list[ItemPayload] = Field(default_factory=list, alias="Items")
    total_record_count: int = Field(default=0, alias="TotalRecordCount")
    start_index: int = Field(default=0, alias="StartIndex")


class BannerItemDto(JellyfinBaseModel):
    """Minimal item record handed to the banner widget."""

    id: str = Field(alias="Id")
    name: str = Field(alias="Name")
    server_id: str = Field(alias="ServerId")
    type: Literal["Movie"] = Field(default="Movie", alias="Type")
