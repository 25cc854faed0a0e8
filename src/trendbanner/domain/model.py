"""Value types shared by the feed, the catalog and the matcher."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date


@dataclass(slots=True, frozen=True)
class TrendingEntry:
    """One ranked title from the external trending feed."""

    title: str
    release_date: date | None = None

    @property
    def release_year(self) -> int:
        """Year of the release date, or 0 when the date is unknown."""

        return self.release_date.year if self.release_date is not None else 0


@dataclass(slots=True, frozen=True)
class CatalogItem:
    """A movie in the local library."""

    id: str
    name: str
    production_year: int | None = None


MatchResult = list[CatalogItem]
