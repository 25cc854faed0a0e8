"""Reconcile a ranked trending feed with the local movie catalog.

Each trending entry is looked up in the catalog in rank order. A catalog item
matches when its name equals the title ignoring case, or when its production
year is within a year of the release and the lowercased names are at most a
few edits apart. The first matching catalog item wins for every entry.
"""

from __future__ import annotations

from itertools import islice
from logging import getLogger
from typing import TYPE_CHECKING, Final

from .distance import edit_distance

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from .model import CatalogItem, MatchResult, TrendingEntry

log = getLogger(__name__)

OVERSAMPLING_FACTOR: Final[int] = 3
YEAR_TOLERANCE: Final[int] = 1
MAX_EDIT_DISTANCE: Final[int] = 3


def is_exact_match(item: CatalogItem, entry: TrendingEntry) -> bool:
    return (item.name or "").lower() == (entry.title or "").lower()


def is_fuzzy_match(item: CatalogItem, entry: TrendingEntry) -> bool:
    if item.production_year is None:
        return False
    if abs(item.production_year - entry.release_year) > YEAR_TOLERANCE:
        return False
    distance = edit_distance((item.name or "").lower(), (entry.title or "").lower())
    return distance <= MAX_EDIT_DISTANCE


def find_match(entry: TrendingEntry, catalog: Iterable[CatalogItem]) -> CatalogItem | None:
    """Return the first catalog item matching ``entry``, if any."""

    for item in catalog:
        if is_exact_match(item, entry) or is_fuzzy_match(item, entry):
            return item
    return None


def reconcile(
    trending: Sequence[TrendingEntry] | None,
    catalog: Sequence[CatalogItem],
    top_count: int,
) -> MatchResult:
    """Return up to ``top_count`` distinct catalog items in trending rank order.

    Only the first ``top_count * OVERSAMPLING_FACTOR`` trending entries are
    considered. Empty feeds and non-positive counts give an empty result.
    """

    matched: MatchResult = []
    if top_count <= 0 or not trending:
        return matched

    seen: set[str] = set()
    for entry in islice(trending, top_count * OVERSAMPLING_FACTOR):
        item = find_match(entry, catalog)
        if item is None or item.id in seen:
            continue
        seen.add(item.id)
        matched.append(item)
        if len(matched) >= top_count:
            break

    log.debug(
        "Matched %s of %s requested trending titles against %s catalog items",
        len(matched),
        top_count,
        len(catalog),
    )
    return matched
