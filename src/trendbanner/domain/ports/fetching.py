"""Ports for fetching the external trending feed."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from trendbanner.domain.model import TrendingEntry


@dataclass(slots=True, frozen=True)
class RejectedEntry:
    """A feed element that could not be turned into a trending entry."""

    position: int
    reason: str


@dataclass(slots=True)
class TrendingFetchResult:
    """Ranked trending entries plus the feed elements that failed to parse."""

    entries: Sequence[TrendingEntry]
    rejected: Sequence[RejectedEntry] = field(default_factory=tuple)


@runtime_checkable
class TrendingFeed(Protocol):
    """Callable port returning the trending feed, most popular first."""

    def __call__(self) -> TrendingFetchResult: ...


__all__ = ["RejectedEntry", "TrendingFeed", "TrendingFetchResult"]
