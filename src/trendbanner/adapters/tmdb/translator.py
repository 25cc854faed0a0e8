"""Translate TMDb trending payloads into domain entries."""

from __future__ import annotations

from datetime import date, datetime
from logging import getLogger
from typing import TYPE_CHECKING

from pydantic import ValidationError

from trendbanner.domain.model import TrendingEntry
from trendbanner.domain.ports.fetching import RejectedEntry, TrendingFetchResult

from .schema import TrendingMoviePayload

if TYPE_CHECKING:
    from collections.abc import Iterable

log = getLogger(__name__)


def parse_release_date(value: str | None) -> date | None:
    """Parse TMDb's ``YYYY-MM-DD`` release date, tolerating full ISO timestamps."""

    if value is None:
        return None
    text = value.strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        log.debug("Unparsable release date %r", value)
        return None


def parse_trending_entry(payload: TrendingMoviePayload) -> TrendingEntry:
    return TrendingEntry(
        title=payload.title,
        release_date=parse_release_date(payload.release_date),
    )


def _rejection_reason(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "result"
    return f"{location}: {first['msg']}"


def parse_trending_results(results: Iterable[object]) -> TrendingFetchResult:
    """Validate each raw result in rank order, keeping the ones that parse."""

    entries: list[TrendingEntry] = []
    rejected: list[RejectedEntry] = []
    for position, raw in enumerate(results):
        try:
            payload = TrendingMoviePayload.model_validate(raw)
        except ValidationError as exc:
            rejected.append(RejectedEntry(position=position, reason=_rejection_reason(exc)))
            continue
        entries.append(parse_trending_entry(payload))
    return TrendingFetchResult(entries=entries, rejected=rejected)
