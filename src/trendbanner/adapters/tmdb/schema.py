"""Pydantic models describing the TMDb trending payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class TmdbBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class TrendingMoviePayload(TmdbBaseModel):
    id: int | None = None
    title: str = Field(min_length=1)
    release_date: str | None = None
    popularity: float | None = None

    _normalize_release_date = field_validator("release_date", mode="before")(_blank_to_none)

    @field_validator("title")
    @classmethod
    def _reject_blank_title(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be blank")
        return value


class TrendingResponse(TmdbBaseModel):
    """Envelope of ``/trending/movie/{window}``.

    ``results`` stays untyped here so each element can be validated on its own
    and one bad element does not reject the whole page.
    """

    page: int = 1
    results: list[object] = Field(default_factory=list)
    total_pages: int | None = None
    total_results: int | None = None


class ErrorResponse(TmdbBaseModel):
    status_code: int
    status_message: str
    success: bool = False
