"""Ports for querying the local movie catalog."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from trendbanner.domain.model import CatalogItem


@runtime_checkable
class CatalogSource(Protocol):
    """Callable port returning every playable movie in the library, unordered."""

    def __call__(self) -> Sequence[CatalogItem]: ...


__all__ = ["CatalogSource"]
