"""Levenshtein edit distance."""

from __future__ import annotations

from rapidfuzz.distance import Levenshtein


def edit_distance(a: str, b: str) -> int:
    """Return the number of single-character edits turning ``a`` into ``b``.

    Insertions, deletions and substitutions each cost one. The comparison is
    exact; callers fold case beforehand when they need to.
    """

    return Levenshtein.distance(a, b)
