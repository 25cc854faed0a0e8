from __future__ import annotations

import random
from datetime import date

from trendbanner.domain.matching import (
    OVERSAMPLING_FACTOR,
    find_match,
    is_exact_match,
    is_fuzzy_match,
    reconcile,
)
from trendbanner.domain.model import CatalogItem, TrendingEntry


def _entry(title: str, released: str | None = None) -> TrendingEntry:
    return TrendingEntry(
        title=title,
        release_date=date.fromisoformat(released) if released else None,
    )


def test_exact_title_match() -> None:
    trending = [_entry("Dune", "2021-10-01")]
    catalog = [CatalogItem(id="1", name="Dune", production_year=2021)]

    assert reconcile(trending, catalog, 5) == [catalog[0]]


def test_fuzzy_match_absorbs_punctuation() -> None:
    trending = [_entry("Dune Part Two", "2024-03-01")]
    catalog = [CatalogItem(id="2", name="Dune: Part Two", production_year=2024)]

    assert not is_exact_match(catalog[0], trending[0])
    assert is_fuzzy_match(catalog[0], trending[0])
    assert reconcile(trending, catalog, 1) == [catalog[0]]


def test_unrelated_titles_do_not_match() -> None:
    trending = [_entry("Unrelated Title", "1999-01-01")]
    catalog = [CatalogItem(id="3", name="Totally Different", production_year=2020)]

    assert reconcile(trending, catalog, 1) == []


def test_only_the_oversampled_head_of_the_feed_is_considered() -> None:
    misses = [_entry(f"Missing Movie {index}", "1990-01-01") for index in range(3)]
    trending = [*misses, _entry("Dune", "2021-10-01")]
    catalog = [CatalogItem(id="1", name="Dune", production_year=2021)]

    assert OVERSAMPLING_FACTOR == 3
    assert reconcile(trending, catalog, 1) == []
    assert reconcile(trending, catalog, 2) == [catalog[0]]


def test_non_positive_top_count_gives_empty_result() -> None:
    trending = [_entry("Dune", "2021-10-01")]
    catalog = [CatalogItem(id="1", name="Dune", production_year=2021)]

    assert reconcile(trending, catalog, 0) == []
    assert reconcile(trending, catalog, -4) == []


def test_missing_feed_gives_empty_result() -> None:
    catalog = [CatalogItem(id="1", name="Dune", production_year=2021)]

    assert reconcile(None, catalog, 5) == []
    assert reconcile([], catalog, 5) == []


def test_exact_match_ignores_case() -> None:
    catalog = [CatalogItem(id="1", name="THE MATRIX", production_year=None)]

    assert reconcile([_entry("The Matrix")], catalog, 1) == catalog


def test_fuzzy_match_requires_year_within_one() -> None:
    item = CatalogItem(id="2", name="Dune: Part Two", production_year=2022)

    assert not is_fuzzy_match(item, _entry("Dune Part Two", "2024-03-01"))
    assert is_fuzzy_match(item, _entry("Dune Part Two", "2023-12-31"))


def test_fuzzy_match_requires_production_year() -> None:
    item = CatalogItem(id="2", name="Dune: Part Two", production_year=None)

    assert not is_fuzzy_match(item, _entry("Dune Part Two", "2024-03-01"))


def test_fuzzy_match_rejects_distance_above_three() -> None:
    item = CatalogItem(id="4", name="Alien", production_year=1979)

    assert is_fuzzy_match(item, _entry("Aliens", "1979-05-25"))
    assert not is_fuzzy_match(item, _entry("Alien: Romulus", "1979-05-25"))


def test_unknown_release_date_falls_back_to_exact_match() -> None:
    near_miss = CatalogItem(id="5", name="Dune:", production_year=2021)
    exact = CatalogItem(id="6", name="dune", production_year=2021)

    assert reconcile([_entry("Dune")], [near_miss], 1) == []
    assert reconcile([_entry("Dune")], [near_miss, exact], 1) == [exact]


def test_first_matching_catalog_item_wins() -> None:
    fuzzy = CatalogItem(id="a", name="Dune!", production_year=2021)
    exact = CatalogItem(id="b", name="Dune", production_year=2021)
    entry = _entry("Dune", "2021-10-01")

    assert find_match(entry, [fuzzy, exact]) is fuzzy
    assert find_match(entry, [exact, fuzzy]) is exact


def test_each_catalog_item_appears_once() -> None:
    trending = [_entry("Dune", "2021-10-01"), _entry("DUNE", "2021-10-01")]
    catalog = [CatalogItem(id="1", name="Dune", production_year=2021)]

    assert reconcile(trending, catalog, 5) == [catalog[0]]


def test_duplicate_catalog_ids_count_once() -> None:
    trending = [_entry("Dune", "2021-10-01"), _entry("Dune 2021", "2021-10-01")]
    catalog = [
        CatalogItem(id="1", name="Dune", production_year=2021),
        CatalogItem(id="1", name="Dune 2021", production_year=2021),
    ]

    assert reconcile(trending, catalog, 5) == [catalog[0]]


def test_result_follows_feed_rank_not_catalog_order() -> None:
    trending = [_entry("Oppenheimer", "2023-07-21"), _entry("Barbie", "2023-07-21")]
    catalog = [
        CatalogItem(id="barbie", name="Barbie", production_year=2023),
        CatalogItem(id="oppenheimer", name="Oppenheimer", production_year=2023),
    ]

    result = reconcile(trending, catalog, 2)

    assert [item.id for item in result] == ["oppenheimer", "barbie"]


def test_stops_once_top_count_is_reached() -> None:
    titles = ["Heat", "Ronin", "Collateral", "Thief"]
    trending = [_entry(title, "1995-12-15") for title in titles]
    catalog = [
        CatalogItem(id=title.lower(), name=title, production_year=1995) for title in titles
    ]

    assert [item.id for item in reconcile(trending, catalog, 2)] == ["heat", "ronin"]


def test_reconcile_properties_hold_for_generated_inputs() -> None:
    rng = random.Random(20241019)
    words = ["dune", "alien", "heat", "up", "cars", "her", "it", "us", "jaws", "coco"]

    for _ in range(200):
        trending = [
            _entry(
                " ".join(rng.sample(words, rng.randint(1, 2))),
                f"{rng.randint(1990, 2024)}-01-01",
            )
            for _ in range(rng.randint(0, 12))
        ]
        catalog = [
            CatalogItem(
                id=str(rng.randint(0, 8)),
                name=" ".join(rng.sample(words, rng.randint(1, 2))),
                production_year=rng.choice([None, rng.randint(1990, 2024)]),
            )
            for _ in range(rng.randint(0, 10))
        ]
        top_count = rng.randint(-1, 5)

        result = reconcile(trending, catalog, top_count)

        assert len(result) <= max(top_count, 0)
        assert len({item.id for item in result}) == len(result)
        assert reconcile(trending, catalog, top_count) == result
        ranks = [
            next(
                rank
                for rank, entry in enumerate(trending)
                if find_match(entry, catalog) is item
            )
            for item in result
        ]
        assert ranks == sorted(ranks)


def test_exact_match_lowercases_without_full_case_folding() -> None:
    item = CatalogItem(id="7", name="STRASSE", production_year=None)

    assert not is_exact_match(item, _entry("Straße"))
    assert is_exact_match(item, _entry("strasse"))
