"""Tests for portfolio keyword search."""
from __future__ import annotations

import pytest

from nibert_site.errors import MissingQueryError
from nibert_site.portfolio import PortfolioCatalog, PortfolioItem, search_catalog


def test_vue_matches_items_one_and_three(catalog):
    results = search_catalog(catalog, "vue")

    assert [r["id"] for r in results] == [1, 3]
    assert all(r["type"] == "portfolio" for r in results)


def test_match_is_case_insensitive(catalog):
    assert search_catalog(catalog, "VUE") == search_catalog(catalog, "vue")


def test_matches_title(catalog):
    results = search_catalog(catalog, "task management")

    assert [r["id"] for r in results] == [2]


def test_matches_description(catalog):
    results = search_catalog(catalog, "machine learning")

    assert [r["id"] for r in results] == [3]


def test_matches_any_technology(catalog):
    results = search_catalog(catalog, "socket")

    assert [r["id"] for r in results] == [2]


def test_result_carries_all_item_fields(catalog):
    result = search_catalog(catalog, "stripe")[0]

    assert result == {**catalog.get_by_id(1).to_dict(), "type": "portfolio"}


@pytest.mark.parametrize("query", [None, ""])
def test_missing_query_rejected(catalog, query):
    with pytest.raises(MissingQueryError) as excinfo:
        search_catalog(catalog, query)

    assert excinfo.value.message == "Search query is required"


def test_whitespace_query_is_searched(catalog):
    # Every seeded item has a space in its title.
    results = search_catalog(catalog, " ")

    assert [r["id"] for r in results] == [1, 2, 3]


def test_no_match_returns_empty_list(catalog):
    assert search_catalog(catalog, "zzz-no-match") == []


def test_portfolio_type_scans_catalog(catalog):
    assert [r["id"] for r in search_catalog(catalog, "vue", "portfolio")] == [1, 3]


@pytest.mark.parametrize("search_type", ["all", "blog", "PORTFOLIO"])
def test_other_types_yield_nothing(catalog, search_type):
    assert search_catalog(catalog, "vue", search_type) == []


def test_catalog_order_preserved():
    catalog = PortfolioCatalog(
        [
            PortfolioItem(id=9, title="Zeta site", description="", technologies=("Go",)),
            PortfolioItem(id=4, title="Alpha site", description="", technologies=()),
        ]
    )

    assert [r["id"] for r in search_catalog(catalog, "site")] == [9, 4]


def test_repeated_searches_identical_and_catalog_untouched(catalog):
    before = [item.to_dict() for item in catalog.get_all()]

    first = search_catalog(catalog, "vue")
    first[0]["title"] = "changed"
    second = search_catalog(catalog, "vue")

    assert second[0]["title"] == "E-commerce Platform"
    assert search_catalog(catalog, "vue") == second
    assert [item.to_dict() for item in catalog.get_all()] == before
    assert "type" not in catalog.get_by_id(1).to_dict()
