"""Keyword search over the portfolio catalog."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..errors import MissingQueryError
from .catalog import PortfolioCatalog, PortfolioItem

PORTFOLIO_TYPE = "portfolio"


def _matches(item: PortfolioItem, needle: str) -> bool:
    if needle in item.title.lower():
        return True
    if needle in item.description.lower():
        return True
    return any(needle in tech.lower() for tech in item.technologies)


def _search_portfolio(catalog: PortfolioCatalog, needle: str) -> List[Dict[str, Any]]:
    return [
        {**item.to_dict(), "type": PORTFOLIO_TYPE}
        for item in catalog
        if _matches(item, needle)
    ]


def search_catalog(
    catalog: PortfolioCatalog,
    query: Optional[str],
    search_type: Optional[str] = None,
) -> List[Dict[str, Any]]:
    """Return catalog entries whose text contains ``query`` (case-insensitive).

    Title, description and each technology are checked. Results keep catalog
    order and carry a ``type`` tag; the catalog entries themselves are left
    untouched.

    Args:
        catalog: Catalog to scan.
        query: Search text. Only ``None`` and ``""`` are rejected; a
            whitespace-only query is searched as-is.
        search_type: ``None`` or ``"portfolio"`` scans the portfolio. Any
            other value matches no catalog and yields an empty list.

    Raises:
        MissingQueryError: if ``query`` is absent or empty.
    """
    if not query:
        raise MissingQueryError()

    needle = query.lower()
    results: List[Dict[str, Any]] = []

    if not search_type or search_type == PORTFOLIO_TYPE:
        results.extend(_search_portfolio(catalog, needle))

    return results
