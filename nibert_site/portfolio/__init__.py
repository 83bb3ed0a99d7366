"""Portfolio catalog and search module."""
from .catalog import (
    PortfolioCatalog,
    PortfolioItem,
    SEED_ITEMS,
)
from .search import (
    PORTFOLIO_TYPE,
    search_catalog,
)

__all__ = [
    # Catalog
    "PortfolioCatalog",
    "PortfolioItem",
    "SEED_ITEMS",
    # Search
    "PORTFOLIO_TYPE",
    "search_catalog",
]
