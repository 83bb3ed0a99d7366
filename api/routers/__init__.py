"""API Routers Package.

Each router handles one area of the site API:
- portfolio.py: catalog listing and single-item lookup
- contacts.py: contact form intake and the contacts listing
- company.py: static company profile
- search.py: keyword search across catalogs

Usage in main.py:
    from api.routers import portfolio_router, contacts_router, company_router, search_router

    app.include_router(portfolio_router, prefix="/api/portfolio", tags=["portfolio"])
    app.include_router(contacts_router, prefix="/api", tags=["contacts"])
"""

from .portfolio import router as portfolio_router
from .contacts import router as contacts_router
from .company import router as company_router
from .search import router as search_router

__all__ = [
    "portfolio_router",
    "contacts_router",
    "company_router",
    "search_router",
]
