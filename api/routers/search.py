"""Search Router - keyword search across catalogs."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_catalog
from api.models import success_body
from nibert_site.errors import SiteError, UnexpectedError
from nibert_site.portfolio import PortfolioCatalog, search_catalog

router = APIRouter()


@router.get("/search")
def search(
    q: Optional[str] = Query(None, description="Case-insensitive search text"),
    search_type: Optional[str] = Query(
        None,
        alias="type",
        description="Catalog to search; omit for all, 'portfolio' for the portfolio.",
    ),
    catalog: PortfolioCatalog = Depends(get_catalog),
) -> dict:
    try:
        results = search_catalog(catalog, q, search_type)
    except SiteError:
        raise
    except Exception as exc:
        raise UnexpectedError("Error performing search") from exc

    return success_body(
        results,
        count=len(results),
        query=q,
        searchType=search_type or "all",
    )
