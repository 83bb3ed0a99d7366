"""Portfolio Router - catalog listing and single-item lookup."""
from __future__ import annotations

import re
from typing import Optional

from fastapi import APIRouter, Depends

from api.dependencies import get_catalog
from api.models import success_body
from nibert_site.errors import NotFoundError, SiteError, UnexpectedError
from nibert_site.portfolio import PortfolioCatalog

router = APIRouter()

_LEADING_INT = re.compile(r"\s*([+-]?)(?:0[xX]([0-9a-fA-F]*)|([0-9]+))")


def parse_item_id(raw: str) -> Optional[int]:
    """Read the leading integer of ``raw`` ("12abc" -> 12, "0x3" -> 3).

    Only ASCII digits count. Returns None when there is no integer prefix.
    """
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    sign, hex_digits, digits = match.groups()
    if hex_digits is not None:
        if not hex_digits:
            return None
        value = int(hex_digits, 16)
    else:
        value = int(digits)
    return -value if sign == "-" else value


@router.get("")
def list_portfolio(catalog: PortfolioCatalog = Depends(get_catalog)) -> dict:
    try:
        items = [item.to_dict() for item in catalog.get_all()]
    except Exception as exc:
        raise UnexpectedError("Error fetching portfolio items") from exc
    return success_body(items, count=len(items))


@router.get("/{item_id}")
def get_portfolio_item(
    item_id: str,
    catalog: PortfolioCatalog = Depends(get_catalog),
) -> dict:
    try:
        parsed = parse_item_id(item_id)
        if parsed is None:
            raise NotFoundError()
        item = catalog.get_by_id(parsed)
    except SiteError:
        raise
    except Exception as exc:
        raise UnexpectedError("Error fetching portfolio item") from exc
    return success_body(item.to_dict())
