"""Company Router - static company profile."""
from __future__ import annotations

from fastapi import APIRouter

from api.models import success_body
from nibert_site.company import get_company_info
from nibert_site.errors import UnexpectedError

router = APIRouter()


@router.get("/company")
def company_info() -> dict:
    try:
        info = get_company_info()
    except Exception as exc:
        raise UnexpectedError("Error fetching company information") from exc
    return success_body(info)
