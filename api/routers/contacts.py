"""Contacts Router - contact form intake and the admin listing.

The listing endpoint carries no authentication.
"""
from __future__ import annotations

import json
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from api.dependencies import get_contact_store
from api.models import ContactRequest, success_body
from nibert_site.contacts import ContactStore, list_contacts, submit_contact
from nibert_site.errors import SiteError, UnexpectedError

router = APIRouter()

THANK_YOU_MESSAGE = "Thank you for your message! We will get back to you soon."
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _content_type(request: Request) -> str:
    return request.headers.get("content-type", "").split(";", 1)[0].strip().lower()


async def read_contact_request(request: Request) -> ContactRequest:
    """Parse a JSON or urlencoded form body into a ``ContactRequest``.

    Bodies of any other type, and JSON that is not an object, are read as an
    empty submission so the validator reports the missing fields. Unparseable
    JSON and fields of the wrong type raise ``RequestValidationError``.
    """
    content_type = _content_type(request)
    data: Any = {}

    if content_type == FORM_CONTENT_TYPE:
        data = dict(await request.form())
    elif content_type == "application/json" or content_type.endswith("+json"):
        raw = await request.body()
        if raw:
            try:
                data = json.loads(raw)
            except ValueError as exc:
                raise RequestValidationError(
                    [{"type": "json_invalid", "loc": ("body",), "msg": str(exc)}]
                ) from exc

    if not isinstance(data, dict):
        data = {}

    try:
        return ContactRequest.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc


@router.post("/contact", status_code=201)
def create_contact(
    payload: ContactRequest = Depends(read_contact_request),
    store: ContactStore = Depends(get_contact_store),
) -> Dict[str, Any]:
    try:
        record = submit_contact(payload.to_submission(), store)
    except SiteError:
        raise
    except Exception as exc:
        raise UnexpectedError(
            "Error processing your message. Please try again later."
        ) from exc

    return success_body(
        {"id": record.id, "timestamp": record.timestamp},
        message=THANK_YOU_MESSAGE,
    )


@router.get("/contacts")
def get_contacts(store: ContactStore = Depends(get_contact_store)) -> dict:
    try:
        contacts = list_contacts(store)
    except Exception as exc:
        raise UnexpectedError("Error fetching contacts") from exc
    return success_body(contacts, count=len(contacts))
