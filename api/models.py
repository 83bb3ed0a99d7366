"""Shared Pydantic models and response helpers for API routers.

Usage in routers:
    from api.models import ContactRequest, error_body
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

from nibert_site.contacts import ContactSubmission


# =============================================================================
# Request Models
# =============================================================================

class ContactRequest(BaseModel):
    """Contact form body. Every field is optional here; presence and shape
    are judged by the contact validator, not by the schema."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None
    subject: Optional[str] = None

    def to_submission(self) -> ContactSubmission:
        return ContactSubmission(
            name=self.name,
            email=self.email,
            message=self.message,
            subject=self.subject,
        )


# =============================================================================
# Response Helpers
# =============================================================================

def success_body(data: Any, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": True, "data": data}
    body.update(extra)
    return body


def error_body(message: str, **extra: Any) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "message": message}
    body.update(extra)
    return body
