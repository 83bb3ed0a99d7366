"""HTTP client wrapper for the site API."""
from __future__ import annotations

import logging
import os
from typing import Any, Dict, Literal, Optional

import requests

from .config import DEFAULT_API_URL

logger = logging.getLogger(__name__)

ErrorKind = Literal["response", "no_response", "request"]

STATUS_LABELS = {
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    500: "Server Error",
}


def classify_error(exc: requests.RequestException) -> ErrorKind:
    """Say whether the server answered, never answered, or was never asked.

    - ``"response"``: the server replied with an error status.
    - ``"no_response"``: connection failure or timeout.
    - ``"request"``: the request could not be constructed (bad URL, headers...).
    """
    if getattr(exc, "response", None) is not None:
        return "response"
    if isinstance(exc, (requests.ConnectionError, requests.Timeout)):
        return "no_response"
    return "request"


def response_message(response: requests.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        return body.get("message")
    return None


def log_api_error(exc: requests.RequestException) -> ErrorKind:
    """Log a failed call according to its classification and return the kind."""
    kind = classify_error(exc)
    if kind == "response":
        status = exc.response.status_code
        label = STATUS_LABELS.get(status, "API Error")
        message = response_message(exc.response) or "Unknown error"
        logger.error(f"{label} ({status}): {message}")
    elif kind == "no_response":
        logger.error(f"Network Error: Unable to reach the server ({exc})")
    else:
        logger.error(f"Error: {exc}")
    return kind


class SiteClient:
    """Small wrapper exposing one method per API endpoint.

    Every method returns the decoded JSON body. Failures are logged via
    ``log_api_error`` and the original ``requests`` exception is re-raised.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        timeout_seconds: float = 10,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("NIBERT_API_URL") or DEFAULT_API_URL).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def check_health(self) -> Dict[str, Any]:
        return self._request("GET", "/health")

    def get_portfolio(self) -> Dict[str, Any]:
        return self._request("GET", "/portfolio")

    def get_portfolio_item(self, item_id: int | str) -> Dict[str, Any]:
        return self._request("GET", f"/portfolio/{item_id}")

    def submit_contact(self, contact: Dict[str, Any]) -> Dict[str, Any]:
        return self._request("POST", "/contact", body=contact)

    def get_contacts(self) -> Dict[str, Any]:
        return self._request("GET", "/contacts")

    def get_company_info(self) -> Dict[str, Any]:
        return self._request("GET", "/company")

    def search(self, query: str, search_type: Optional[str] = None) -> Dict[str, Any]:
        """Search the catalog; ``search_type`` is omitted from the URL when None."""
        params: Dict[str, Any] = {"q": query}
        if search_type:
            params["type"] = search_type
        return self._request("GET", "/search", params=params)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(
                method,
                url,
                params=params,
                json=body,
                timeout=self.timeout_seconds,
            )
            resp.raise_for_status()
        except requests.RequestException as exc:
            log_api_error(exc)
            raise
        return resp.json()
