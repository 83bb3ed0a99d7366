"""Error taxonomy shared by the core logic and the HTTP boundary."""
from __future__ import annotations


class SiteError(RuntimeError):
    """Base class for failures that map to an API error response."""

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFieldsError(SiteError):
    """Raised when a contact submission lacks name, email, or message."""

    status_code = 400
    default_message = "Name, email, and message are required"


class InvalidEmailError(SiteError):
    """Raised when the email does not look like local@domain.tld."""

    status_code = 400
    default_message = "Please provide a valid email address"


class MissingQueryError(SiteError):
    """Raised when a search is requested without a query string."""

    status_code = 400
    default_message = "Search query is required"


class NotFoundError(SiteError):
    status_code = 404
    default_message = "Portfolio item not found"


class UnexpectedError(SiteError):
    """Wraps an unanticipated failure with the endpoint's public message.

    The original exception is kept as ``__cause__`` so the boundary can log it
    and, outside production, echo its text back to the caller.
    """

    status_code = 500

    @property
    def detail(self) -> str:
        cause = self.__cause__
        return str(cause) if cause is not None else self.message
