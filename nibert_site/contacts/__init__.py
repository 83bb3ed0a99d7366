"""Contact form intake and storage module."""
from .store import (
    ContactRecord,
    ContactStore,
    DEFAULT_SUBJECT,
    InMemoryContactStore,
    JsonlContactStore,
    build_store,
    list_contacts,
)
from .validation import (
    ContactSubmission,
    is_valid_email,
    submit_contact,
    validate_submission,
)

__all__ = [
    # Storage
    "ContactRecord",
    "ContactStore",
    "DEFAULT_SUBJECT",
    "InMemoryContactStore",
    "JsonlContactStore",
    "build_store",
    "list_contacts",
    # Validation
    "ContactSubmission",
    "is_valid_email",
    "submit_contact",
    "validate_submission",
]
