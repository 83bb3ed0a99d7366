"""Contact form validation and normalization.

This is the only place untrusted form input becomes a ``ContactRecord``.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from ..errors import InvalidEmailError, MissingFieldsError
from .store import DEFAULT_SUBJECT, INITIAL_STATUS, ContactRecord, ContactStore

logger = logging.getLogger(__name__)

# Syntactic sanity check only: something@something.something, no spaces or extra "@".
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")


@dataclass(frozen=True, slots=True)
class ContactSubmission:
    """Raw contact form fields as received from a caller."""

    name: Optional[str] = None
    email: Optional[str] = None
    message: Optional[str] = None
    subject: Optional[str] = None


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_submission(submission: ContactSubmission) -> None:
    """Check presence of the required fields and the email shape.

    Presence is a truthiness check on the raw values, so ``""`` counts as
    missing while ``"   "`` does not.

    Raises:
        MissingFieldsError: if name, email or message is absent or empty.
        InvalidEmailError: if the email does not match ``EMAIL_PATTERN``.
    """
    if not submission.name or not submission.email or not submission.message:
        raise MissingFieldsError()
    if not is_valid_email(submission.email):
        raise InvalidEmailError()


def submit_contact(
    submission: ContactSubmission,
    store: ContactStore,
    *,
    now: Optional[datetime] = None,
) -> ContactRecord:
    """Validate ``submission``, normalize it and append it to ``store``.

    Nothing is written to the store when validation fails.
    """
    validate_submission(submission)

    created = now or datetime.now(timezone.utc)
    record = ContactRecord(
        id=store.next_id(),
        name=submission.name.strip(),
        email=submission.email.strip().lower(),
        subject=submission.subject.strip() if submission.subject else DEFAULT_SUBJECT,
        message=submission.message.strip(),
        timestamp=created.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        status=INITIAL_STATUS,
    )
    store.append(record)

    logger.info(
        f"New contact submission: id={record.id} name={record.name} "
        f"email={record.email} timestamp={record.timestamp}"
    )
    return record
