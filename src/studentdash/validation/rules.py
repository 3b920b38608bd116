"""Field validation rules.

Every rule maps a candidate value to an empty string when valid or to a
human-readable message. Nothing here raises for bad input.

The email rule is a coarse ``local@domain.tld`` shape check and accepts
addresses a full RFC 5322 parser would reject.
"""

from __future__ import annotations

import re
from collections.abc import Collection
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from studentdash.students.models import StudentInput

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

FORM_FIELDS = ("name", "email", "courses")


def is_present(value: str) -> bool:
    """True if the value has non-whitespace content."""
    return len(value.strip()) > 0


def is_valid_name(name: str) -> bool:
    """True if the trimmed name length is within bounds."""
    return NAME_MIN_LENGTH <= len(name.strip()) <= NAME_MAX_LENGTH


def is_valid_email(email: str) -> bool:
    """True if the email has a ``local@domain.tld`` shape."""
    return _EMAIL_PATTERN.match(email) is not None


def validate_field(field: str, value: Any) -> str:
    """Validate a single form field.

    Args:
        field: One of "name", "email" or "courses". Unknown fields are valid.
        value: Candidate value. A string for name/email, a collection of
               course ids for courses.

    Returns:
        Empty string if valid, otherwise the error message.
    """
    if field == "name":
        if not is_present(value):
            return "Name is required"
        if not is_valid_name(value):
            return f"Name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
        return ""
    if field == "email":
        if not is_present(value):
            return "Email is required"
        if not is_valid_email(value):
            return "Please enter a valid email address"
        return ""
    if field == "courses":
        if not _has_selection(value):
            return "At least one course must be selected"
        return ""
    return ""


def validate_student(data: StudentInput) -> dict[str, str]:
    """Run every form rule over a student input.

    Returns:
        Mapping of field name to message, containing failing fields only.
        An empty dict means the input may be submitted.
    """
    values = {
        "name": data.name,
        "email": data.email,
        "courses": data.course_ids,
    }
    errors = {}
    for field in FORM_FIELDS:
        message = validate_field(field, values[field])
        if message:
            errors[field] = message
    return errors


def _has_selection(value: Any) -> bool:
    if isinstance(value, str):
        return is_present(value)
    if isinstance(value, Collection):
        return len(value) > 0
    return bool(value)
