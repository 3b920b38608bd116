"""Validation - Field-level rules for student form input."""

from studentdash.validation.rules import (
    is_present,
    is_valid_email,
    is_valid_name,
    validate_field,
    validate_student,
)

__all__ = [
    "is_present",
    "is_valid_email",
    "is_valid_name",
    "validate_field",
    "validate_student",
]
