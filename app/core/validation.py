# app/core/validation.py
"""
Waitlist form validation.

Pure functions: no store access, no logging, no side effects. The page
calls these on submit, and `POST /waitlist/validate` exposes them for
inline feedback.
"""

import re
from enum import Enum
from typing import Any, Mapping

from app.core.exceptions import SignupValidationError
from app.schemas.waitlist import SignupDraft

# Permissive single-dot-domain check, not RFC 5322.
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
NON_DIGIT = re.compile(r"[^0-9]")

NAME_MIN_LENGTH = 2
PHONE_MIN_DIGITS = 10
PHONE_MAX_DIGITS = 15


class FieldError(str, Enum):
    REQUIRED = "required"
    TOO_SHORT = "too_short"
    INVALID_FORMAT = "invalid_format"


MESSAGES: dict[tuple[str, FieldError], str] = {
    ("name", FieldError.REQUIRED): "Name is required",
    ("name", FieldError.TOO_SHORT): "Name must be at least 2 characters",
    ("email", FieldError.REQUIRED): "Email is required",
    ("email", FieldError.INVALID_FORMAT): "Please enter a valid email address",
    ("phone", FieldError.REQUIRED): "Phone number is required",
    ("phone", FieldError.INVALID_FORMAT): "Please enter a valid phone number (10-15 digits)",
}


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.match(email) is not None


def phone_digit_count(phone: str) -> int:
    """Number of digits left after stripping every non-digit character."""
    return len(NON_DIGIT.sub("", phone))


def is_valid_phone(phone: str) -> bool:
    return PHONE_MIN_DIGITS <= phone_digit_count(phone) <= PHONE_MAX_DIGITS


def _as_mapping(draft: SignupDraft | Mapping[str, Any]) -> Mapping[str, Any]:
    if isinstance(draft, SignupDraft):
        return draft.model_dump()
    return draft


def collect_field_errors(
    draft: SignupDraft | Mapping[str, Any],
) -> dict[str, FieldError]:
    """
    Check name, email and phone of a draft.

    Accepts a SignupDraft or any mapping with the same keys; missing keys
    count as empty. `reason` and `user_type` are never reported.

    Returns:
        Field name -> error kind. Empty dict means the draft is valid.
    """
    data = _as_mapping(draft)
    name = data.get("name") or ""
    email = data.get("email") or ""
    phone = data.get("phone") or ""

    errors: dict[str, FieldError] = {}

    if not name.strip():
        errors["name"] = FieldError.REQUIRED
    elif len(name.strip()) < NAME_MIN_LENGTH:
        errors["name"] = FieldError.TOO_SHORT

    if not email.strip():
        errors["email"] = FieldError.REQUIRED
    elif not is_valid_email(email):
        errors["email"] = FieldError.INVALID_FORMAT

    if not phone.strip():
        errors["phone"] = FieldError.REQUIRED
    elif not is_valid_phone(phone):
        errors["phone"] = FieldError.INVALID_FORMAT

    return errors


def validate_signup(draft: SignupDraft | Mapping[str, Any]) -> dict[str, str]:
    """
    Validate a draft and return user-facing messages.

    Returns:
        Field name -> message shown inline next to the field.
        Empty dict means the draft can be submitted.
    """
    return {
        field: MESSAGES[(field, kind)]
        for field, kind in collect_field_errors(draft).items()
    }


def check_draft(draft: SignupDraft | Mapping[str, Any]) -> None:
    """
    Raise if the draft cannot be submitted.

    Raises:
        SignupValidationError: carrying the field -> message mapping.
    """
    errors = validate_signup(draft)
    if errors:
        raise SignupValidationError(errors)
