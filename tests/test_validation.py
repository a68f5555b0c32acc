# tests/test_validation.py

"""
Tests for waitlist form validation.
"""

import pytest

from app.core.exceptions import SignupValidationError
from app.core.validation import (
    FieldError,
    check_draft,
    collect_field_errors,
    phone_digit_count,
    validate_signup,
)
from app.schemas.waitlist import SignupDraft


def draft(**overrides):
    data = {
        "name": "Ada Lovelace",
        "email": "ada@x.com",
        "phone": "08012345678",
        "user_type": "buyer",
        "reason": None,
    }
    data.update(overrides)
    return data


def test_valid_draft_has_no_errors():
    assert validate_signup(draft()) == {}


def test_accepts_schema_instance():
    assert validate_signup(SignupDraft(**draft())) == {}


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_empty_name_is_required(name):
    errors = collect_field_errors(draft(name=name))
    assert errors["name"] == FieldError.REQUIRED
    assert validate_signup(draft(name=name))["name"] == "Name is required"


@pytest.mark.parametrize("name", ["A", " A ", "x  "])
def test_single_character_name_is_too_short(name):
    errors = validate_signup(draft(name=name))
    assert errors["name"] == "Name must be at least 2 characters"


@pytest.mark.parametrize("name", ["Al", "  Jo  ", "Ada Lovelace"])
def test_names_of_two_or_more_characters_pass(name):
    assert "name" not in validate_signup(draft(name=name))


def test_empty_email_is_required():
    assert collect_field_errors(draft(email="  "))["email"] == FieldError.REQUIRED


@pytest.mark.parametrize(
    "email",
    [
        "plainaddress",
        "a.b.co",
        "ada@localhost",
        "ada@@x.com",
        "ada lovelace@x.com",
        "@x.com",
        "ada@.",
    ],
)
def test_malformed_emails_are_rejected(email):
    errors = validate_signup(draft(email=email))
    assert errors["email"] == "Please enter a valid email address"


@pytest.mark.parametrize("email", ["a@b.co", "first.last@sub.example.org", "x+tag@y.io"])
def test_well_formed_emails_pass(email):
    assert "email" not in validate_signup(draft(email=email))


def test_empty_phone_is_required():
    assert collect_field_errors(draft(phone=""))["phone"] == FieldError.REQUIRED


def test_phone_digits_ignore_formatting():
    assert phone_digit_count("+234 800 000 0000") == 13
    assert phone_digit_count("(555) 123-4567") == 10


@pytest.mark.parametrize("digits", [10, 11, 13, 15])
def test_phone_digit_counts_in_range_pass(digits):
    assert "phone" not in validate_signup(draft(phone="1" * digits))


@pytest.mark.parametrize("digits", [9, 16])
def test_phone_digit_counts_out_of_range_fail(digits):
    errors = collect_field_errors(draft(phone="1" * digits))
    assert errors["phone"] == FieldError.INVALID_FORMAT


def test_phone_examples():
    assert "phone" not in validate_signup(draft(phone="+234 800 000 0000"))
    assert validate_signup(draft(phone="12345"))["phone"] == (
        "Please enter a valid phone number (10-15 digits)"
    )


def test_reason_and_user_type_are_never_reported():
    errors = validate_signup(draft(reason="x" * 5000, user_type="seller"))
    assert errors == {}


def test_missing_keys_count_as_empty():
    assert set(validate_signup({})) == {"name", "email", "phone"}


def test_check_draft_raises_with_all_errors():
    with pytest.raises(SignupValidationError) as exc_info:
        check_draft(draft(name="", phone="123"))

    assert set(exc_info.value.errors) == {"name", "phone"}


def test_check_draft_passes_valid_draft():
    check_draft(draft())
