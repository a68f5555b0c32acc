# app/schemas/waitlist.py
import uuid
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel

UserType = Literal["buyer", "seller"]


class SignupDraft(SQLModel):
    """
    Waitlist form payload as the page submits it.

    Field values are kept as typed; well-formedness is checked by
    `app.core.validation.validate_signup`, not here, so invalid drafts can
    still be validated and reported field by field.

    `id` and `timestamp` are store-assigned and rejected if sent.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = ""
    email: str = ""
    phone: str = ""
    user_type: UserType = "buyer"
    reason: str | None = None

    @field_validator("reason")
    @classmethod
    def empty_reason_is_absent(cls, v: str | None) -> str | None:
        return v or None


class WaitlistEntryRead(SQLModel):
    """Response schema for a stored waitlist entry."""

    id: uuid.UUID
    name: str
    email: str
    phone: str
    user_type: UserType
    reason: str | None
    timestamp: datetime


class DraftValidation(SQLModel):
    """Result of validating a draft without submitting it."""

    valid: bool
    errors: dict[str, str]


class SignupResult(SQLModel):
    """
    Response for a successful signup.

    total_signups is None when the store could not be counted after insert.
    """

    entry: WaitlistEntryRead
    total_signups: int | None


class WaitlistCount(SQLModel):
    """Public signup counter; None means unknown, not zero."""

    count: int | None


class PageView(SQLModel):
    """Landing page load reported by the page itself."""

    model_config = ConfigDict(extra="forbid")

    page_title: str = "Resale Landing Page"
    page_location: str | None = None
