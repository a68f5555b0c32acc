# app/services/waitlist_service.py
from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.analytics import track_event
from app.core.exceptions import PersistenceError, SignupValidationError
from app.core.validation import check_draft, validate_signup
from app.models.waitlist import WaitlistEntry
from app.repositories.waitlist_repo import WaitlistRepository
from app.schemas.waitlist import (
    DraftValidation,
    PageView,
    SignupDraft,
    SignupResult,
    WaitlistEntryRead,
)

SUBMIT_FAILED_MESSAGE = "Failed to save your information. Please try again."


class WaitlistService:
    """
    Business logic for waitlist signups.

    Responsibilities:
      - validate drafts before anything touches the store
      - insert entries and report the refreshed total
      - emit analytics events
      - map domain errors to HTTP errors
    """

    def __init__(self, repo: WaitlistRepository):
        self.repo = repo

    def validate_draft(self, draft: SignupDraft) -> DraftValidation:
        """Validate without submitting. Never touches the store."""
        errors = validate_signup(draft)
        return DraftValidation(valid=not errors, errors=errors)

    def record_page_view(self, view: PageView) -> None:
        track_event("page_view", view.model_dump(exclude_none=True))

    def count_signups(self, session: Session) -> int | None:
        """
        Current number of signups, or None if the store could not be read.

        A failed count is "unknown", never zero.
        """
        try:
            return self.repo.count(session)
        except PersistenceError:
            return None

    def submit(self, session: Session, draft: SignupDraft) -> SignupResult:
        """
        Validate and store one signup.

        Rules:
          - invalid drafts are rejected with per-field messages (422)
          - store failures are reported once (503); nothing is retried
          - duplicates are accepted

        Raises:
            HTTPException(422): if validation fails.
            HTTPException(503): if the store rejects the insert.
        """
        try:
            check_draft(draft)
        except SignupValidationError as e:
            track_event("form_validation_failed", {"errors": list(e.errors)})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail={"message": "Please correct the highlighted fields.", "errors": e.errors},
            )

        entry = WaitlistEntry(
            name=draft.name,
            email=draft.email,
            phone=draft.phone,
            user_type=draft.user_type,
            reason=draft.reason,
        )

        try:
            entry = self.repo.create(session, entry)
        except PersistenceError as e:
            track_event("signup_error", {"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=SUBMIT_FAILED_MESSAGE,
            )

        total = self.count_signups(session)

        track_event(
            "waitlist_signup",
            {"user_type": draft.user_type, "has_reason": bool(draft.reason)},
        )

        return SignupResult(
            entry=WaitlistEntryRead.model_validate(entry),
            total_signups=total,
        )
