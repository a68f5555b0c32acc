# app/routers/waitlist.py
from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.database import get_session
from app.repositories.waitlist_repo import WaitlistRepository
from app.schemas.waitlist import (
    DraftValidation,
    PageView,
    SignupDraft,
    SignupResult,
    WaitlistCount,
)
from app.services.waitlist_service import WaitlistService

router = APIRouter(prefix="/waitlist", tags=["Waitlist"])

repo = WaitlistRepository()
service = WaitlistService(repo)


@router.post(
    "",
    response_model=SignupResult,
    status_code=status.HTTP_201_CREATED,
)
def join_waitlist(
    payload: SignupDraft,
    session: Session = Depends(get_session),
):
    """
    Submit the waitlist form.

    On success returns the stored entry and the refreshed total.
    On 422 the response carries `errors` (field -> message); nothing
    was stored and the form should keep its values.
    """
    return service.submit(session, payload)


@router.post("/validate", response_model=DraftValidation)
def validate_draft(payload: SignupDraft):
    """
    Check a draft without submitting it.
    """
    return service.validate_draft(payload)


@router.get("/count", response_model=WaitlistCount)
def get_count(session: Session = Depends(get_session)):
    """
    Number of people on the waitlist.

    `count` is null when the store could not be read.
    """
    return WaitlistCount(count=service.count_signups(session))


@router.post("/page-view", status_code=status.HTTP_204_NO_CONTENT)
def record_page_view(payload: PageView | None = None):
    """
    Record a landing page view for analytics.

    Kept apart from the health check so uptime probes are not counted.
    """
    service.record_page_view(payload or PageView())
