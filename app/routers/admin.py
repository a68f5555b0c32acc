# app/routers/admin.py
from fastapi import APIRouter, Depends, Header, Response
from sqlmodel import Session

from app.core.admin_gate import require_admin_email
from app.core.config import get_settings
from app.core.csv_export import CSV_MEDIA_TYPE
from app.database import get_session
from app.repositories.waitlist_repo import WaitlistRepository
from app.schemas.admin import AdminLogin, AdminSession
from app.schemas.waitlist import WaitlistEntryRead
from app.services.admin_service import AdminService

settings = get_settings()

router = APIRouter(prefix="/admin", tags=["Admin"])

repo = WaitlistRepository()
service = AdminService(repo, settings.ADMIN_EMAIL)


@router.post("/session", response_model=AdminSession)
def admin_login(
    payload: AdminLogin,
    session: Session = Depends(get_session),
):
    """
    Open the admin panel with the admin email.

    Returns the new AdminSession (authorized, panel open, signups loaded).
    The client keeps it; nothing is stored server-side.
    """
    return service.login(session, payload.email)


@router.post("/session/toggle", response_model=AdminSession)
def toggle_admin_panel(
    state: AdminSession,
    session: Session = Depends(get_session),
    x_admin_email: str | None = Header(default=None),
):
    """
    Close the panel, or reopen it with a fresh listing.

    A logged-out session comes back unchanged with `requires_login=true`.
    An authorized session still needs the `X-Admin-Email` header.
    """
    return service.toggle_panel(session, state, x_admin_email)


@router.get(
    "/signups",
    response_model=list[WaitlistEntryRead],
    dependencies=[Depends(require_admin_email)],
)
def list_signups(session: Session = Depends(get_session)):
    """
    All waitlist entries, newest first.

    Gate:
      - `X-Admin-Email` header must match ADMIN_EMAIL (UI toggle, not auth).
    """
    return service.list_signups(session)


@router.get(
    "/signups/export",
    dependencies=[Depends(require_admin_email)],
)
def export_signups(session: Session = Depends(get_session)):
    """
    Download all entries as `resale-waitlist-<date>.csv`.
    """
    filename, content = service.export_csv(session)
    return Response(
        content=content,
        media_type=CSV_MEDIA_TYPE,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
