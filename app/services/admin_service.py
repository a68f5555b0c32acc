# app/services/admin_service.py
from datetime import date

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core import admin_gate
from app.core.analytics import track_event
from app.core.csv_export import export_filename, to_csv
from app.core.exceptions import AuthorizationDenied, PersistenceError
from app.repositories.waitlist_repo import WaitlistRepository
from app.schemas.admin import AdminSession
from app.schemas.waitlist import WaitlistEntryRead

LOAD_FAILED_MESSAGE = "Failed to load signups. Please try again."


class AdminService:
    """
    Orchestrates the admin panel: login, panel toggle, listing, CSV export.

    The admin gate is a UI toggle only (see app.core.admin_gate).
    """

    def __init__(self, repo: WaitlistRepository, admin_email: str):
        self.repo = repo
        self.admin_email = admin_email

    def _loader(self, session: Session):
        def load() -> list[WaitlistEntryRead]:
            return [
                WaitlistEntryRead.model_validate(entry)
                for entry in self.repo.list_all(session)
            ]

        return load

    def list_signups(self, session: Session) -> list[WaitlistEntryRead]:
        """
        All signups, newest first.

        Raises:
            HTTPException(503): if the store cannot be read.
        """
        try:
            return self._loader(session)()
        except PersistenceError:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=LOAD_FAILED_MESSAGE,
            )

    def login(
        self,
        session: Session,
        candidate_email: str,
        state: AdminSession | None = None,
    ) -> AdminSession:
        """
        Admin login by email only.

        On success the panel is open and holds a fresh listing.

        Raises:
            HTTPException(403): email does not match the admin email.
            HTTPException(503): signups could not be loaded.
        """
        state = state or AdminSession()
        try:
            new_state = admin_gate.login(
                state,
                candidate_email,
                self.admin_email,
                self._loader(session),
            )
        except AuthorizationDenied as e:
            track_event("admin_login_failed")
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=str(e),
            )
        except PersistenceError:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=LOAD_FAILED_MESSAGE,
            )

        track_event("admin_login_success")
        return new_state

    def toggle_panel(
        self,
        session: Session,
        state: AdminSession,
        candidate_email: str | None = None,
    ) -> AdminSession:
        """
        Close an open panel, or open a closed one with a reloaded listing.

        A logged-out state is returned as is (the page shows the login
        prompt). An authorized state must come with the admin email.

        Raises:
            HTTPException(403): authorized state without a matching email.
            HTTPException(503): signups could not be loaded on open.
        """
        if state.is_authorized and not admin_gate.authorize(candidate_email, self.admin_email):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied. Only authorized admin can view signups.",
            )
        try:
            return admin_gate.toggle_panel(state, self._loader(session))
        except PersistenceError:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=LOAD_FAILED_MESSAGE,
            )

    def export_csv(self, session: Session, day: date | None = None) -> tuple[str, str]:
        """
        Build the CSV download.

        Returns:
            (filename, csv text)
        """
        signups = self.list_signups(session)
        content = to_csv(signups)
        track_event("export_signups", {"count": len(signups)})
        return export_filename(day), content
