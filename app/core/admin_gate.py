# app/core/admin_gate.py
"""
Admin gate for the waitlist dashboard.

This is NOT access control. The admin email is a fixed, publicly guessable
value and a match only flips UI state; the signup listing is served to
anyone who sends the matching email. Real protection has to live in the
store (row-level security) or behind a verified credential.
"""

from typing import Callable

from fastapi import Depends, Header, HTTPException, status

from app.core.config import Settings, get_settings
from app.core.exceptions import AuthorizationDenied
from app.schemas.admin import AdminSession
from app.schemas.waitlist import WaitlistEntryRead


def _normalize(email: str) -> str:
    return email.strip().lower()


def authorize(candidate_email: str | None, admin_email: str) -> bool:
    """
    Case- and whitespace-insensitive comparison against the admin email.

    An empty configured admin email matches nothing.
    """
    if not candidate_email or not admin_email.strip():
        return False
    return _normalize(candidate_email) == _normalize(admin_email)


def require_admin_email(
    x_admin_email: str | None = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> str:
    """
    FastAPI dependency for the admin panel endpoints.

    Reads the `X-Admin-Email` header and applies `authorize`.

    Raises:
        HTTPException(403): if the header is missing or does not match.
    """
    if not authorize(x_admin_email, settings.ADMIN_EMAIL):
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Access denied. Only authorized admin can view signups.",
        )
    return _normalize(x_admin_email)


# ---------------------------------------------------------
# Admin panel state transitions
#
#   logged out --login(match)--> authorized, panel open (signups loaded)
#   logged out --login(other)--> logged out, AuthorizationDenied
#   authorized, open   --toggle--> authorized, closed
#   authorized, closed --toggle--> authorized, open (signups reloaded)
# ---------------------------------------------------------

SignupLoader = Callable[[], list[WaitlistEntryRead]]


def login(
    state: AdminSession,
    candidate_email: str,
    admin_email: str,
    load_signups: SignupLoader,
) -> AdminSession:
    """
    Apply an admin login attempt to `state`.

    Raises:
        AuthorizationDenied: if the email does not match; `state` is unchanged.
        PersistenceError: if the signups cannot be loaded after a match.
    """
    if not authorize(candidate_email, admin_email):
        raise AuthorizationDenied("Access denied. Only authorized admin can view signups.")
    return state.model_copy(
        update={
            "is_authorized": True,
            "panel_open": True,
            "admin_email": _normalize(admin_email),
            "signups": load_signups(),
        }
    )


def toggle_panel(state: AdminSession, load_signups: SignupLoader) -> AdminSession:
    """
    Open or close the admin panel.

    Opening reloads the signups every time. Toggling while logged out leaves
    the state as is; the caller should show the login prompt instead
    (see `AdminSession.requires_login`).
    """
    if not state.is_authorized:
        return state
    if state.panel_open:
        return state.model_copy(update={"panel_open": False})
    return state.model_copy(update={"panel_open": True, "signups": load_signups()})
