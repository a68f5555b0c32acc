# app/schemas/admin.py
from pydantic import ConfigDict, computed_field
from sqlmodel import SQLModel

from app.schemas.waitlist import WaitlistEntryRead


class AdminLogin(SQLModel):
    """Admin panel login payload. Only an email, no password."""

    model_config = ConfigDict(extra="forbid")

    email: str


class AdminSession(SQLModel):
    """
    Client-side admin state as an explicit value.

    States:
      - logged out:            is_authorized=False, panel_open=False
      - authorized, open:      is_authorized=True,  panel_open=True
      - authorized, closed:    is_authorized=True,  panel_open=False

    Nothing here is persisted; a new page load starts logged out.
    Being "authorized" grants no server-side privilege.

    `requires_login` is serialized so the page knows to show the login
    prompt instead of the panel.
    """

    model_config = ConfigDict(frozen=True)

    is_authorized: bool = False
    panel_open: bool = False
    admin_email: str | None = None
    signups: list[WaitlistEntryRead] = []

    @computed_field
    @property
    def requires_login(self) -> bool:
        return not self.is_authorized
