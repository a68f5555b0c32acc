# app/models/waitlist.py
import uuid
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class WaitlistEntry(SQLModel, table=True):
    """
    One submitted interest record (buyer or seller) awaiting launch.

    Rows are append-only: this service inserts and reads them, it never
    updates or deletes. `id` and `timestamp` are assigned here, never taken
    from the client payload.
    """

    __tablename__ = "waitlist"

    id: uuid.UUID = Field(
        default_factory=uuid.uuid4,
        primary_key=True,
        index=True,
    )

    name: str = Field(description="Name as submitted")
    email: str = Field(index=True, description="Not unique; duplicates allowed")
    phone: str = Field(description="Phone as submitted, formatting kept")

    # "buyer" | "seller"
    user_type: str = Field(default="buyer")

    # NULL when the user gave no reason
    reason: str | None = Field(default=None)

    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        index=True,
        description="Insert time (UTC), used for ordering",
    )
