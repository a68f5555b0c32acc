# app/core/csv_export.py
"""
CSV export of waitlist entries for the admin panel.

Every record field is wrapped in double quotes. Embedded double quotes are
doubled so a reason containing `"` still yields a well-formed document;
values without quotes render exactly as the legacy export did.
"""

from datetime import date, datetime, timezone
from typing import Iterable

from app.models.waitlist import WaitlistEntry
from app.schemas.waitlist import WaitlistEntryRead

CSV_HEADER = ["Name", "Email", "Phone", "User Type", "Reason", "Timestamp"]
CSV_MEDIA_TYPE = "text/csv"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_timestamp(ts: datetime) -> str:
    """
    Render a timestamp in UTC as `YYYY-MM-DD HH:MM:SS`.

    Naive datetimes (e.g. read back from SQLite) are taken as UTC.
    """
    if ts.tzinfo is not None:
        ts = ts.astimezone(timezone.utc)
    return ts.strftime(TIMESTAMP_FORMAT)


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def to_row(record: WaitlistEntry | WaitlistEntryRead) -> list[str]:
    return [
        record.name,
        record.email,
        record.phone,
        record.user_type,
        record.reason or "",
        format_timestamp(record.timestamp),
    ]


def to_csv(records: Iterable[WaitlistEntry | WaitlistEntryRead]) -> str:
    """
    Serialize records to CSV text.

    The header line is unquoted; lines are joined with `\\n` and there is no
    trailing newline, so an empty input yields just the header.
    """
    lines = [",".join(CSV_HEADER)]
    for record in records:
        lines.append(",".join(_quote(cell) for cell in to_row(record)))
    return "\n".join(lines)


def export_filename(day: date | None = None) -> str:
    """File name offered for download, e.g. `resale-waitlist-2025-01-31.csv`."""
    if day is None:
        day = datetime.now(timezone.utc).date()
    return f"resale-waitlist-{day.isoformat()}.csv"
