# app/repositories/waitlist_repo.py
import logging

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from app.core.exceptions import PersistenceError
from app.models.waitlist import WaitlistEntry

logger = logging.getLogger(__name__)


class WaitlistRepository:
    """
    Data access layer for WaitlistEntry.

    Responsibilities:
      - append-only insert, count, ordered listing
      - wrap every store failure in PersistenceError

    There is no update/delete and no dedup: the same email or
    phone may sign up any number of times.
    """

    def create(self, session: Session, entry: WaitlistEntry) -> WaitlistEntry:
        """
        Insert one entry and return the persisted row.

        Raises:
            PersistenceError: on any store failure. The transaction is rolled
            back; nothing is retried.
        """
        try:
            session.add(entry)
            session.commit()
            session.refresh(entry)
        except SQLAlchemyError as e:
            session.rollback()
            logger.exception("Error saving signup")
            raise PersistenceError("Failed to save waitlist entry") from e
        return entry

    def count(self, session: Session) -> int:
        """
        Total number of stored entries.

        Raises:
            PersistenceError: on store failure.
        """
        stmt = select(func.count()).select_from(WaitlistEntry)
        try:
            value = session.exec(stmt).one()
        except SQLAlchemyError as e:
            logger.exception("Error loading signup count")
            raise PersistenceError("Failed to count waitlist entries") from e
        return int(value or 0)

    def list_all(self, session: Session) -> list[WaitlistEntry]:
        """
        Every entry, newest first.

        Raises:
            PersistenceError: on store failure.
        """
        stmt = select(WaitlistEntry).order_by(WaitlistEntry.timestamp.desc())
        try:
            return list(session.exec(stmt).all())
        except SQLAlchemyError as e:
            logger.exception("Error loading signups")
            raise PersistenceError("Failed to load waitlist entries") from e
