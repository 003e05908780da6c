import datetime
import logging
import re

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from models.organizer import Journal, JournalIn, JournalUpdate
from services.errors import InvalidRequestError, NotFoundError, StoreError

logger = logging.getLogger("dailyverse.journals")

DATE_FORMAT = "%Y-%m-%d"
DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_date(value: str) -> str:
    """Dates are plain, zero-padded YYYY-MM-DD strings"""
    error = InvalidRequestError("Invalid date format. Please use YYYY-MM-DD.")
    if not DATE_RE.match(value or ""):
        raise error
    try:
        datetime.datetime.strptime(value, DATE_FORMAT)
    except ValueError as e:
        raise error from e
    return value


def commit(session: Session, what: str):
    try:
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception(f"Cannot save {what}: {e}")
        raise StoreError(f"Failed to save {what}") from e


def create_journal(session: Session, owner: str, data: JournalIn) -> Journal:
    journal = Journal(email=owner, date=validate_date(data.date), content=data.content)
    session.add(journal)
    commit(session, "journal")
    return journal


def get_journal(session: Session, owner: str, journal_id: str) -> Journal:
    journal = session.get(Journal, journal_id)
    # other users' journals are reported as missing
    if journal is None or journal.email != owner:
        raise NotFoundError("Journal not found")
    return journal


def update_journal(
    session: Session, owner: str, journal_id: str, changes: JournalUpdate
) -> Journal:
    journal = get_journal(session, owner, journal_id)
    if changes.date is not None:
        journal.date = validate_date(changes.date)
    if changes.content is not None:
        journal.content = changes.content
    session.add(journal)
    commit(session, "journal")
    return journal


def delete_journal(session: Session, owner: str, journal_id: str) -> bool:
    journal = session.get(Journal, journal_id)
    if journal is None or journal.email != owner:
        return False
    session.delete(journal)
    commit(session, "journal")
    return True


def list_journals(session: Session, owner: str) -> list[Journal]:
    return list(
        session.exec(
            select(Journal)
            .where(Journal.email == owner)
            .order_by(Journal.date.desc(), Journal.created_at.desc())
        ).all()
    )
