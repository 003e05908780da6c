from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from models.common import get_session
from models.organizer import JournalIn, JournalRead, JournalUpdate
from routes.deps import current_email
from services import journals
from services.errors import InvalidRequestError

router = APIRouter(tags=["journals"])


def journal_id_param(journal_id: str = Query("", alias="journalID")) -> str:
    if not journal_id.strip():
        raise InvalidRequestError("Missing journalID parameter")
    return journal_id.strip()


@router.post("/journal/save")
async def save_journal(
    body: JournalIn,
    email: str = Depends(current_email),
    session: Session = Depends(get_session),
):
    journal = journals.create_journal(session, email, body)
    return {"message": "Journal created successfully", "journalID": journal.id}


@router.get("/journal", response_model=JournalRead)
async def get_journal(
    journal_id: str = Depends(journal_id_param),
    email: str = Depends(current_email),
    session: Session = Depends(get_session),
):
    return JournalRead.from_journal(journals.get_journal(session, email, journal_id))


@router.put("/journal/update")
async def update_journal(
    body: JournalUpdate,
    journal_id: str = Depends(journal_id_param),
    email: str = Depends(current_email),
    session: Session = Depends(get_session),
):
    journals.update_journal(session, email, journal_id, body)
    return {"message": "Journal updated successfully"}


@router.delete("/journal/delete")
async def delete_journal(
    journal_id: str = Depends(journal_id_param),
    email: str = Depends(current_email),
    session: Session = Depends(get_session),
):
    journals.delete_journal(session, email, journal_id)
    return {"message": "Journal deleted successfully"}


@router.get("/journals", response_model=list[JournalRead])
async def list_journals(
    email: str = Depends(current_email), session: Session = Depends(get_session)
):
    return [JournalRead.from_journal(j) for j in journals.list_journals(session, email)]
