from fastapi import APIRouter, Depends
from sqlmodel import Session

from models.common import get_session
from models.organizer import TimetableImport
from routes.deps import current_email
from services.timetable import import_timetable

router = APIRouter(tags=["events"])


@router.post("/import-ntnu-timetable")
async def import_ntnu_timetable(
    body: TimetableImport,
    email: str = Depends(current_email),
    session: Session = Depends(get_session),
):
    imported = import_timetable(session, email, body.ics_content)
    return {"message": "Timetable imported successfully", "imported": imported}
