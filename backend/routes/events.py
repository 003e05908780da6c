from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from models.common import get_session
from models.organizer import EventIn, EventRead, EventUpdate
from routes.deps import current_email
from services import events
from services.errors import InvalidRequestError

router = APIRouter(prefix="/events", tags=["events"])


def event_id_param(event_id: str = Query("", alias="eventID")) -> str:
    if not event_id.strip():
        raise InvalidRequestError("Missing eventID parameter")
    return event_id.strip()


@router.post("/create")
async def create_event(
    body: EventIn,
    email: str = Depends(current_email),
    session: Session = Depends(get_session),
):
    event = events.create_event(session, email, body)
    return {"message": "Event created successfully", "eventID": event.id}


@router.get("/get", response_model=EventRead)
async def get_event(
    event_id: str = Depends(event_id_param),
    email: str = Depends(current_email),
    session: Session = Depends(get_session),
):
    return EventRead.from_event(events.get_event(session, email, event_id))


@router.put("/update")
async def update_event(
    body: EventUpdate,
    event_id: str = Depends(event_id_param),
    email: str = Depends(current_email),
    session: Session = Depends(get_session),
):
    events.update_event(session, email, event_id, body)
    return {"message": "Event updated successfully"}


@router.delete("/delete")
async def delete_event(
    event_id: str = Depends(event_id_param),
    email: str = Depends(current_email),
    session: Session = Depends(get_session),
):
    events.delete_event(session, email, event_id)
    return {"message": "Event deleted successfully"}


@router.get("/all", response_model=list[EventRead])
async def list_events(
    email: str = Depends(current_email), session: Session = Depends(get_session)
):
    return [EventRead.from_event(e) for e in events.list_events(session, email)]
