import logging

from sqlmodel import Session, select

from models.organizer import Event, EventIn, EventType, EventUpdate
from services.errors import InvalidRequestError, NotFoundError
from services.journals import commit, validate_date

logger = logging.getLogger("dailyverse.events")

_EVENT_FIELDS = (
    "title",
    "description",
    "time",
    "start_time",
    "end_time",
    "street_address",
    "postal_number",
    "status",
)


def parse_event_type(value: str) -> EventType:
    try:
        return EventType((value or "").strip().lower())
    except ValueError:
        raise InvalidRequestError("Invalid event type")


def create_event(session: Session, owner: str, data: EventIn) -> Event:
    event = Event(
        email=owner,
        date=validate_date(data.date),
        event_type=parse_event_type(data.event_type_id),
        **{field: getattr(data, field) for field in _EVENT_FIELDS},
    )
    session.add(event)
    commit(session, "event")
    return event


def add_events(session: Session, events: list[Event]):
    """Store a batch of already validated events in one commit"""
    session.add_all(events)
    commit(session, "events")


def get_event(session: Session, owner: str, event_id: str) -> Event:
    event = session.get(Event, event_id)
    if event is None or event.email != owner:
        raise NotFoundError("Event not found")
    return event


def update_event(
    session: Session, owner: str, event_id: str, changes: EventUpdate
) -> Event:
    event = get_event(session, owner, event_id)
    if changes.date is not None:
        event.date = validate_date(changes.date)
    if changes.event_type_id is not None:
        event.event_type = parse_event_type(changes.event_type_id)
    for field in _EVENT_FIELDS:
        value = getattr(changes, field)
        if value is not None:
            setattr(event, field, value)
    session.add(event)
    commit(session, "event")
    return event


def delete_event(session: Session, owner: str, event_id: str) -> bool:
    event = session.get(Event, event_id)
    if event is None or event.email != owner:
        return False
    session.delete(event)
    commit(session, "event")
    return True


def list_events(session: Session, owner: str) -> list[Event]:
    return list(
        session.exec(
            select(Event)
            .where(Event.email == owner)
            .order_by(Event.date, Event.start_time)
        ).all()
    )
