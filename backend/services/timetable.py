"""Import of course timetables exported as iCalendar files"""

import datetime
import logging

from icalendar import Calendar
from sqlmodel import Session

from models.organizer import Event, EventType
from services.errors import InvalidRequestError
from services.events import add_events

logger = logging.getLogger("dailyverse.timetable")


def _text(component, name: str) -> str:
    value = component.get(name)
    return str(value) if value is not None else ""


def _datetime(component, name: str) -> datetime.datetime | None:
    prop = component.get(name)
    if prop is None:
        return None
    try:
        value = prop.dt
    except (ValueError, AttributeError):
        # unparsable values come back as broken properties
        return None
    # all-day entries carry a date, not a time slot
    if not isinstance(value, datetime.datetime):
        return None
    return value


def parse_timetable(owner: str, ics_content: str) -> list[Event]:
    try:
        calendar = Calendar.from_ical(ics_content)
    except ValueError as e:
        raise InvalidRequestError("Failed to parse ICS content") from e

    events = []
    for component in calendar.walk("VEVENT"):
        start = _datetime(component, "DTSTART")
        end = _datetime(component, "DTEND")
        if start is None or end is None:
            logger.debug(f"Skipping {_text(component, 'SUMMARY')!r}: no start or end")
            continue
        events.append(
            Event(
                email=owner,
                title=_text(component, "SUMMARY"),
                description=_text(component, "DESCRIPTION"),
                street_address=_text(component, "LOCATION"),
                date=start.strftime("%Y-%m-%d"),
                start_time=start.strftime("%H:%M"),
                end_time=end.strftime("%H:%M"),
                event_type=EventType.private,
                status="confirmed",
            )
        )
    return events


def import_timetable(session: Session, owner: str, ics_content: str) -> int:
    if not (ics_content or "").strip():
        raise InvalidRequestError("ICS content is required")
    events = parse_timetable(owner, ics_content)
    add_events(session, events)
    logger.info(f"Imported {len(events)} timetable events for {owner}")
    return len(events)
