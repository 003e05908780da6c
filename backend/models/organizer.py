"""Journal and calendar event models"""

import datetime
import uuid
from enum import Enum

from pydantic import Field as PydanticField
from sqlalchemy import func
from sqlmodel import SQLModel, Field, Column

from .common import CamelModel, utc_now
from .types import UtcAwareDateTime


def new_id() -> str:
    return str(uuid.uuid4())


class EventType(str, Enum):
    public = "public"
    private = "private"


class Journal(SQLModel, table=True):
    __tablename__ = "journals"

    id: str = Field(default_factory=new_id, primary_key=True)
    email: str = Field(foreign_key="users.email", index=True)
    date: str
    content: str = ""

    created_at: datetime.datetime = Field(
        default_factory=utc_now,
        sa_column=Column(UtcAwareDateTime(), nullable=False),
    )
    updated_at: datetime.datetime | None = Field(
        default=None,
        sa_column=Column(UtcAwareDateTime(), onupdate=func.now(), nullable=True),
    )


class Event(SQLModel, table=True):
    __tablename__ = "events"

    id: str = Field(default_factory=new_id, primary_key=True)
    email: str = Field(foreign_key="users.email", index=True)
    title: str = ""
    description: str = ""
    date: str = Field(index=True)
    time: str = ""
    start_time: str = ""
    end_time: str = ""
    street_address: str = ""
    postal_number: str = ""
    status: str = ""
    event_type: EventType = EventType.private

    created_at: datetime.datetime = Field(
        default_factory=utc_now,
        sa_column=Column(UtcAwareDateTime(), nullable=False),
    )


class JournalIn(CamelModel):
    date: str = ""
    content: str = ""


class JournalUpdate(CamelModel):
    date: str | None = None
    content: str | None = None


class JournalRead(CamelModel):
    journal_id: str = PydanticField(alias="journalID")
    date: str
    content: str
    email: str

    @classmethod
    def from_journal(cls, journal: Journal) -> "JournalRead":
        return cls(
            journal_id=journal.id,
            date=journal.date,
            content=journal.content,
            email=journal.email,
        )


class EventIn(CamelModel):
    title: str = ""
    description: str = ""
    date: str = ""
    time: str = ""
    start_time: str = ""
    end_time: str = ""
    street_address: str = ""
    postal_number: str = ""
    status: str = ""
    event_type_id: str = PydanticField(default="", alias="eventTypeID")


class EventUpdate(CamelModel):
    title: str | None = None
    description: str | None = None
    date: str | None = None
    time: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    street_address: str | None = None
    postal_number: str | None = None
    status: str | None = None
    event_type_id: str | None = PydanticField(default=None, alias="eventTypeID")


class EventRead(CamelModel):
    event_id: str = PydanticField(alias="eventID")
    title: str
    description: str
    date: str
    time: str
    start_time: str
    end_time: str
    street_address: str
    postal_number: str
    status: str
    event_type_id: str = PydanticField(alias="eventTypeID")
    email: str

    @classmethod
    def from_event(cls, event: Event) -> "EventRead":
        return cls(
            event_id=event.id,
            title=event.title,
            description=event.description,
            date=event.date,
            time=event.time,
            start_time=event.start_time,
            end_time=event.end_time,
            street_address=event.street_address,
            postal_number=event.postal_number,
            status=event.status,
            event_type_id=EventType(event.event_type).value,
            email=event.email,
        )


class TimetableImport(CamelModel):
    ics_content: str = ""
