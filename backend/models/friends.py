import datetime
from enum import Enum

from pydantic import BaseModel
from sqlalchemy import CheckConstraint, Column
from sqlmodel import SQLModel, Field

from models.common import CamelModel
from models.types import UtcAwareDateTime


class FriendStatus(str, Enum):
    pending = "pending"
    accepted = "accepted"


class Friend(SQLModel, table=True):
    """A friend request, keyed by who sent it to whom.

    An accepted record is a friendship seen from both sides.
    """

    __tablename__ = "friends"
    __table_args__ = (
        CheckConstraint("requester_email <> recipient_email", name="ck_friend_not_self"),
    )

    requester_email: str = Field(foreign_key="users.email", primary_key=True)
    recipient_email: str = Field(
        foreign_key="users.email", primary_key=True, index=True
    )
    status: FriendStatus = Field(default=FriendStatus.pending, index=True)

    requested_at: datetime.datetime | None = Field(
        default=None,
        sa_column=Column(UtcAwareDateTime(), nullable=True),
    )
    responded_at: datetime.datetime | None = Field(
        default=None,
        sa_column=Column(UtcAwareDateTime(), nullable=True),
    )

    def other_party(self, identity: str) -> str:
        if self.requester_email == identity:
            return self.recipient_email
        return self.requester_email


class FriendUpdate(BaseModel):
    """Fields to merge into an existing record, unset ones are left alone"""

    status: FriendStatus | None = None
    responded_at: datetime.datetime | None = None


class FriendIdentifier(CamelModel):
    username_or_email: str = ""


class FriendUsername(CamelModel):
    username: str = ""
