"""Storage of friend requests, keyed by the (requester, recipient) pair"""

import abc
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from models.friends import Friend, FriendStatus, FriendUpdate
from services.errors import NotFoundError, StoreError

logger = logging.getLogger("dailyverse.friends.store")


class FriendStore(abc.ABC):
    @abc.abstractmethod
    def create(self, friend: Friend) -> Friend:
        """Insert the record, silently replacing one with the same key"""

    @abc.abstractmethod
    def get(self, requester: str, recipient: str) -> Friend | None:
        """Return the record for the ordered pair, None when there is none"""

    @abc.abstractmethod
    def update(self, requester: str, recipient: str, fields: FriendUpdate) -> Friend:
        """Merge the set fields into the record, NotFoundError if missing"""

    @abc.abstractmethod
    def delete(self, requester: str, recipient: str) -> bool:
        """Remove the record if present, return whether something was removed"""

    @abc.abstractmethod
    def list_accepted(self, identity: str) -> list[Friend]:
        """Accepted records where the identity is on either side"""

    @abc.abstractmethod
    def list_pending(self, identity: str) -> list[Friend]:
        """Pending records sent to the identity"""


class SqlFriendStore(FriendStore):
    def __init__(self, session: Session):
        self.session = session

    def _commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            logger.exception(f"Failed to store the friend record: {e}")
            self.session.rollback()
            raise StoreError("Failed to store the friend request") from e

    def create(self, friend: Friend) -> Friend:
        try:
            friend = self.session.merge(friend)
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError("Failed to store the friend request") from e
        self._commit()
        return friend

    def get(self, requester: str, recipient: str) -> Friend | None:
        try:
            return self.session.get(Friend, (requester, recipient))
        except SQLAlchemyError as e:
            raise StoreError("Failed to fetch the friend request") from e

    def update(self, requester: str, recipient: str, fields: FriendUpdate) -> Friend:
        friend = self.get(requester, recipient)
        if friend is None:
            raise NotFoundError("Friend request not found")
        for key, value in fields.model_dump(exclude_unset=True).items():
            setattr(friend, key, value)
        self.session.add(friend)
        self._commit()
        return friend

    def delete(self, requester: str, recipient: str) -> bool:
        friend = self.get(requester, recipient)
        if friend is None:
            return False
        self.session.delete(friend)
        self._commit()
        return True

    def _scan(self, *conditions) -> list[Friend]:
        try:
            return list(self.session.exec(select(Friend).where(*conditions)).all())
        except SQLAlchemyError as e:
            raise StoreError("Failed to fetch friend requests") from e

    def list_accepted(self, identity: str) -> list[Friend]:
        # each record is stored in one direction only, no need to dedupe
        as_requester = self._scan(
            Friend.requester_email == identity,
            Friend.status == FriendStatus.accepted,
        )
        as_recipient = self._scan(
            Friend.recipient_email == identity,
            Friend.status == FriendStatus.accepted,
        )
        return as_requester + as_recipient

    def list_pending(self, identity: str) -> list[Friend]:
        return self._scan(
            Friend.recipient_email == identity,
            Friend.status == FriendStatus.pending,
        )


class MemoryFriendStore(FriendStore):
    """Dictionary backed store, the reference for the SQL one"""

    def __init__(self):
        self.records: dict[tuple[str, str], Friend] = {}

    def create(self, friend: Friend) -> Friend:
        self.records[(friend.requester_email, friend.recipient_email)] = friend
        return friend

    def get(self, requester: str, recipient: str) -> Friend | None:
        return self.records.get((requester, recipient))

    def update(self, requester: str, recipient: str, fields: FriendUpdate) -> Friend:
        friend = self.get(requester, recipient)
        if friend is None:
            raise NotFoundError("Friend request not found")
        for key, value in fields.model_dump(exclude_unset=True).items():
            setattr(friend, key, value)
        return friend

    def delete(self, requester: str, recipient: str) -> bool:
        return self.records.pop((requester, recipient), None) is not None

    def list_accepted(self, identity: str) -> list[Friend]:
        return [
            friend
            for (requester, recipient), friend in self.records.items()
            if identity in (requester, recipient)
            and friend.status == FriendStatus.accepted
        ]

    def list_pending(self, identity: str) -> list[Friend]:
        return [
            friend
            for (_, recipient), friend in self.records.items()
            if recipient == identity and friend.status == FriendStatus.pending
        ]
