"""Friend request lifecycle: pending -> accepted, or dropped by decline, cancel and remove"""

import datetime
import logging
from typing import Iterable

from models.friends import Friend, FriendStatus, FriendUpdate
from models.users import User
from services.directory import UserDirectory
from services.errors import (
    DuplicateRequestError,
    RequestNotFoundError,
    SelfRequestError,
    UserNotFound,
)
from services.friend_store import FriendStore
from services.security import is_valid_email, normalize_email

logger = logging.getLogger("dailyverse.friends")


class FriendManager:
    """Friend operations on behalf of an acting account.

    The acting identity is always the canonical email of the authenticated
    user. Targets are free-form identifiers, either an email or a username.
    """

    def __init__(self, store: FriendStore, directory: UserDirectory):
        self.store = store
        self.directory = directory

    def resolve_identifier(self, identifier: str) -> User:
        identifier = (identifier or "").strip()
        if not identifier:
            raise UserNotFound()
        if is_valid_email(identifier):
            return self.directory.resolve_by_address(identifier)
        return self.directory.resolve_by_handle(identifier)

    def send_friend_request(self, acting: str, target_identifier: str) -> Friend:
        acting = normalize_email(acting)
        target = self.resolve_identifier(target_identifier)
        if target.email == acting:
            raise SelfRequestError()

        # only the acting -> target direction is checked
        if self.store.get(acting, target.email) is not None:
            raise DuplicateRequestError()

        friend = Friend(
            requester_email=acting,
            recipient_email=target.email,
            status=FriendStatus.pending,
            requested_at=datetime.datetime.now(datetime.timezone.utc),
        )
        logger.info(f"{acting} sent a friend request to {target.email}")
        return self.store.create(friend)

    def accept_friend_request(self, acting: str, sender_identifier: str) -> Friend:
        acting = normalize_email(acting)
        sender = self.resolve_identifier(sender_identifier)
        existing = self.store.get(sender.email, acting)
        if existing is None:
            raise RequestNotFoundError()
        if existing.status == FriendStatus.accepted:
            return existing

        logger.info(f"{acting} accepted the friend request of {sender.email}")
        return self.store.update(
            sender.email,
            acting,
            FriendUpdate(
                status=FriendStatus.accepted,
                responded_at=datetime.datetime.now(datetime.timezone.utc),
            ),
        )

    def _resolve_all(self, identity: str, emails: Iterable[str]) -> list[User]:
        users = []
        for email in emails:
            try:
                users.append(self.directory.resolve_by_address(email))
            except UserNotFound:
                logger.warning(f"Skipping {email} listed for {identity}: no profile")
        return users

    def get_friends_list(self, identity: str) -> list[User]:
        identity = normalize_email(identity)
        friends = self.store.list_accepted(identity)
        return self._resolve_all(
            identity, (friend.other_party(identity) for friend in friends)
        )

    def get_pending_friend_requests(self, identity: str) -> list[User]:
        identity = normalize_email(identity)
        pending = self.store.list_pending(identity)
        return self._resolve_all(identity, (f.requester_email for f in pending))

    def remove_friend(self, acting: str, target_identifier: str) -> bool:
        """Drop the relation whichever direction it was stored in.

        Removing a relation that doesn't exist is not an error,
        the return value tells whether anything was deleted.
        """
        acting = normalize_email(acting)
        target = self.resolve_identifier(target_identifier)
        removed = self.store.delete(acting, target.email)
        removed = self.store.delete(target.email, acting) or removed
        if removed:
            logger.info(f"{acting} removed {target.email} from friends")
        else:
            logger.debug(f"No relation between {acting} and {target.email} to remove")
        return removed

    def decline_friend_request(self, acting: str, sender_identifier: str) -> bool:
        acting = normalize_email(acting)
        sender = self.resolve_identifier(sender_identifier)
        return self.store.delete(sender.email, acting)

    def cancel_friend_request(self, acting: str, target_identifier: str) -> bool:
        acting = normalize_email(acting)
        target = self.resolve_identifier(target_identifier)
        return self.store.delete(acting, target.email)
