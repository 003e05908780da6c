import logging

import pytest

from models.friends import FriendStatus
from models.users import User
from services.errors import (
    DuplicateRequestError,
    RequestNotFoundError,
    SelfRequestError,
    UserNotFound,
)
from services.friend_store import MemoryFriendStore
from services.friendship import FriendManager


class DictDirectory:
    """In-memory stand-in for the user directory"""

    def __init__(self, *users: User):
        self.users = {u.email: u for u in users}

    def resolve_by_address(self, email: str) -> User:
        try:
            return self.users[email.strip().lower()]
        except KeyError:
            raise UserNotFound()

    def resolve_by_handle(self, username: str) -> User:
        for user in self.users.values():
            if user.username_lower == username.strip().lower():
                return user
        raise UserNotFound()


def account(username: str) -> User:
    return User(
        email=f"{username.lower()}@x.com",
        username=username,
        username_lower=username.lower(),
        password_hash="",
        country="Norway",
        city="Oslo",
    )


ALICE = "alice@x.com"
BOB = "bob@x.com"


@pytest.fixture
def directory():
    return DictDirectory(account("alice"), account("Bob"), account("carol"))


@pytest.fixture
def store():
    return MemoryFriendStore()


@pytest.fixture
def manager(store, directory):
    return FriendManager(store, directory)


def emails(users: list[User]) -> list[str]:
    return [u.email for u in users]


def test_resolve_identifier_by_email_or_username(manager):
    assert manager.resolve_identifier("bob@x.com").email == BOB
    assert manager.resolve_identifier("BOB").email == BOB
    assert manager.resolve_identifier(" bob ").email == BOB


@pytest.mark.parametrize("identifier", ["", "nobody", "nobody@x.com"])
def test_resolve_identifier_unknown(manager, identifier):
    with pytest.raises(UserNotFound):
        manager.resolve_identifier(identifier)


def test_send_creates_pending_request(manager, store):
    friend = manager.send_friend_request(ALICE, "bob")

    assert friend.status == FriendStatus.pending
    assert friend.requested_at is not None
    assert list(store.records) == [(ALICE, BOB)]


def test_send_twice_is_a_duplicate(manager):
    manager.send_friend_request(ALICE, "bob")

    with pytest.raises(DuplicateRequestError) as e:
        manager.send_friend_request(ALICE, "bob@x.com")
    assert str(e.value) == "Friend request already exists or you are already friends"


def test_send_to_friend_is_a_duplicate(manager):
    manager.send_friend_request(ALICE, "bob")
    manager.accept_friend_request(BOB, "alice")

    with pytest.raises(DuplicateRequestError):
        manager.send_friend_request(ALICE, "bob")


@pytest.mark.parametrize("identifier", ["alice", "ALICE", "alice@x.com"])
def test_send_to_self_is_rejected(manager, identifier):
    with pytest.raises(SelfRequestError):
        manager.send_friend_request(ALICE, identifier)


def test_send_to_unknown_user(manager):
    with pytest.raises(UserNotFound) as e:
        manager.send_friend_request(ALICE, "nobody")
    assert str(e.value) == "User not found"


def test_reverse_request_is_not_detected_as_duplicate(manager, store):
    manager.send_friend_request(ALICE, "bob")
    manager.send_friend_request(BOB, "alice")

    assert set(store.records) == {(ALICE, BOB), (BOB, ALICE)}


def test_accept_makes_friends_on_both_sides(manager, store):
    manager.send_friend_request(ALICE, "bob")
    friend = manager.accept_friend_request(BOB, "alice")

    assert friend.status == FriendStatus.accepted
    assert friend.responded_at is not None
    assert store.get(ALICE, BOB).status == FriendStatus.accepted
    assert emails(manager.get_friends_list(ALICE)) == [BOB]
    assert emails(manager.get_friends_list(BOB)) == [ALICE]


def test_accept_without_request(manager):
    with pytest.raises(RequestNotFoundError) as e:
        manager.accept_friend_request(BOB, "alice")
    assert str(e.value) == "Friend request not found"


def test_sender_cannot_accept_own_request(manager):
    manager.send_friend_request(ALICE, "bob")

    with pytest.raises(RequestNotFoundError):
        manager.accept_friend_request(ALICE, "bob")


def test_accept_twice_keeps_first_response_time(manager):
    manager.send_friend_request(ALICE, "bob")
    first = manager.accept_friend_request(BOB, "alice").responded_at

    again = manager.accept_friend_request(BOB, "alice@x.com")

    assert again.status == FriendStatus.accepted
    assert again.responded_at == first


def test_remove_friend_deletes_either_direction(manager, store):
    manager.send_friend_request(ALICE, "bob")
    manager.accept_friend_request(BOB, "alice")

    # removed by the recipient of the original request
    assert manager.remove_friend(BOB, "alice") is True

    assert store.records == {}
    assert manager.get_friends_list(ALICE) == []
    assert manager.get_friends_list(BOB) == []


def test_remove_without_relation_is_silent(manager):
    assert manager.remove_friend(ALICE, "bob") is False


def test_pending_requests_list_senders(manager):
    manager.send_friend_request(ALICE, "bob")
    manager.send_friend_request("carol@x.com", "bob")
    manager.send_friend_request(BOB, "carol")

    assert sorted(emails(manager.get_pending_friend_requests(BOB))) == [
        ALICE,
        "carol@x.com",
    ]
    assert emails(manager.get_pending_friend_requests(ALICE)) == []


def test_decline_allows_requesting_again(manager, store):
    manager.send_friend_request(ALICE, "bob")

    assert manager.decline_friend_request(BOB, "alice") is True
    assert store.get(ALICE, BOB) is None

    friend = manager.send_friend_request(ALICE, "bob")
    assert friend.status == FriendStatus.pending


def test_decline_is_idempotent(manager):
    assert manager.decline_friend_request(BOB, "alice") is False


def test_cancel_removes_from_recipient_pending(manager):
    manager.send_friend_request(ALICE, "bob")

    assert manager.cancel_friend_request(ALICE, "bob") is True

    assert manager.get_pending_friend_requests(BOB) == []


def test_cancel_does_not_touch_incoming_requests(manager, store):
    manager.send_friend_request(BOB, "alice")

    assert manager.cancel_friend_request(ALICE, "bob") is False
    assert store.get(BOB, ALICE) is not None


def test_lists_skip_unresolvable_profiles(manager, directory, caplog):
    manager.send_friend_request(ALICE, "bob")
    manager.accept_friend_request(BOB, "alice")
    manager.send_friend_request("carol@x.com", "alice")
    manager.send_friend_request("carol@x.com", "bob")
    manager.accept_friend_request(BOB, "carol")
    del directory.users["carol@x.com"]

    with caplog.at_level(logging.WARNING, logger="dailyverse.friends"):
        assert emails(manager.get_friends_list(BOB)) == [ALICE]
        assert manager.get_pending_friend_requests(ALICE) == []

    assert "carol@x.com" in caplog.text


def test_full_lifecycle(manager, store):
    manager.send_friend_request(ALICE, "bob")
    assert list(store.records) == [(ALICE, BOB)]
    assert store.get(ALICE, BOB).status == FriendStatus.pending

    manager.accept_friend_request(BOB, "alice")
    assert store.get(ALICE, BOB).status == FriendStatus.accepted

    assert [u.username for u in manager.get_friends_list(ALICE)] == ["Bob"]

    manager.remove_friend(ALICE, "bob")
    assert store.get(ALICE, BOB) is None
    assert store.get(BOB, ALICE) is None
