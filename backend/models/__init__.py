"""Models package for the DailyVerse backend"""

from .common import get_session, CamelModel
from .types import UtcAwareDateTime
from .users import User, UserSummary
from .friends import Friend, FriendStatus, FriendUpdate
from .organizer import Event, EventType, Journal

__all__ = [
    "CamelModel",
    "Event",
    "EventType",
    "Friend",
    "FriendStatus",
    "FriendUpdate",
    "Journal",
    "User",
    "UserSummary",
    "UtcAwareDateTime",
    "get_session",
]
