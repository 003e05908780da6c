from fastapi import APIRouter, Depends

from models.friends import FriendIdentifier, FriendUsername
from models.users import UserSummary
from routes.deps import current_email, get_friend_manager
from services.errors import InvalidRequestError
from services.friendship import FriendManager

router = APIRouter(prefix="/friends")


def _required(identifier: str) -> str:
    identifier = (identifier or "").strip()
    if not identifier:
        raise InvalidRequestError("Username or Email is required")
    return identifier


@router.post("/add")
async def add_friend(
    body: FriendIdentifier,
    email: str = Depends(current_email),
    friends: FriendManager = Depends(get_friend_manager),
):
    friends.send_friend_request(email, _required(body.username_or_email))
    return {"message": "Friend request sent"}


@router.post("/accept")
async def accept_friend(
    body: FriendIdentifier,
    email: str = Depends(current_email),
    friends: FriendManager = Depends(get_friend_manager),
):
    friends.accept_friend_request(email, _required(body.username_or_email))
    return {"message": "Friend request accepted"}


@router.get("/list", response_model=list[UserSummary])
async def list_friends(
    email: str = Depends(current_email),
    friends: FriendManager = Depends(get_friend_manager),
):
    return [UserSummary.from_user(user) for user in friends.get_friends_list(email)]


@router.delete("/delete")
async def remove_friend(
    body: FriendUsername,
    email: str = Depends(current_email),
    friends: FriendManager = Depends(get_friend_manager),
):
    friends.remove_friend(email, _required(body.username))
    return {"message": "Friend removed"}


@router.get("/requests", response_model=list[UserSummary])
async def pending_requests(
    email: str = Depends(current_email),
    friends: FriendManager = Depends(get_friend_manager),
):
    return [
        UserSummary.from_user(user)
        for user in friends.get_pending_friend_requests(email)
    ]


@router.post("/decline")
async def decline_friend(
    body: FriendIdentifier,
    email: str = Depends(current_email),
    friends: FriendManager = Depends(get_friend_manager),
):
    friends.decline_friend_request(email, _required(body.username_or_email))
    return {"message": "Friend request declined"}


@router.post("/cancel")
async def cancel_friend(
    body: FriendUsername,
    email: str = Depends(current_email),
    friends: FriendManager = Depends(get_friend_manager),
):
    friends.cancel_friend_request(email, _required(body.username))
    return {"message": "Friend request canceled"}
