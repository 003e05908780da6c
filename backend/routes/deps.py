from fastapi import Depends, HTTPException, Request
from sqlmodel import Session

from models.common import get_session
from services.directory import UserDirectory
from services.errors import AuthenticationError
from services.friend_store import SqlFriendStore
from services.friendship import FriendManager
from services.security import decode_access_token


def get_current_email(request: Request) -> str | None:
    """The email in the bearer token, None when no Authorization header is sent"""
    authorization = request.headers.get("Authorization")
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(
            status_code=401,
            detail="Authorization token format must be 'Bearer <token>'",
        )
    try:
        return decode_access_token(token.strip())
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=e.message)


def current_email(email: str | None = Depends(get_current_email)) -> str:
    if email is None:
        raise HTTPException(status_code=401, detail="Authorization token is missing")
    return email


def get_friend_manager(session: Session = Depends(get_session)) -> FriendManager:
    return FriendManager(SqlFriendStore(session), UserDirectory(session))
