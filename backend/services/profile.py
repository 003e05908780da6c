import logging

from sqlmodel import Session

from models.users import Profile, ProfileUpdate
from services.errors import InvalidRequestError
from services.security import check_password, hash_password, is_valid_password
from services.users import (
    PASSWORD_COMPLEXITY_ERROR,
    get_user_or_404,
    save_user,
    username_taken,
)

logger = logging.getLogger("dailyverse.profile")


def get_profile(session: Session, email_address: str) -> Profile:
    return Profile.from_user(get_user_or_404(session, email_address))


def update_profile(session: Session, email_address: str, changes: ProfileUpdate):
    """Apply the changes after checking the current password.

    The email is the account key and is never changed here.
    """
    user = get_user_or_404(session, email_address)
    if not check_password(changes.current_password, user.password_hash):
        raise InvalidRequestError("Invalid current password")

    if changes.new_password:
        if not is_valid_password(changes.new_password):
            raise InvalidRequestError(PASSWORD_COMPLEXITY_ERROR)
        user.password_hash = hash_password(changes.new_password)

    if changes.username is not None:
        username = changes.username.strip()
        if not username:
            raise InvalidRequestError("Username cannot be empty")
        if username_taken(session, username, exclude_email=user.email):
            raise InvalidRequestError("Username already taken")
        user.set_username(username)

    for field in ("country", "city", "image_url", "first_name", "last_name"):
        value = getattr(changes, field)
        if value is not None:
            setattr(user, field, value.strip())

    save_user(session, user)
    logger.debug(f"Profile updated: {user.email}")
    return user
