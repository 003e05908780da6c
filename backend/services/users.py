"""Accounts: signup with email verification, login, password recovery, search"""

import datetime
import hmac
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from models.users import SignupRequest, User, UserInfo, UserSearchResult
from services import email
from services.errors import (
    AuthenticationError,
    InvalidRequestError,
    NotFoundError,
    ServiceError,
    StoreError,
)
from services.security import (
    check_password,
    create_access_token,
    generate_otp,
    hash_password,
    is_valid_email,
    is_valid_password,
    normalize_email,
    otp_expiry,
)
from services.slack import slack

logger = logging.getLogger("dailyverse.users")

SEARCH_LIMIT = 20
PASSWORD_COMPLEXITY_ERROR = "Password does not meet complexity requirements"


def save_user(session: Session, user: User) -> User:
    session.add(user)
    try:
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.exception(f"Cannot save user {user.email}: {e}")
        raise StoreError("Failed to save user") from e
    return user


def get_user(session: Session, email: str) -> User | None:
    return session.get(User, normalize_email(email))


def get_user_or_404(session: Session, email: str) -> User:
    user = get_user(session, email)
    if user is None:
        raise NotFoundError("User not found")
    return user


def username_taken(session: Session, username: str, *, exclude_email=None) -> bool:
    query = select(User).where(User.username_lower == username.lower())
    if exclude_email:
        query = query.where(User.email != exclude_email)
    return session.exec(query).first() is not None


def _issue_otp(user: User) -> str:
    user.otp = generate_otp()
    user.otp_expires_at = otp_expiry()
    return user.otp


def _check_otp(user: User, otp: str):
    if not user.otp or not hmac.compare_digest(
        user.otp.encode(), (otp or "").strip().encode()
    ):
        raise InvalidRequestError("Invalid OTP")
    now = datetime.datetime.now(datetime.timezone.utc)
    if user.otp_expires_at is None or user.otp_expires_at < now:
        raise InvalidRequestError("OTP has expired")


def signup(session: Session, request: SignupRequest) -> User:
    email_address = normalize_email(request.email)
    username = request.username.strip()
    country = request.country.strip()
    city = request.city.strip()
    if not (country and city and email_address and username and request.password):
        raise InvalidRequestError(
            "Country, City, Email, Username, and Password are required"
        )
    if not is_valid_email(email_address):
        raise InvalidRequestError("Invalid email address")
    if get_user(session, email_address):
        raise InvalidRequestError("Email already registered")
    if username_taken(session, username):
        raise InvalidRequestError("Username already taken")
    if not is_valid_password(request.password):
        raise InvalidRequestError(PASSWORD_COMPLEXITY_ERROR)

    user = User(
        email=email_address,
        username=username,
        username_lower=username.lower(),
        password_hash=hash_password(request.password),
        country=country,
        city=city,
        first_name=request.first_name,
        last_name=request.last_name,
    )
    otp = _issue_otp(user)
    save_user(session, user)
    logger.info(f"New signup: {user.email}")

    if not email.send_verification_email(user.email, otp) and email.smtp_configured():
        raise ServiceError("Failed to send verification email")
    slack.send_message(f"New DailyVerse signup: {user.username} ({user.country})")
    return user


def login(session: Session, email_address: str, password: str) -> str:
    user = get_user(session, email_address)
    if user is None or not check_password(password, user.password_hash):
        raise AuthenticationError("Email or password is incorrect")
    if not user.is_verified:
        raise AuthenticationError("Email not verified")
    return create_access_token(user.email)


def resend_otp(session: Session, email_address: str):
    user = get_user(session, email_address)
    if user is None:
        raise NotFoundError("Email not registered")
    if user.is_verified:
        raise InvalidRequestError("Email is already verified")
    otp = _issue_otp(user)
    save_user(session, user)
    if not email.send_verification_email(user.email, otp) and email.smtp_configured():
        raise ServiceError("Failed to send verification email")


def verify_email(session: Session, email_address: str, otp: str) -> str:
    user = get_user(session, email_address)
    if user is None:
        raise InvalidRequestError("Invalid email or OTP")
    if user.is_verified:
        raise InvalidRequestError("Email is already verified")
    _check_otp(user, otp)

    user.is_verified = True
    user.otp = None
    user.otp_expires_at = None
    save_user(session, user)
    logger.info(f"Email verified: {user.email}")
    return create_access_token(user.email)


def forgot_password(session: Session, email_address: str):
    """Send a reset code, unknown addresses are silently ignored"""
    user = get_user(session, email_address)
    if user is None:
        logger.debug(f"Password reset asked for unknown address {email_address}")
        return
    otp = _issue_otp(user)
    save_user(session, user)
    if not email.send_password_reset_email(user.email, otp) and email.smtp_configured():
        raise ServiceError("Failed to send password reset email")


def reset_password(session: Session, email_address: str, otp: str, new_password: str):
    user = get_user(session, email_address)
    if user is None:
        raise InvalidRequestError("Invalid email or OTP")
    _check_otp(user, otp)
    if not is_valid_password(new_password):
        raise InvalidRequestError(PASSWORD_COMPLEXITY_ERROR)

    user.password_hash = hash_password(new_password)
    user.otp = None
    user.otp_expires_at = None
    save_user(session, user)
    logger.info(f"Password reset for {user.email}")


def get_user_info(session: Session, email_address: str) -> UserInfo:
    user = get_user_or_404(session, email_address)
    return UserInfo(
        email=user.email, username=user.username, country=user.country, city=user.city
    )


def search_users(session: Session, acting: str, query: str) -> list[UserSearchResult]:
    prefix = query.strip().lower()
    if not prefix:
        return []
    # escape LIKE wildcards, the prefix match is literal
    pattern = prefix.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    users = session.exec(
        select(User)
        .where(
            User.username_lower.like(f"{pattern}%", escape="\\"),
            User.email != normalize_email(acting),
        )
        .order_by(User.username_lower)
        .limit(SEARCH_LIMIT)
    ).all()
    return [UserSearchResult(username=u.username, email=u.email) for u in users]
