"""Passwords, one-time codes and access tokens"""

import datetime
import hashlib
import hmac
import re
import secrets
import string
import unicodedata

from jose import jwt, JWTError

import settings
from services.errors import AuthenticationError

EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&'*+/=?^_`{|}~-]+@[a-zA-Z0-9-]+(?:\.[a-zA-Z0-9-]+)*$"
)
PBKDF2_ITERATIONS = 260_000
OTP_LENGTH = 6


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email or ""))


def _is_special(char: str) -> bool:
    # Unicode punctuation (P*) or symbol (S*) categories
    return unicodedata.category(char)[0] in ("P", "S")


def is_valid_password(password: str) -> bool:
    """At least 8 characters, with an uppercase letter, a digit and a symbol"""
    if len(password or "") < 8:
        return False
    has_upper = any(c.isupper() for c in password)
    has_digit = any(c.isdigit() for c in password)
    has_special = any(_is_special(c) for c in password)
    return has_upper and has_digit and has_special


def hash_password(password: str, *, salt: str | None = None) -> str:
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode(), salt.encode(), PBKDF2_ITERATIONS
    )
    return f"pbkdf2_sha256${PBKDF2_ITERATIONS}${salt}${digest.hex()}"


def check_password(password: str, password_hash: str) -> bool:
    try:
        algorithm, iterations, salt, expected = password_hash.split("$")
    except (AttributeError, ValueError):
        return False
    if algorithm != "pbkdf2_sha256":
        return False
    digest = hashlib.pbkdf2_hmac(
        "sha256", (password or "").encode(), salt.encode(), int(iterations)
    )
    return hmac.compare_digest(digest.hex(), expected)


def generate_otp() -> str:
    return "".join(secrets.choice(string.digits) for _ in range(OTP_LENGTH))


def otp_expiry(now: datetime.datetime | None = None) -> datetime.datetime:
    now = now or datetime.datetime.now(datetime.timezone.utc)
    return now + datetime.timedelta(minutes=settings.OTP_TTL_MINUTES)


def create_access_token(email: str, expires_delta: datetime.timedelta | None = None):
    expire = datetime.datetime.now(datetime.timezone.utc) + (
        expires_delta or datetime.timedelta(hours=settings.JWT_EXPIRE_HOURS)
    )
    return jwt.encode(
        {"email": email, "exp": expire},
        settings.JWT_SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str) -> str:
    """Return the email carried by a valid token"""
    try:
        payload = jwt.decode(
            token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM]
        )
    except JWTError as e:
        raise AuthenticationError("Invalid or expired token") from e
    email = payload.get("email")
    if not email:
        raise AuthenticationError("Invalid or expired token")
    return email
