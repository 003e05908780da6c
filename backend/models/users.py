"""Account models"""

import datetime

from sqlalchemy import func
from sqlmodel import SQLModel, Field, Column

from .common import CamelModel, utc_now
from .types import UtcAwareDateTime


class User(SQLModel, CamelModel, table=True):
    __tablename__ = "users"

    email: str = Field(primary_key=True)
    username: str = Field(unique=True)
    # lowered copy of the username, the key for case-insensitive lookups
    username_lower: str = Field(unique=True, index=True)
    password_hash: str
    country: str
    city: str
    image_url: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    is_verified: bool = False
    otp: str | None = None
    otp_expires_at: datetime.datetime | None = Field(
        default=None,
        sa_column=Column(UtcAwareDateTime(), nullable=True),
    )

    join_date: datetime.datetime = Field(
        default_factory=utc_now,
        sa_column=Column(UtcAwareDateTime(), nullable=False),
    )
    updated_at: datetime.datetime | None = Field(
        default=None,
        sa_column=Column(UtcAwareDateTime(), onupdate=func.now(), nullable=True),
    )

    def set_username(self, username: str):
        self.username = username
        self.username_lower = username.lower()

    def __str__(self):
        return self.email


class UserSummary(CamelModel):
    """The public face of an account, as listed to friends"""

    username: str
    email: str
    country: str
    city: str
    image_url: str | None = None
    first_name: str | None = None
    last_name: str | None = None

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            username=user.username,
            email=user.email,
            country=user.country,
            city=user.city,
            image_url=user.image_url,
            first_name=user.first_name,
            last_name=user.last_name,
        )


class UserInfo(CamelModel):
    email: str
    username: str
    country: str
    city: str


class UserSearchResult(CamelModel):
    username: str
    email: str


class SignupRequest(CamelModel):
    email: str = ""
    username: str = ""
    password: str = ""
    country: str = ""
    city: str = ""
    first_name: str | None = None
    last_name: str | None = None


class LoginRequest(CamelModel):
    email: str = ""
    password: str = ""


class EmailRequest(CamelModel):
    email: str = ""


class VerifyEmailRequest(CamelModel):
    email: str = ""
    otp: str = ""


class ResetPasswordRequest(CamelModel):
    email: str = ""
    otp: str = ""
    new_password: str = ""


class ProfileUpdate(CamelModel):
    """Profile changes: every field but the current password is optional"""

    current_password: str = ""
    new_password: str | None = None
    username: str | None = None
    country: str | None = None
    city: str | None = None
    image_url: str | None = None
    first_name: str | None = None
    last_name: str | None = None


class Profile(UserSummary):
    pass


class TokenResponse(CamelModel):
    token: str
    message: str | None = None
