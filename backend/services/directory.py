from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from models.users import User
from services.errors import StoreError, UserNotFound
from services.security import normalize_email


class UserDirectory:
    """Resolve accounts by their email or by their (case-insensitive) username"""

    def __init__(self, session: Session):
        self.session = session

    def resolve_by_address(self, email: str) -> User:
        try:
            user = self.session.get(User, normalize_email(email))
        except SQLAlchemyError as e:
            raise StoreError("Failed to fetch user") from e
        if user is None:
            raise UserNotFound()
        return user

    def resolve_by_handle(self, username: str) -> User:
        try:
            user = self.session.exec(
                select(User).where(User.username_lower == username.strip().lower())
            ).first()
        except SQLAlchemyError as e:
            raise StoreError("Failed to fetch user") from e
        if user is None:
            raise UserNotFound()
        return user
