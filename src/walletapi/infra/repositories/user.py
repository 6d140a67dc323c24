"""SQLModel implementation of the user storage collaborator."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import select

from ...domain.errors import StorageError
from ...domain.records import UserRecord
from ...logging_config import get_logger
from ...models.user import User
from ..database import SessionFactory, storage_errors

logger = get_logger(__name__)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _to_record(user: User) -> UserRecord:
    return UserRecord(
        id=user.id,
        email=user.email,
        name=user.name,
        password_hash=user.password_hash,
        created_at=_as_utc(user.created_at),
        updated_at=_as_utc(user.updated_at),
    )


class SQLModelUserRepository:
    """SQLModel-based user repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def insert_user(self, *, email: str, name: str, password_hash: str) -> UserRecord:
        """Insert a user; the unique email constraint rejects duplicates."""

        try:
            with storage_errors("insert user"):
                with self.session_factory() as session:
                    user = User(email=email, name=name, password_hash=password_hash)
                    session.add(user)
                    session.commit()
                    session.refresh(user)
                    record = _to_record(user)
        except StorageError as exc:
            if isinstance(exc.__cause__, IntegrityError):
                raise StorageError(f"User with email {email!r} already exists") from exc.__cause__
            raise
        logger.info("User created", extra={"user_id": str(record.id)})
        return record

    def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        """Fetch a user by email."""

        with storage_errors("user lookup"):
            with self.session_factory() as session:
                user = session.exec(select(User).where(User.email == email)).first()
                return _to_record(user) if user else None

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by creation time."""

        with storage_errors("user listing"):
            with self.session_factory() as session:
                users = session.exec(select(User).order_by(User.created_at)).all()
                return [_to_record(user) for user in users]
