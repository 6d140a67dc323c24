"""User registration and lookup services."""

from __future__ import annotations

from argon2 import PasswordHasher

from ..domain.errors import NotFound
from ..domain.records import UserRecord
from ..domain.repositories import UserStorage

_hasher = PasswordHasher()


def _normalize_email(email: str) -> str:
    return (email or "").strip()


def register_user(users: UserStorage, *, email: str, name: str, password: str) -> UserRecord:
    """Create a new user with hashed password."""

    email = _normalize_email(email)
    password_hash = _hasher.hash(password)
    return users.insert_user(email=email, name=name.strip(), password_hash=password_hash)


def get_user(users: UserStorage, email: str) -> UserRecord:
    """Fetch a user by email, raising ``NotFound`` when none is registered."""

    email = _normalize_email(email)
    user = users.find_user_by_email(email)
    if user is None:
        raise NotFound("user", email)
    return user


def list_users(users: UserStorage) -> list[UserRecord]:
    """Return all users ordered by creation time."""

    return users.list_users()


__all__ = ["get_user", "list_users", "register_user"]
