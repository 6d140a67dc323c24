"""User storage protocol."""

from __future__ import annotations

from typing import Optional, Protocol

from ..records import UserRecord


class UserStorage(Protocol):
    """Storage collaborator for registered users."""

    def insert_user(self, *, email: str, name: str, password_hash: str) -> UserRecord:
        """Insert a user; a duplicate email raises ``StorageError``."""
        ...

    def find_user_by_email(self, email: str) -> Optional[UserRecord]:
        """Return the user registered under ``email`` if any."""
        ...

    def list_users(self) -> list[UserRecord]:
        """Return every user ordered by creation time."""
        ...
