"""Typed results handed back by the storage layer and services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from uuid import UUID

from .vocabulary import TransactionCategory, TransactionType


@dataclass(frozen=True, slots=True)
class UserRecord:
    """A registered user as stored."""

    id: UUID
    email: str
    name: str
    password_hash: str
    created_at: datetime
    updated_at: datetime

    def projection(self) -> dict[str, str]:
        """Public view of the user; the credential hash is never included."""

        return {
            "id": str(self.id),
            "email": self.email,
            "name": self.name,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class TransactionRecord:
    """A transaction whose kind and category passed vocabulary parsing."""

    id: UUID
    user_id: UUID
    kind: TransactionType
    amount: Decimal
    category: TransactionCategory
    description: str
    created_at: datetime
    updated_at: datetime

    def projection(self) -> dict[str, str]:
        return {
            "id": str(self.id),
            "user_id": str(self.user_id),
            "transaction_type": self.kind.canonical(),
            "amount": str(self.amount),
            "category": self.category.canonical(),
            "description": self.description,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


__all__ = ["TransactionRecord", "UserRecord"]
