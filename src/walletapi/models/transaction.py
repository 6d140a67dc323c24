"""SQLModel definitions for wallet transactions."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, ClassVar
from uuid import UUID, uuid4

from sqlalchemy import DateTime
from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel

from ._timestamps import utcnow
from ._types import ExactAmount

if TYPE_CHECKING:  # pragma: no cover - import guard for circular dependency
    from .user import User


class Transaction(SQLModel, table=True):
    """A single expense or income entry.

    ``amount`` is signed: negative for expenses, positive for income. Kind and
    category hold the canonical vocabulary labels.
    """

    __tablename__: ClassVar[str] = "transactions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)
    transaction_type: str = Field(nullable=False, index=True, max_length=16)
    amount: Decimal = Field(sa_type=ExactAmount, nullable=False)
    category: str = Field(nullable=False, index=True, max_length=255)
    description: str = Field(default="")
    created_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        index=True,
        sa_type=DateTime(timezone=True),
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_type=DateTime(timezone=True),
    )

    user: "User" = Relationship(
        back_populates="transactions",
        sa_relationship=relationship("User", back_populates="transactions"),
    )
