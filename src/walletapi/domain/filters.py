"""Request-scoped filter set for transaction queries."""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

from .vocabulary import TransactionCategory, TransactionType


@dataclass(frozen=True, slots=True)
class FilterSet:
    """Optional predicates narrowing a transaction fetch.

    Every field is optional; an empty filter set matches every transaction.
    """

    user_id: Optional[UUID] = None
    category: Optional[TransactionCategory] = None
    kind: Optional[TransactionType] = None
    amount_min: Optional[Decimal] = None
    amount_max: Optional[Decimal] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def present(self) -> dict[str, object]:
        """Return only the filters that carry a value."""

        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }


__all__ = ["FilterSet"]
