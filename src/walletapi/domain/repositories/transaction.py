"""Transaction storage protocol."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Any, Mapping, Protocol, Sequence
from uuid import UUID

from ..records import TransactionRecord
from ..vocabulary import TransactionCategory, TransactionType

if TYPE_CHECKING:  # pragma: no cover - import guard for circular dependency
    from ...services.query_builder import TransactionQuery


class TransactionStorage(Protocol):
    """Storage collaborator consumed by the query and aggregation flows."""

    def execute_parameterized(self, query: "TransactionQuery") -> Sequence[Mapping[str, Any]]:
        """Run a composed query with its bound parameters and return raw rows."""
        ...

    def insert_transaction(
        self,
        *,
        user_id: UUID,
        kind: TransactionType,
        amount: Decimal,
        category: TransactionCategory,
        description: str,
    ) -> TransactionRecord:
        """Insert a single transaction row."""
        ...
