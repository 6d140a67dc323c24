"""Transaction queries, totals and creation over an injected storage handle."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Mapping, Optional
from uuid import UUID

from ..domain.errors import InvalidEnumValue, MissingRequiredFilter, NotFound, RowMappingError
from ..domain.filters import FilterSet
from ..domain.money import normalize_amount
from ..domain.records import TransactionRecord
from ..domain.repositories import TransactionStorage, UserStorage
from ..domain.vocabulary import DEFAULT_CATEGORY, TransactionCategory, TransactionType
from .query_builder import build_transaction_query


def _column(row: Mapping[str, Any], name: str) -> Any:
    try:
        return row[name]
    except KeyError:
        raise RowMappingError(name, None, "column missing from row") from None


def _typed(row: Mapping[str, Any], name: str, expected: type) -> Any:
    value = _column(row, name)
    if not isinstance(value, expected):
        raise RowMappingError(name, value, f"expected {expected.__name__}")
    return value


def _timestamp(row: Mapping[str, Any], name: str) -> datetime:
    value = _typed(row, name, datetime)
    # SQLite hands back naive values; everything is written in UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def map_transaction_row(row: Mapping[str, Any]) -> TransactionRecord:
    """Rebuild a typed record from a raw transaction row.

    Raises:
        RowMappingError: a column is missing, has the wrong type, or holds a
            label outside the vocabulary.
    """

    raw_kind = _column(row, "transaction_type")
    raw_category = _column(row, "category")
    try:
        kind = TransactionType.parse(raw_kind)
        category = TransactionCategory.parse(raw_category)
    except InvalidEnumValue as exc:
        raise RowMappingError(exc.field, exc.value, "not a known label") from exc

    amount = _column(row, "amount")
    if isinstance(amount, bool) or not isinstance(amount, (Decimal, int)):
        raise RowMappingError("amount", amount, "expected an exact decimal")

    description = _column(row, "description")
    if description is None:
        description = ""
    elif not isinstance(description, str):
        raise RowMappingError("description", description, "expected str")

    return TransactionRecord(
        id=_typed(row, "id", UUID),
        user_id=_typed(row, "user_id", UUID),
        kind=kind,
        amount=Decimal(amount),
        category=category,
        description=description,
        created_at=_timestamp(row, "created_at"),
        updated_at=_timestamp(row, "updated_at"),
    )


def fetch_transactions(storage: TransactionStorage, filters: FilterSet) -> list[TransactionRecord]:
    """Return every transaction matching ``filters`` in storage order.

    One query is issued. If any row fails to map the whole call fails and no
    partial list is returned.
    """

    rows = storage.execute_parameterized(build_transaction_query(filters))
    return [map_transaction_row(row) for row in rows]


def sum_transactions(storage: TransactionStorage, filters: FilterSet) -> Decimal:
    """Return the signed total of the user's transactions matching ``filters``."""

    if filters.user_id is None:
        raise MissingRequiredFilter("user_id")

    total = Decimal("0")
    for record in fetch_transactions(storage, filters):
        total += record.amount
    return total


def create_transaction(
    transactions: TransactionStorage,
    users: UserStorage,
    *,
    user_email: str,
    kind: TransactionType,
    amount: Decimal | int,
    category: Optional[TransactionCategory] = None,
    description: Optional[str] = None,
) -> TransactionRecord:
    """Record a transaction for the user registered under ``user_email``.

    The stored amount takes its sign from ``kind``; ``category`` defaults to
    ``Other`` and ``description`` to an empty string.
    """

    kind = TransactionType.parse(kind)
    category = DEFAULT_CATEGORY if category is None else TransactionCategory.parse(category)
    signed_amount = normalize_amount(kind, amount)

    user = users.find_user_by_email(user_email)
    if user is None:
        raise NotFound("user", user_email)

    return transactions.insert_transaction(
        user_id=user.id,
        kind=kind,
        amount=signed_amount,
        category=category,
        description=description or "",
    )


__all__ = [
    "create_transaction",
    "fetch_transactions",
    "map_transaction_row",
    "sum_transactions",
]
