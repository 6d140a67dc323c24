"""Closed vocabularies for transaction kind and spending category."""

from __future__ import annotations

from enum import Enum
from typing import Any

from .errors import InvalidEnumValue


class _Vocabulary(str, Enum):
    """String enum with strict parsing against its canonical labels."""

    @classmethod
    def parse(cls, value: Any):
        """Return the member whose canonical label equals ``value`` exactly."""

        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        raise InvalidEnumValue(cls.field_name(), value)

    @classmethod
    def field_name(cls) -> str:
        """Name reported in ``InvalidEnumValue.field``."""

        return "value"

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)

    def canonical(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class TransactionType(_Vocabulary):
    """Direction of a transaction."""

    EXPENSE = "Expense"
    INCOME = "Income"

    @classmethod
    def field_name(cls) -> str:
        return "transaction_type"


class TransactionCategory(_Vocabulary):
    """Classification label for a transaction's purpose."""

    GROCERIES = "Groceries"
    RESTAURANT = "Restaurant"
    HOUSING = "Housing"
    HOLIDAYS = "Holidays"
    SHOPPING = "Shopping"
    ENTERTAINMENT = "Entertainment"
    OTHER = "Other"

    @classmethod
    def field_name(cls) -> str:
        return "category"


DEFAULT_CATEGORY = TransactionCategory.OTHER

__all__ = ["DEFAULT_CATEGORY", "TransactionCategory", "TransactionType"]
