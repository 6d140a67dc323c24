"""Domain types: vocabulary, money rules, filters, records and errors."""

from .errors import (
    InvalidEnumValue,
    MissingRequiredFilter,
    NotFound,
    RowMappingError,
    StorageError,
    WalletError,
)
from .filters import FilterSet
from .money import normalize_amount
from .records import TransactionRecord, UserRecord
from .vocabulary import DEFAULT_CATEGORY, TransactionCategory, TransactionType

__all__ = [
    "DEFAULT_CATEGORY",
    "FilterSet",
    "InvalidEnumValue",
    "MissingRequiredFilter",
    "NotFound",
    "RowMappingError",
    "StorageError",
    "TransactionCategory",
    "TransactionRecord",
    "TransactionType",
    "UserRecord",
    "WalletError",
    "normalize_amount",
]
