"""Repository protocol definitions for domain layer."""

from .transaction import TransactionStorage
from .user import UserStorage

__all__ = [
    "TransactionStorage",
    "UserStorage",
]
