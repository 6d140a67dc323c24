"""Blueprint exports."""

from . import health, transactions, users

__all__ = [
    "health",
    "transactions",
    "users",
]
