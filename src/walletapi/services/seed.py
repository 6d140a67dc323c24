"""Demo data used by the ``walletapi-seed`` command."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional

from ..domain.filters import FilterSet
from ..domain.repositories import TransactionStorage, UserStorage
from ..domain.vocabulary import TransactionCategory, TransactionType
from . import transactions as transaction_service
from . import users as user_service


@dataclass(frozen=True)
class SeedUser:
    email: str
    name: str
    password: str


@dataclass(frozen=True)
class SeedTransaction:
    user_email: str
    kind: TransactionType
    amount: Decimal
    category: Optional[TransactionCategory]
    description: str


SEED_USERS: tuple[SeedUser, ...] = (
    SeedUser("alice@example.com", "Alice", "password123"),
    SeedUser("bob@example.com", "Bob", "password123"),
    SeedUser("carol@example.com", "Carol", "password123"),
)

SEED_TRANSACTIONS: tuple[SeedTransaction, ...] = (
    SeedTransaction(
        "alice@example.com", TransactionType.INCOME, Decimal("2500"),
        TransactionCategory.OTHER, "seed: salary",
    ),
    SeedTransaction(
        "alice@example.com", TransactionType.EXPENSE, Decimal("42.75"),
        TransactionCategory.GROCERIES, "seed: groceries",
    ),
    SeedTransaction(
        "bob@example.com", TransactionType.EXPENSE, Decimal("18"),
        TransactionCategory.RESTAURANT, "seed: lunch",
    ),
    SeedTransaction(
        "carol@example.com", TransactionType.INCOME, Decimal("120"),
        TransactionCategory.OTHER, "seed: refund",
    ),
)


@dataclass
class SeedReport:
    users_created: int = 0
    transactions_created: int = 0


def seed_demo_data(
    users: UserStorage,
    transactions: TransactionStorage,
    *,
    seed_users: Iterable[SeedUser] = SEED_USERS,
    seed_transactions: Iterable[SeedTransaction] = SEED_TRANSACTIONS,
) -> SeedReport:
    """Insert the demo users and transactions that are not already present.

    Users are matched by email and transactions by description, so running the
    seed twice leaves the data unchanged.
    """

    report = SeedReport()
    for seed_user in seed_users:
        if users.find_user_by_email(seed_user.email) is not None:
            continue
        user_service.register_user(
            users, email=seed_user.email, name=seed_user.name, password=seed_user.password
        )
        report.users_created += 1

    for seed_tx in seed_transactions:
        owner = user_service.get_user(users, seed_tx.user_email)
        existing = transaction_service.fetch_transactions(
            transactions, FilterSet(user_id=owner.id)
        )
        if any(record.description == seed_tx.description for record in existing):
            continue
        transaction_service.create_transaction(
            transactions,
            users,
            user_email=seed_tx.user_email,
            kind=seed_tx.kind,
            amount=seed_tx.amount,
            category=seed_tx.category,
            description=seed_tx.description,
        )
        report.transactions_created += 1
    return report
