"""Pytest configuration and shared fixtures for WalletAPI tests.

This module provides database fixtures, repositories, test data factories and
an in-memory storage double for exercising the query and aggregation flows
without touching the real application database.
"""

from __future__ import annotations

import tempfile
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Any, Mapping, Sequence
from uuid import uuid4

import pytest
from sqlmodel import SQLModel, create_engine

# Import all models to ensure they're registered with SQLModel metadata
from walletapi import create_app
from walletapi.domain.vocabulary import TransactionCategory, TransactionType
from walletapi.extensions import get_context
from walletapi.infra.database import create_session_factory
from walletapi.infra.repositories import SQLModelTransactionRepository, SQLModelUserRepository
from walletapi.models import Transaction, User  # noqa: F401
from walletapi.services import transactions as transaction_service
from walletapi.services import users as user_service

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to the test database
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one the application wires into repositories."""

    return create_session_factory(db_engine)


@pytest.fixture
def user_repo(session_factory) -> SQLModelUserRepository:
    return SQLModelUserRepository(session_factory)


@pytest.fixture
def transaction_repo(session_factory) -> SQLModelTransactionRepository:
    return SQLModelTransactionRepository(session_factory)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def user_factory(user_repo):
    """Factory for registering users through the service layer.

    Returns:
        Callable: Function that registers and returns a ``UserRecord``
    """

    def _create_user(
        email: str = "alice@example.com",
        name: str = "Alice",
        password: str = "password123",
    ):
        return user_service.register_user(user_repo, email=email, name=name, password=password)

    return _create_user


@pytest.fixture
def transaction_factory(transaction_repo, user_repo):
    """Factory for recording transactions for an existing user.

    Returns:
        Callable: Function that creates and returns a ``TransactionRecord``
    """

    def _create_transaction(
        user_email: str,
        amount: Decimal | int = Decimal("10"),
        kind: TransactionType = TransactionType.EXPENSE,
        category: TransactionCategory | None = None,
        description: str | None = None,
    ):
        return transaction_service.create_transaction(
            transaction_repo,
            user_repo,
            user_email=user_email,
            kind=kind,
            amount=amount,
            category=category,
            description=description,
        )

    return _create_transaction


# =============================================================================
# Storage double
# =============================================================================


class FakeTransactionStorage:
    """In-memory storage that records every query it is handed."""

    def __init__(self, rows: Sequence[Mapping[str, Any]] = (), error: Exception | None = None):
        self.rows = list(rows)
        self.error = error
        self.queries: list = []

    def execute_parameterized(self, query):
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return list(self.rows)

    def insert_transaction(self, **kwargs):  # pragma: no cover - not used by query tests
        raise NotImplementedError


def make_row(**overrides: Any) -> dict[str, Any]:
    """Build a raw transaction row as the storage layer returns it."""

    stamp = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    row: dict[str, Any] = {
        "id": uuid4(),
        "user_id": uuid4(),
        "transaction_type": "Expense",
        "amount": Decimal("-20.0000"),
        "category": "Groceries",
        "description": "",
        "created_at": stamp,
        "updated_at": stamp,
    }
    row.update(overrides)
    return row


@pytest.fixture
def row_factory():
    """Factory for raw transaction rows."""

    return make_row


@pytest.fixture
def fake_storage():
    """Factory for ``FakeTransactionStorage`` instances."""

    def _build(rows: Sequence[Mapping[str, Any]] = (), error: Exception | None = None):
        return FakeTransactionStorage(rows=rows, error=error)

    return _build


# =============================================================================
# Flask application
# =============================================================================


@pytest.fixture
def app(tmp_path, monkeypatch):
    """Application bound to a throwaway data directory and SQLite file."""

    monkeypatch.setenv("WALLETAPI_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("WALLETAPI_DATABASE_URL", f"sqlite:///{tmp_path / 'walletapi-test.db'}")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    application = create_app("testing")
    yield application
    get_context(application).dispose()


@pytest.fixture
def client(app):
    with app.test_client() as test_client:
        yield test_client
