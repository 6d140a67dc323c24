"""SQLModel implementation of the transaction storage collaborator."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Mapping
from uuid import UUID

from sqlalchemy import bindparam, text

from ...domain.records import TransactionRecord
from ...domain.vocabulary import TransactionCategory, TransactionType
from ...logging_config import get_logger
from ...models.transaction import Transaction
from ...services.query_builder import TransactionQuery
from ...services.transactions import map_transaction_row
from ..database import SessionFactory, storage_errors

logger = get_logger(__name__)

_TABLE = Transaction.__table__


class SQLModelTransactionRepository:
    """SQLModel-based transaction repository implementation."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def execute_parameterized(self, query: TransactionQuery) -> list[Mapping[str, Any]]:
        """Run a composed SELECT, binding each value with its column's SQL type."""

        statement = (
            text(query.sql)
            .bindparams(
                *(
                    bindparam(param.name, param.value, type_=_TABLE.c[param.column].type)
                    for param in query.params
                )
            )
            .columns(**{column.name: column.type for column in _TABLE.columns})
        )
        logger.debug(
            "Executing transaction query",
            extra={"sql": query.sql, "params": [param.name for param in query.params]},
        )
        with storage_errors("transaction query"):
            with self.session_factory() as session:
                rows = session.exec(statement).mappings().all()
                return [dict(row) for row in rows]

    def insert_transaction(
        self,
        *,
        user_id: UUID,
        kind: TransactionType,
        amount: Decimal,
        category: TransactionCategory,
        description: str,
    ) -> TransactionRecord:
        """Insert one transaction row and return it as stored."""

        with storage_errors("insert transaction"):
            with self.session_factory() as session:
                row = Transaction(
                    user_id=user_id,
                    transaction_type=kind.canonical(),
                    amount=amount,
                    category=category.canonical(),
                    description=description,
                )
                session.add(row)
                session.commit()
                session.refresh(row)
                stored = {column.name: getattr(row, column.name) for column in _TABLE.columns}

        logger.info(
            "Transaction inserted",
            extra={"transaction_id": str(stored["id"]), "user_id": str(user_id)},
        )
        return map_transaction_row(stored)
