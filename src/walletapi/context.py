"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine

from .config import BaseConfig
from .infra.database import SessionFactory, bootstrap_database
from .infra.repositories import SQLModelTransactionRepository, SQLModelUserRepository


@dataclass
class AppContext:
    """Configuration, engine and repositories shared by one application."""

    config: BaseConfig
    engine: Engine
    session_factory: SessionFactory
    transaction_repo: SQLModelTransactionRepository
    user_repo: SQLModelUserRepository

    def dispose(self) -> None:
        """Release pooled connections."""

        self.engine.dispose()


def create_app_context(config: Optional[BaseConfig] = None) -> AppContext:
    """Create the engine, initialize the schema and wire repositories."""

    if config is None:
        config = BaseConfig()

    engine, session_factory = bootstrap_database(config)

    return AppContext(
        config=config,
        engine=engine,
        session_factory=session_factory,
        transaction_repo=SQLModelTransactionRepository(session_factory),
        user_repo=SQLModelUserRepository(session_factory),
    )
