"""Database infrastructure: engine, schema, sessions and error translation."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Callable, ContextManager, Iterator, Tuple

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine

from ..config import BaseConfig
from ..domain.errors import StorageError

SessionFactory = Callable[[], ContextManager[Session]]


def create_db_engine(config: BaseConfig) -> Engine:
    """Create SQLModel engine from configuration."""
    engine_options = config.sqlalchemy_engine_options()
    return create_engine(config.DATABASE_URL, **engine_options)


def init_database(engine: Engine) -> None:
    """Initialize database schema."""
    # Import all models to ensure they're registered
    from .. import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def create_session_factory(engine: Engine) -> SessionFactory:
    """Create a session factory function."""

    @contextmanager
    def factory() -> Iterator[Session]:
        """Create a new session scoped to one storage call."""
        session = Session(engine, expire_on_commit=False)
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return factory


def bootstrap_database(config: BaseConfig | None = None) -> Tuple[Engine, SessionFactory]:
    """Convenience bootstrap for engine + session_factory with schema init.

    Used by the application factory, the CLI and tests so every entry point
    shares the same engine options. Returns (engine, session_factory).
    """

    cfg = config or BaseConfig()
    engine = create_db_engine(cfg)
    init_database(engine)
    return engine, create_session_factory(engine)


def health_check(engine: Engine) -> None:
    """Run a trivial query; raises ``StorageError`` when the database is unreachable."""

    with storage_errors("health check"):
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as ``StorageError`` with the original as cause."""

    try:
        yield
    except SQLAlchemyError as exc:
        raise StorageError(f"{operation} failed: {exc.__class__.__name__}") from exc


__all__ = [
    "bootstrap_database",
    "create_db_engine",
    "create_session_factory",
    "health_check",
    "init_database",
    "SessionFactory",
    "storage_errors",
]
