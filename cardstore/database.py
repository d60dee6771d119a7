"""Database configuration and transaction scopes."""

import logging
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from enum import Enum
from typing import TypeVar

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.orm import DeclarativeBase

from cardstore.binder import StatementBinder
from cardstore.config import Settings, settings

logger = logging.getLogger(__name__)

T = TypeVar("T")


# Base class for ORM models
class Base(DeclarativeBase):
    """Base class for all SQLAlchemy ORM models."""

    pass


class Dialect(str, Enum):
    """Storage engines the card store knows how to talk to."""

    POSTGRES = "postgres"
    SQLITE = "sqlite3"
    MYSQL = "mysql"

    @classmethod
    def from_engine(cls, engine: Engine) -> "Dialect":
        """Derive the dialect from a SQLAlchemy engine."""
        name = engine.dialect.name
        if name == "postgresql":
            return cls.POSTGRES
        if name == "sqlite":
            return cls.SQLITE
        if name in ("mysql", "mariadb"):
            return cls.MYSQL
        raise ValueError(f"Unsupported database dialect: {name}")

    @property
    def supports_returning(self) -> bool:
        """Whether INSERT ... RETURNING is used to read generated keys."""
        return self is Dialect.POSTGRES


def create_db_engine(config: Settings) -> Engine:
    """Create an engine from settings.

    PostgreSQL connections get a lock timeout so a stuck writer cannot block
    callers indefinitely.
    """
    connect_args: dict = {}
    if config.database_url.startswith("postgresql"):
        connect_args["options"] = f"-c lock_timeout={config.lock_timeout_ms}"
    elif config.database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    return create_engine(
        config.database_url,
        pool_pre_ping=config.pool_pre_ping,
        echo=config.database_echo,
        connect_args=connect_args,
    )


class Database:
    """Transaction manager for raw SQL access.

    Every unit of work runs inside either a read-only scope (``view``) or a
    write scope (``lock``). Each scope yields a SQLAlchemy ``Connection`` and
    guarantees the transaction is finished on every exit path: read scopes
    always roll back, write scopes commit on success and roll back when the
    body raises.

    SQLite permits a single writer, so write scopes are serialised with a
    process-local lock on that dialect. Other engines rely on their own
    locking and isolation.
    """

    def __init__(self, engine: Engine, dialect: Dialect | None = None) -> None:
        self._engine = engine
        self._dialect = dialect or Dialect.from_engine(engine)
        self._binder = StatementBinder(engine.dialect)
        self._write_lock = threading.Lock() if self._dialect is Dialect.SQLITE else None

    @classmethod
    def from_settings(cls, config: Settings | None = None) -> "Database":
        """Build a database from ``config``, defaulting to the environment settings."""
        return cls(create_db_engine(config or settings))

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    @property
    def binder(self) -> StatementBinder:
        return self._binder

    @contextmanager
    def view(self) -> Iterator[Connection]:
        """Open a read-only transaction scope."""
        with self._engine.connect() as conn:
            if self._dialect is Dialect.POSTGRES:
                conn = conn.execution_options(postgresql_readonly=True)
            conn.begin()
            try:
                yield conn
            finally:
                conn.rollback()

    @contextmanager
    def lock(self) -> Iterator[Connection]:
        """Open a write transaction scope."""
        if self._write_lock is None:
            with self._engine.begin() as conn:
                yield conn
            return

        with self._write_lock:
            with self._engine.begin() as conn:
                yield conn

    def run_read_only(self, fn: Callable[[Connection, StatementBinder], T]) -> T:
        """Run ``fn(connection, binder)`` inside a read-only scope."""
        with self.view() as conn:
            return fn(conn, self._binder)

    def run_write(self, fn: Callable[[Connection, StatementBinder], T]) -> T:
        """Run ``fn(connection, binder)`` inside a write scope."""
        with self.lock() as conn:
            return fn(conn, self._binder)

    def close(self) -> None:
        """Dispose of the engine's connection pool."""
        logger.debug("Disposing engine for %s", self._dialect.value)
        self._engine.dispose()
