"""
Database engine and session management.

A single Database instance is built per application and shared by every
request through the get_db dependency.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


class Database:
    """Owns the engine and session factory for one database URL."""

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self._lock = threading.Lock()

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self.connect()
        return self._engine

    @property
    def session_factory(self) -> sessionmaker:
        if self._session_factory is None:
            self.connect()
        return self._session_factory

    def connect(self) -> None:
        """Create the engine and session factory once, even under concurrent first use."""
        with self._lock:
            if self._engine is not None:
                return
            engine = create_engine(self.url, **self._engine_kwargs())
            if self.is_sqlite:
                event.listen(engine, "connect", _enable_sqlite_foreign_keys)
            self._session_factory = sessionmaker(
                autocommit=False,
                autoflush=False,
                bind=engine,
                expire_on_commit=False,
            )
            self._engine = engine
            logger.info(f"Database engine created for {self._safe_url()}")

    def _engine_kwargs(self) -> dict:
        kwargs = {"echo": self.echo, "pool_pre_ping": True}
        if self.is_sqlite:
            kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in self.url or self.url in ("sqlite://", "sqlite+pysqlite://"):
                # In-memory databases live as long as their single connection
                kwargs["poolclass"] = StaticPool
        return kwargs

    def _safe_url(self) -> str:
        return self.url.split("@")[-1] if "@" in self.url else self.url

    def create_tables(self) -> None:
        # Import models so they register on Base.metadata
        import reservas_api.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables created")

    def session(self) -> Session:
        return self.session_factory()

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Session that commits on success and rolls back on error."""
        session = self.session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        with self._lock:
            if self._engine is None:
                return
            self._engine.dispose()
            self._engine = None
            self._session_factory = None
        logger.info("Database connections closed")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(request: Request) -> Iterator[Session]:
    """FastAPI dependency yielding a session bound to the app's database."""
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()
