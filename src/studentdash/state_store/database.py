"""SQLite engine and session handling for the key/value store."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from studentdash.state_store.models import Base

if TYPE_CHECKING:
    from sqlalchemy import Engine

MEMORY_PATH = ":memory:"


def _use_wal(dbapi_connection: Any, _connection_record: object) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.close()


class Database:
    """Lazily created SQLite engine plus a session factory.

    A file database gets WAL journaling. ":memory:" is pinned to a single
    connection, otherwise every new connection would open an empty database.

    Connections are not bound to the creating thread: the API builds the
    store inside its lifespan and serves requests on the event loop thread,
    and tests drive the same store from the main thread. Callers must still
    serialize access; nothing here locks.
    """

    def __init__(self, db_path: str = "studentdash.db") -> None:
        """Initialize the manager. No connection is opened until first use.

        Args:
            db_path: SQLite file path, or ":memory:".
        """
        self.db_path = db_path
        self._engine: Engine | None = None
        self._session_factory: sessionmaker[Session] | None = None

    @property
    def is_memory(self) -> bool:
        return self.db_path == MEMORY_PATH

    @property
    def engine(self) -> Engine:
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    @property
    def session_factory(self) -> sessionmaker[Session]:
        if self._session_factory is None:
            self._session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        return self._session_factory

    def create_tables(self) -> None:
        """Create the schema if it is missing."""
        Base.metadata.create_all(self.engine)

    def get_session(self) -> Session:
        return self.session_factory()

    def is_wal_mode(self) -> bool:
        with self.engine.connect() as conn:
            return conn.execute(text("PRAGMA journal_mode")).scalar() == "wal"

    def close(self) -> None:
        """Dispose the engine. A later access opens a fresh one."""
        if self._engine is not None:
            self._engine.dispose()
        self._engine = None
        self._session_factory = None

    def _create_engine(self) -> Engine:
        connect_args = {"check_same_thread": False}
        if self.is_memory:
            return create_engine(
                f"sqlite:///{MEMORY_PATH}", poolclass=StaticPool, connect_args=connect_args
            )

        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(f"sqlite:///{self.db_path}", connect_args=connect_args)
        event.listen(engine, "connect", _use_wal)
        return engine
