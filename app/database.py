import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Connection, Engine, URL, make_url
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import QueuePool

from app.config import Settings


logger = logging.getLogger(__name__)

Base = declarative_base()


def _is_memory_sqlite(url: URL) -> bool:
    return url.get_backend_name() == "sqlite" and (
        url.database in (None, "", ":memory:") or url.query.get("mode") == "memory"
    )


class PooledConnection:
    """A connection checked out of a ConnectionPool.

    `release()` hands it back to the pool; a second call is a no-op.
    """

    def __init__(self, conn: Connection):
        self._conn = conn
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def execute(self, sql: str) -> List[Dict[str, Any]]:
        """Run a literal statement and return rows as dicts in projection order."""
        result = self._conn.execute(text(sql))
        return [dict(row._mapping) for row in result]

    def release(self) -> None:
        if self._released:
            return
        self._released = True
        self._conn.close()


class ConnectionPool:
    """Bounded pool of database connections backed by a SQLAlchemy engine.

    The engine's QueuePool hands out at most pool_size + max_overflow
    connections; further acquirers block up to pool_timeout seconds.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConnectionPool":
        url = make_url(settings.database_url)
        kwargs: Dict[str, Any] = {"pool_pre_ping": True}
        if url.get_backend_name() == "sqlite":
            kwargs["connect_args"] = {"check_same_thread": False}
        # In-memory SQLite keeps its single shared connection pool
        if not _is_memory_sqlite(url):
            kwargs.update(
                poolclass=QueuePool,
                pool_size=settings.pool_size,
                max_overflow=settings.max_overflow,
                pool_timeout=settings.pool_timeout,
            )
        engine = create_engine(url, **kwargs)
        logger.info("Created connection pool for %s", engine.url.render_as_string(hide_password=True))
        return cls(engine)

    def acquire(self) -> PooledConnection:
        return PooledConnection(self.engine.connect())

    def dispose(self) -> None:
        self.engine.dispose()


@contextmanager
def scoped_connection(pool) -> Iterator[PooledConnection]:
    """Acquire a connection from `pool` and release it on every exit path."""
    conn = pool.acquire()
    try:
        yield conn
    finally:
        conn.release()


def get_pool(request: Request) -> ConnectionPool:
    """FastAPI dependency returning the pool owned by the running app."""
    return request.app.state.pool
