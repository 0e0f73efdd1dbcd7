"""DuckDB connection management for the cache store."""

import duckdb
from loguru import logger

from app.errors import CacheConnectionError
from app.models import ALL_DDL
from settings import CACHE_DB_PATH


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)


class Connection:
    """Cache store connection, opened lazily and reused."""

    def __init__(self, path: str = CACHE_DB_PATH):
        self.path = path
        self._conn: duckdb.DuckDBPyConnection | None = None

    def __enter__(self):
        self.ensure()
        return self

    def __exit__(self, *_):
        self.close()

    def _alive(self) -> bool:
        if self._conn is None:
            return False
        try:
            self._conn.execute("SELECT 1")
            return True
        except duckdb.Error:
            return False

    def ensure(self) -> duckdb.DuckDBPyConnection:
        """Return the live DuckDB handle, (re)opening it if needed."""
        if self._alive():
            return self._conn
        if self._conn is not None:
            logger.warning("Cache store connection lost, reconnecting: {}", self.path)
            self.close()

        try:
            conn = duckdb.connect(self.path)
        except duckdb.Error as e:
            self._conn = None
            raise CacheConnectionError(f"Cannot open cache store {self.path}: {e}") from e

        try:
            init_tables(conn)
        except duckdb.Error as e:
            conn.close()
            self._conn = None
            raise CacheConnectionError(f"Cannot initialize cache store {self.path}: {e}") from e

        self._conn = conn
        logger.debug("Cache store connected: {}", self.path)
        return self._conn

    def close(self) -> None:
        """Close the DuckDB handle."""
        if self._conn is not None:
            try:
                self._conn.close()
            except duckdb.Error as e:
                logger.debug("Closing stale handle failed: {}", e)
            self._conn = None
            logger.debug("Cache store connection closed")


def connect(path: str = CACHE_DB_PATH) -> Connection:
    """Open the cache store. Raises CacheConnectionError if unreachable."""
    conn = Connection(path)
    conn.ensure()
    return conn
