"""Cache repository - field-level key/value storage."""

from datetime import datetime

import duckdb
from loguru import logger

from app.errors import StoreReadError, StoreWriteError
from app.models import CacheRecord
from app.repositories.base import BaseRepository


class CacheRepository(BaseRepository):
    """Repository for sample cache operations."""

    def write_fields(self, key: str, record: CacheRecord) -> None:
        """Store all record fields under key, overwriting same-named fields."""
        db = self._conn.ensure()
        now = datetime.now()
        rows = [[key, field, value, now] for field, value in record.to_fields().items()]

        try:
            db.execute("BEGIN TRANSACTION")
            db.executemany(
                """
                INSERT OR REPLACE INTO sample_cache (key, field, value, updated_at)
                VALUES (?, ?, ?, ?)
                """,
                rows,
            )
            db.execute("COMMIT")
        except duckdb.Error as e:
            try:
                db.execute("ROLLBACK")
            except duckdb.Error:
                logger.debug("Rollback failed for key={}", key)
            raise StoreWriteError(f"Failed to write key:{key}: {e}") from e
        logger.trace("Cache saved: key={}", key)

    def read_fields(self, key: str) -> dict[str, str]:
        """Load raw field mapping for key; empty if the key does not exist."""
        try:
            rows = self.fetchall("SELECT field, value FROM sample_cache WHERE key = ?", [key])
        except duckdb.Error as e:
            raise StoreReadError(f"Failed to read key:{key}: {e}") from e
        return {field: value for field, value in rows}

    def count_keys(self) -> int:
        """Number of distinct cached keys."""
        try:
            row = self.fetchone("SELECT COUNT(DISTINCT key) FROM sample_cache")
        except duckdb.Error as e:
            raise StoreReadError(f"Failed to count keys: {e}") from e
        return row[0]
