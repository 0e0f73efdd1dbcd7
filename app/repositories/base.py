"""Base repository class."""

from typing import Any

from loguru import logger

from app.repositories.db import Connection


class BaseRepository:
    """Base repository over an explicit store connection."""

    def __init__(self, conn: Connection):
        self._conn = conn
        logger.debug("{} initialized", self.__class__.__name__)

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        db = self._conn.ensure()
        if params:
            return db.execute(query, params)
        return db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()
