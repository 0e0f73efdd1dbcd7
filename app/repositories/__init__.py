"""Repositories package - data access layer for the cache store."""

from app.repositories.base import BaseRepository
from app.repositories.cache import CacheRepository
from app.repositories.db import Connection, connect, init_tables

__all__ = [
    # DB
    "Connection",
    "connect",
    "init_tables",
    # Base
    "BaseRepository",
    # Cache
    "CacheRepository",
]
