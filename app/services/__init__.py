"""Services package - service exports."""

from app.services.cache import CacheLookup, derive_key, hash_key_formatter, project

__all__ = [
    "CacheLookup",
    "derive_key",
    "hash_key_formatter",
    "project",
]
