"""Cache services - projection and lookup."""

from app.services.cache.lookup import CacheLookup, derive_key, hash_key_formatter
from app.services.cache.projector import project

__all__ = [
    "CacheLookup",
    "derive_key",
    "hash_key_formatter",
    "project",
]
