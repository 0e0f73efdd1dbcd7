"""Models package - DDL and entities."""

from app.models.base import BaseEntity
from app.models.cache import CACHE_FIELDS, KEY_SEPARATOR, SAMPLE_CACHE_DDL, CacheRecord
from app.models.results import PageResult, PipelineResult, StudyResult

ALL_DDL = [
    SAMPLE_CACHE_DDL,
]

__all__ = [
    # Base
    "BaseEntity",
    # Cache
    "SAMPLE_CACHE_DDL",
    "CACHE_FIELDS",
    "KEY_SEPARATOR",
    "CacheRecord",
    # Results
    "PageResult",
    "StudyResult",
    "PipelineResult",
    # All DDL
    "ALL_DDL",
]
