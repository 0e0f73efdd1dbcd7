"""ETL package - cache population from the SONG API."""

from app.services.cache import hash_key_formatter
from etl.cache import cache_study, save_page
from etl.sync import get_cache_by_key, run_pipeline, start_load_cache_pipeline

__all__ = [
    "cache_study",
    "save_page",
    "run_pipeline",
    "start_load_cache_pipeline",
    "get_cache_by_key",
    "hash_key_formatter",
]
