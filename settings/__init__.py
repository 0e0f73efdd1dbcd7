"""Application settings."""

import os
from pathlib import Path

# Cache store
CACHE_DB_PATH = os.getenv("CACHE_DB_PATH", "lineage_cache.duckdb")

# Logging
LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE_LEVEL = os.getenv("LOG_FILE_LEVEL", "DEBUG")
LOG_FILE_NAME = "lineage_cache_{time:YYYY-MM-DD}.log"
LOG_RETENTION = os.getenv("LOG_RETENTION", "14 days")

# Upstream metadata service (SONG)
SONG_URL = os.getenv("SONG_URL", "http://localhost:8080")
SONG_TIMEOUT = int(os.getenv("SONG_TIMEOUT", "60"))

# Pipeline
PAGE_SIZE = int(os.getenv("CACHE_PAGE_SIZE", "100"))
