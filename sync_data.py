#!/usr/bin/env python3
"""
Populate the lineage cache from SONG, or look up a cached sample.

Usage:
    python sync_data.py                    # Cache all studies
    python sync_data.py S1 S2              # Cache specific studies
    python sync_data.py --get S1:SAMPLE-1  # Print a cached record
"""

import asyncio
import json
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.errors import LineageCacheError, NotFoundError
from etl import get_cache_by_key, start_load_cache_pipeline
from settings import LOG_LEVEL, SONG_TIMEOUT, SONG_URL
from settings.logging import setup_logging
from song_client import set_api_config

logger = setup_logging(level=LOG_LEVEL, to_file=True)


def lookup(key: str) -> int:
    """Print the cached record for key as JSON."""
    try:
        record = asyncio.run(get_cache_by_key(key))
    except NotFoundError as e:
        print(e.message)
        return 1
    print(json.dumps(record.to_camel_dict(), indent=2))
    return 0


def main():
    args = sys.argv[1:]
    set_api_config(SONG_URL, SONG_TIMEOUT)

    if args[:1] == ["--get"]:
        if len(args) != 2:
            print(__doc__)
            sys.exit(1)
        sys.exit(lookup(args[1]))

    if any(a.startswith("-") for a in args):
        print(__doc__)
        sys.exit(1)

    studies = args or None
    logger.info("Caching {}", "ALL studies" if studies is None else f"studies: {studies}")

    try:
        result = asyncio.run(start_load_cache_pipeline(studies))
    except LineageCacheError as e:
        logger.error("Cache pipeline aborted: {}", e.message)
        sys.exit(1)

    if result.failed_studies:
        logger.warning("Studies with errors: {}", sorted(result.failed_studies))


if __name__ == "__main__":
    main()
