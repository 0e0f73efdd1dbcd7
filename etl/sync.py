"""Main cache pipeline orchestration."""

from loguru import logger

from app.errors import CacheConnectionError, StoreReadError
from app.models import CacheRecord, PipelineResult
from app.repositories import CacheRepository, Connection, connect
from app.services.cache import CacheLookup
from etl.cache import cache_study
from song_client import SongClient
from settings import CACHE_DB_PATH, PAGE_SIZE


async def run_pipeline(
    client: SongClient,
    conn: Connection,
    studies: list[str] | None = None,
    page_size: int = PAGE_SIZE,
) -> PipelineResult:
    """Cache every study sequentially; one study's failure does not stop the run."""
    conn.ensure()
    repo = CacheRepository(conn)

    all_studies = await client.studies()
    to_sync = [s for s in all_studies if studies is None or s in studies]
    if studies is not None:
        missing = [s for s in studies if s not in all_studies]
        if missing:
            logger.warning("Unknown studies ignored: {}", missing)

    result = PipelineResult()
    for index, study_id in enumerate(to_sync, start=1):
        logger.info("Fetching {}/{} studyId: {}", index, len(to_sync), study_id)
        try:
            result.studies.append(await cache_study(client, repo, study_id, page_size))
        except CacheConnectionError:
            raise
        except Exception as e:
            logger.error("Failed to cache study {}: {}", study_id, e)
            result.failed_studies[study_id] = str(e)
            continue

    try:
        cached = repo.count_keys()
    except StoreReadError as e:
        logger.warning("Cached key count unavailable: {}", e)
        cached = "unknown"

    logger.info(
        "Cache complete: {} studies ok, {} failed, {} records written, {} failed, {} keys cached",
        len(result.studies),
        len(result.failed_studies),
        result.written,
        result.failed,
        cached,
    )
    return result


async def start_load_cache_pipeline(
    studies: list[str] | None = None,
    db_path: str = CACHE_DB_PATH,
) -> PipelineResult:
    """Run the population pipeline once against the configured store and upstream."""
    with connect(db_path) as conn:
        async with SongClient() as client:
            return await run_pipeline(client, conn, studies)


async def get_cache_by_key(key: str, db_path: str = CACHE_DB_PATH) -> CacheRecord:
    """Cached record for key. Raises NotFoundError on a miss."""
    with Connection(db_path) as conn:
        return CacheLookup(conn).get_by_key(key)
