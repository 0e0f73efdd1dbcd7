"""Cache ETL - page through a study's analyses and cache them."""

from loguru import logger
from pydantic import ValidationError

from app.errors import CacheConnectionError, StoreWriteError, UpstreamFetchError
from app.models import PageResult, StudyResult
from app.repositories import CacheRepository
from app.services.cache import project
from song_client import AnalysisPage, AnalysisSchema, SongClient
from settings import PAGE_SIZE


def save_page(repo: CacheRepository, analyses: list[dict], offset: int) -> PageResult:
    """Validate, project and persist one page of raw analyses."""
    logger.debug("caching {} analyses", len(analyses))
    result = PageResult(offset=offset, fetched=len(analyses))

    for i, data in enumerate(analyses):
        try:
            projected = project(AnalysisSchema.model_validate(data))
            if projected is None:
                result.skipped += 1
                continue
            key, record = projected
            repo.write_fields(key, record)
            result.written += 1
        except ValidationError as e:
            logger.warning("Invalid analysis {}: {}", data.get("analysisId"), e)
            result.failed += 1
        except StoreWriteError as e:
            logger.warning("Skipping analysis {}: {}", data.get("analysisId"), e)
            result.failed += 1
        except CacheConnectionError:
            raise
        except Exception as e:
            remaining = len(analyses) - i
            logger.error("Caching error at offset {}: {} ({} records not cached)", offset, e, remaining)
            result.failed += remaining
            break

    return result


async def _fetch_page(client: SongClient, study_id: str, limit: int, offset: int, result: StudyResult) -> AnalysisPage:
    """Fetch a page, refetching once if upstream reports no progress."""
    page = await client.analyses_paginated(study_id, limit, offset)
    result.fetches += 1
    if page.current_total_analyses > 0 or offset >= page.total_analyses:
        return page

    logger.warning("Study {}: empty page at offset {}/{}, refetching", study_id, offset, page.total_analyses)
    page = await client.analyses_paginated(study_id, limit, offset)
    result.fetches += 1
    if page.current_total_analyses > 0 or offset >= page.total_analyses:
        return page

    raise UpstreamFetchError(
        f"Study {study_id}: no progress at offset {offset} of {page.total_analyses} analyses"
    )


async def cache_study(
    client: SongClient,
    repo: CacheRepository,
    study_id: str,
    limit: int = PAGE_SIZE,
) -> StudyResult:
    """Cache all analyses of a study, page by page."""
    result = StudyResult(study_id=study_id)
    offset = 0
    total = limit

    while offset < total:
        page = await _fetch_page(client, study_id, limit, offset, result)
        page_offset = offset
        offset += max(page.current_total_analyses, 0)
        total = page.total_analyses

        if total > 0:
            page_result = save_page(repo, page.analyses, page_offset)
            result.pages.append(page_result)
            logger.info(
                "Caching progress study {}: {}%",
                study_id,
                round(min(offset, total) / total * 100, 2),
            )

    result.total = total
    logger.info("Finished caching {} total of {} records", study_id, total)
    return result
