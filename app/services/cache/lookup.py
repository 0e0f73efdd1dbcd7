"""Cache lookup - canonical keys and record retrieval."""

from loguru import logger

from app.errors import NotFoundError
from app.models import KEY_SEPARATOR, CacheRecord
from app.repositories import CacheRepository, Connection


def derive_key(study_id: str, submitter_sample_id: str) -> str:
    """Build the cache key for a (study, sample) pair."""
    return f"{study_id}{KEY_SEPARATOR}{submitter_sample_id}"


hash_key_formatter = derive_key


class CacheLookup:
    """Read side of the sample cache."""

    def __init__(self, conn: Connection):
        self._conn = conn
        self._repo = CacheRepository(conn)

    def get_by_key(self, key: str) -> CacheRecord:
        """Cached record for key. Raises NotFoundError on a miss."""
        self._conn.ensure()
        data = self._repo.read_fields(key)
        if not data:
            logger.debug("Cache miss: key={}", key)
            raise NotFoundError(f"key:{key} not found in cache.")
        return CacheRecord.from_fields(data)

    def get(self, study_id: str, submitter_sample_id: str) -> CacheRecord:
        return self.get_by_key(derive_key(study_id, submitter_sample_id))
