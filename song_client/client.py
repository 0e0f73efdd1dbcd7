"""SONG API client - studies and paginated analyses."""

from pydantic import ValidationError

from app.errors import UpstreamFetchError
from song_client.base import BaseClient
from song_client.schemas import AnalysisPage

ANALYSIS_STATES = "PUBLISHED"


class SongClient(BaseClient):
    """Client for SONG metadata service endpoints."""

    async def studies(self) -> list[str]:
        """GET /studies/all - all study ids."""
        data = await self._get("studies/all")
        if not isinstance(data, list):
            raise UpstreamFetchError(f"Unexpected study list: {data!r}")
        return [str(s) for s in data]

    async def analyses_paginated(self, study_id: str, limit: int, offset: int) -> AnalysisPage:
        """GET /studies/{study}/analysis/paginated - one page of analyses."""
        data = await self._get(
            f"studies/{study_id}/analysis/paginated",
            params={"analysisStates": ANALYSIS_STATES, "limit": limit, "offset": offset},
        )
        try:
            return AnalysisPage.model_validate(data)
        except ValidationError as e:
            raise UpstreamFetchError(f"Invalid analyses page for study {study_id}: {e}") from e
