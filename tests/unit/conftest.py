"""Shared fixtures - fake SONG client, analyses, cache store."""

import pytest

from app.errors import UpstreamFetchError
from app.repositories import CacheRepository, Connection
from song_client import AnalysisPage


class FakeSongClient:
    """In-memory stand-in for SongClient."""

    def __init__(self, analyses: dict[str, list[dict]], failing: set[str] | None = None):
        self.analyses = analyses
        self.failing = failing or set()
        self.calls: list[tuple[str, int, int]] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *_):
        pass

    async def studies(self) -> list[str]:
        return list(self.analyses)

    async def analyses_paginated(self, study_id: str, limit: int, offset: int) -> AnalysisPage:
        self.calls.append((study_id, limit, offset))
        if study_id in self.failing:
            raise UpstreamFetchError(f"GET studies/{study_id}/analysis/paginated failed")
        items = self.analyses[study_id]
        chunk = items[offset : offset + limit]
        return AnalysisPage.model_validate(
            {"analyses": chunk, "totalAnalyses": len(items), "currentTotalAnalyses": len(chunk)}
        )


def analysis(study_id: str, sample: str | None, analysis_id: str = "a-1", lineage: bool = True) -> dict:
    """Upstream analysis payload as SONG returns it."""
    data = {
        "analysisId": analysis_id,
        "studyId": study_id,
        "analysisState": "PUBLISHED",
        "analysisType": {"name": "consensus_sequence", "version": 3},
        "samples": [] if sample is None else [{"sampleId": "sid-1", "submitterSampleId": sample}],
    }
    if lineage:
        data["lineage_analysis"] = {
            "lineage_name": "B.1.1.7",
            "lineage_analysis_software_name": "pangolin",
            "lineage_analysis_software_version": "4.1.2",
            "lineage_analysis_software_data_version": "PUSHER-v1.12",
            "scorpio_call": "Alpha (B.1.1.7-like)",
            "scorpio_version": "0.3.17",
        }
    return data


@pytest.fixture
def make_analysis():
    return analysis


@pytest.fixture
def fake_client():
    return FakeSongClient


@pytest.fixture
def conn():
    c = Connection(":memory:")
    c.ensure()
    yield c
    c.close()


@pytest.fixture
def repo(conn):
    return CacheRepository(conn)
