"""Tests for the per-study pagination driver."""

import asyncio

import pytest

from app.errors import StoreWriteError, UpstreamFetchError
from app.repositories import CacheRepository
from etl.cache import cache_study, save_page
from song_client import AnalysisPage


class FlakyRepository(CacheRepository):
    """Fails writes for the given keys."""

    def __init__(self, conn, bad_keys):
        super().__init__(conn)
        self.bad_keys = set(bad_keys)

    def write_fields(self, key, record):
        if key in self.bad_keys:
            raise StoreWriteError(f"Failed to write key:{key}")
        super().write_fields(key, record)


class TestCacheStudy:
    def test_single_page(self, fake_client, make_analysis, repo):
        client = fake_client({"S1": [make_analysis("S1", "s-1", "a-1"), make_analysis("S1", "s-2", "a-2")]})

        result = asyncio.run(cache_study(client, repo, "S1", limit=100))

        assert client.calls == [("S1", 100, 0)]
        assert result.fetches == 1
        assert result.processed == 2
        assert result.written == 2
        assert repo.read_fields("S1:s-1")["analysisId"] == "a-1"
        assert repo.read_fields("S1:s-2")["analysisId"] == "a-2"

    def test_fetch_count(self, fake_client, make_analysis, repo):
        analyses = [make_analysis("S1", f"s-{i}", f"a-{i}") for i in range(250)]
        client = fake_client({"S1": analyses})

        result = asyncio.run(cache_study(client, repo, "S1", limit=100))

        assert [offset for _, _, offset in client.calls] == [0, 100, 200]
        assert result.processed == 250
        assert result.total == 250
        assert repo.count_keys() == 250

    def test_exact_multiple(self, fake_client, make_analysis, repo):
        client = fake_client({"S1": [make_analysis("S1", f"s-{i}") for i in range(20)]})
        result = asyncio.run(cache_study(client, repo, "S1", limit=10))
        assert result.fetches == 2

    def test_empty_study(self, fake_client, repo):
        client = fake_client({"S1": []})
        result = asyncio.run(cache_study(client, repo, "S1", limit=100))
        assert result.fetches == 1
        assert result.pages == []
        assert result.total == 0

    def test_skipped_records_not_cached(self, fake_client, make_analysis, repo):
        client = fake_client({"S1": [make_analysis("S1", None), make_analysis("S1", "s-1")]})
        result = asyncio.run(cache_study(client, repo, "S1"))
        assert result.skipped == 1
        assert result.written == 1
        assert repo.count_keys() == 1

    def test_rerun_overwrites(self, fake_client, make_analysis, repo):
        client = fake_client({"S1": [make_analysis("S1", "s-1")]})
        asyncio.run(cache_study(client, repo, "S1"))
        asyncio.run(cache_study(client, repo, "S1"))
        assert repo.count_keys() == 1

    def test_write_failure_does_not_stop_loop(self, fake_client, make_analysis, conn):
        analyses = [make_analysis("S1", f"s-{i}") for i in range(5)]
        client = fake_client({"S1": analyses})
        repo = FlakyRepository(conn, {"S1:s-0", "S1:s-3"})

        result = asyncio.run(cache_study(client, repo, "S1", limit=2))

        assert result.fetches == 3
        assert result.failed == 2
        assert result.written == 3
        assert repo.read_fields("S1:s-4") != {}

    def test_upstream_error_propagates(self, fake_client, repo):
        client = fake_client({"S1": []}, failing={"S1"})
        with pytest.raises(UpstreamFetchError):
            asyncio.run(cache_study(client, repo, "S1"))


class StuckClient:
    """Reports analyses but returns none of them."""

    def __init__(self, recover_after: int | None = None):
        self.calls = 0
        self.recover_after = recover_after

    async def analyses_paginated(self, study_id, limit, offset):
        self.calls += 1
        if self.recover_after is not None and self.calls > self.recover_after:
            return AnalysisPage(analyses=[], total_analyses=0, current_total_analyses=0)
        return AnalysisPage(analyses=[], total_analyses=5, current_total_analyses=0)


class TestZeroProgress:
    def test_raises_after_one_refetch(self, repo):
        client = StuckClient()
        with pytest.raises(UpstreamFetchError, match="no progress"):
            asyncio.run(cache_study(client, repo, "S1"))
        assert client.calls == 2

    def test_refetch_recovers(self, repo):
        client = StuckClient(recover_after=1)
        result = asyncio.run(cache_study(client, repo, "S1"))
        assert client.calls == 2
        assert result.fetches == 2
        assert result.total == 0


class TestSavePage:
    def test_counts(self, make_analysis, repo):
        analyses = [make_analysis("S1", "s-1"), make_analysis("S1", None)]
        result = save_page(repo, analyses, offset=0)
        assert (result.fetched, result.written, result.skipped, result.failed) == (2, 1, 1, 0)


class BrokenRepository(CacheRepository):
    """Fails with an unexpected error on the given key."""

    def __init__(self, conn, bad_key):
        super().__init__(conn)
        self.bad_key = bad_key

    def write_fields(self, key, record):
        if key == self.bad_key:
            raise RuntimeError("disk full")
        super().write_fields(key, record)


class TestPageFailures:
    def test_unexpected_error_fails_rest_of_page(self, fake_client, make_analysis, conn):
        client = fake_client({"S1": [make_analysis("S1", f"s-{i}") for i in range(5)]})
        repo = BrokenRepository(conn, "S1:s-2")

        result = asyncio.run(cache_study(client, repo, "S1", limit=2))

        assert [offset for _, _, offset in client.calls] == [0, 2, 4]
        assert (result.pages[1].written, result.pages[1].failed) == (0, 2)
        assert result.written == 3
        assert repo.read_fields("S1:s-3") == {}
        assert repo.read_fields("S1:s-4") != {}

    def test_invalid_record_fails_only_itself(self, fake_client, make_analysis, repo):
        bad = make_analysis("S1", "s-bad")
        del bad["studyId"]
        analyses = [make_analysis("S1", "s-0"), bad, make_analysis("S1", "s-2"), make_analysis("S1", "s-3")]
        client = fake_client({"S1": analyses})

        result = asyncio.run(cache_study(client, repo, "S1", limit=2))

        assert result.failed == 1
        assert result.written == 3
        assert repo.count_keys() == 3

    def test_numeric_lineage_values_cached_as_text(self, fake_client, make_analysis, repo):
        odd = make_analysis("S1", "s-3", "a-3")
        odd["lineage_analysis"]["scorpio_version"] = 0.3
        analyses = [make_analysis("S1", f"s-{i}", f"a-{i}") for i in range(3)] + [odd]
        client = fake_client({"S1": analyses})

        result = asyncio.run(cache_study(client, repo, "S1"))

        assert result.written == 4
        assert repo.read_fields("S1:s-3")["scorpioVersion"] == "0.3"
