"""Pipeline run results - per page, per study, per run."""

from dataclasses import dataclass, field

from app.models.base import BaseEntity


@dataclass
class PageResult(BaseEntity):
    """Outcome of persisting one page of analyses."""

    offset: int
    fetched: int = 0
    written: int = 0
    skipped: int = 0
    failed: int = 0


@dataclass
class StudyResult(BaseEntity):
    """Outcome of caching all pages of one study."""

    study_id: str
    total: int = 0
    fetches: int = 0
    pages: list[PageResult] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return sum(p.fetched for p in self.pages)

    @property
    def written(self) -> int:
        return sum(p.written for p in self.pages)

    @property
    def skipped(self) -> int:
        return sum(p.skipped for p in self.pages)

    @property
    def failed(self) -> int:
        return sum(p.failed for p in self.pages)


@dataclass
class PipelineResult(BaseEntity):
    """Outcome of a full (or filtered) pipeline run."""

    studies: list[StudyResult] = field(default_factory=list)
    failed_studies: dict[str, str] = field(default_factory=dict)

    @property
    def written(self) -> int:
        return sum(s.written for s in self.studies)

    @property
    def failed(self) -> int:
        return sum(s.failed for s in self.studies)
