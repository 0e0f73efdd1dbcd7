"""SONG API schemas - analyses and their lineage metadata."""

from typing import Optional

from pydantic import BaseModel, Field


class AnalysisTypeSchema(BaseModel):
    """Analysis type reference."""

    name: Optional[str] = None
    version: Optional[int] = None


class SampleSchema(BaseModel):
    """Sample attached to an analysis."""

    sample_id: Optional[str] = Field(alias="sampleId", default=None)
    submitter_sample_id: Optional[str] = Field(alias="submitterSampleId", default=None)

    class Config:
        populate_by_name = True


class LineageAnalysisSchema(BaseModel):
    """Viral lineage classification block."""

    lineage_name: Optional[str] = None
    lineage_analysis_software_name: Optional[str] = None
    lineage_analysis_software_version: Optional[str] = None
    lineage_analysis_software_data_version: Optional[str] = None
    scorpio_call: Optional[str] = None
    scorpio_version: Optional[str] = None

    class Config:
        coerce_numbers_to_str = True


class AnalysisSchema(BaseModel):
    """Analysis submission (list view)."""

    analysis_id: Optional[str] = Field(alias="analysisId", default=None)
    study_id: str = Field(alias="studyId")
    analysis_state: Optional[str] = Field(alias="analysisState", default=None)
    analysis_type: Optional[AnalysisTypeSchema] = Field(alias="analysisType", default=None)
    lineage_analysis: Optional[LineageAnalysisSchema] = None
    samples: Optional[list[SampleSchema]] = None

    class Config:
        populate_by_name = True


class AnalysisPage(BaseModel):
    """One page of a study's analyses, kept raw for per-record validation."""

    analyses: list[dict] = []
    total_analyses: int = Field(alias="totalAnalyses", default=0)
    current_total_analyses: int = Field(alias="currentTotalAnalyses", default=0)

    class Config:
        populate_by_name = True
