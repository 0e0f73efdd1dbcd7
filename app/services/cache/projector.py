"""Project upstream analyses onto the cache schema."""

from app.models import CacheRecord
from app.services.cache.lookup import derive_key
from song_client.schemas import AnalysisSchema, LineageAnalysisSchema


def project(analysis: AnalysisSchema) -> tuple[str, CacheRecord] | None:
    """Map an analysis to (key, record), or None if it has no usable first sample."""
    sample = analysis.samples[0] if analysis.samples else None
    if sample is None or sample.submitter_sample_id is None:
        return None

    lineage = analysis.lineage_analysis or LineageAnalysisSchema()
    analysis_type = analysis.analysis_type

    record = CacheRecord(
        analysis_id=analysis.analysis_id or "",
        analysis_type_version=(analysis_type.version if analysis_type else None) or 0,
        lineage_name=lineage.lineage_name or "",
        lineage_analysis_software_name=lineage.lineage_analysis_software_name or "",
        lineage_analysis_software_version=lineage.lineage_analysis_software_version or "",
        lineage_analysis_software_data_version=lineage.lineage_analysis_software_data_version or "",
        scorpio_call=lineage.scorpio_call or "",
        scorpio_version=lineage.scorpio_version or "",
    )
    return derive_key(analysis.study_id, sample.submitter_sample_id), record
