"""Sample cache table and cached record entity."""

from dataclasses import dataclass, fields
from typing import Any

from app.models.base import BaseEntity, to_camel

# One row per (key, field) pair - a hash per cache key.
SAMPLE_CACHE_DDL = """
CREATE TABLE IF NOT EXISTS sample_cache (
    key VARCHAR NOT NULL,
    field VARCHAR NOT NULL,
    value VARCHAR NOT NULL,
    updated_at TIMESTAMP NOT NULL,
    PRIMARY KEY (key, field)
)
"""

KEY_SEPARATOR = ":"


@dataclass
class CacheRecord(BaseEntity):
    """Lineage analysis summary cached per (study, sample)."""

    analysis_id: str = ""
    analysis_type_version: int = 0
    lineage_name: str = ""
    lineage_analysis_software_name: str = ""
    lineage_analysis_software_version: str = ""
    lineage_analysis_software_data_version: str = ""
    scorpio_call: str = ""
    scorpio_version: str = ""

    def to_fields(self) -> dict[str, str]:
        """Stored field mapping (camelCase names, string values)."""
        return {name: str(value) for name, value in self.to_camel_dict().items()}

    @classmethod
    def from_fields(cls, data: dict[str, Any]) -> "CacheRecord":
        """Decode a stored field mapping.

        Missing fields take the default value. A malformed
        analysisTypeVersion decodes to 0.
        """
        values = {}
        for f in fields(cls):
            raw = data.get(to_camel(f.name))
            if raw is None:
                continue
            if f.type is int:
                try:
                    values[f.name] = int(raw)
                except (TypeError, ValueError):
                    values[f.name] = 0
            else:
                values[f.name] = str(raw)
        return cls(**values)


CACHE_FIELDS = [to_camel(f.name) for f in fields(CacheRecord)]
