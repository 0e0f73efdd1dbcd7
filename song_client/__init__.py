"""SONG API client package."""

from song_client.base import BaseClient, set_api_config
from song_client.client import SongClient
from song_client.schemas import (
    AnalysisPage,
    AnalysisSchema,
    AnalysisTypeSchema,
    LineageAnalysisSchema,
    SampleSchema,
)

__all__ = [
    # Base
    "BaseClient",
    "set_api_config",
    # Client
    "SongClient",
    # Schemas
    "AnalysisPage",
    "AnalysisSchema",
    "AnalysisTypeSchema",
    "LineageAnalysisSchema",
    "SampleSchema",
]
