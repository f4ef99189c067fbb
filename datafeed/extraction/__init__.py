"""Datafeed Extraction - density-adaptive chunked extraction from search backends."""

from .core import (
    DataError,
    DataExtractionError,
    ExtractionContext,
    SearchClient,
    SubExtractor,
    SubExtractorFactory,
    ValidationError,
)
from .io import HTTPSearchClient
from .models import DataSummary, SearchResponse
from .runtime.chunking import (
    Chunk,
    ChunkedDataExtractor,
    ChunkedDataExtractorFactory,
    ChunkPlanner,
    DataSummaryProbe,
    ExtractionStats,
)

__version__ = "0.1.0"

__all__ = [
    "ExtractionContext",
    "SearchClient",
    "SubExtractor",
    "SubExtractorFactory",
    "DataError",
    "DataExtractionError",
    "ValidationError",
    "HTTPSearchClient",
    "DataSummary",
    "SearchResponse",
    "Chunk",
    "ChunkPlanner",
    "DataSummaryProbe",
    "ExtractionStats",
    "ChunkedDataExtractor",
    "ChunkedDataExtractorFactory",
]
