"""Runtime orchestration components."""

from .chunking import ChunkedDataExtractor, ChunkedDataExtractorFactory, ChunkPlanner

__all__ = [
    "ChunkedDataExtractor",
    "ChunkedDataExtractorFactory",
    "ChunkPlanner",
]
