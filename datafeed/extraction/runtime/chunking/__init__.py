"""Chunked extraction layer.

This module splits a time-ordered extraction into memory-bounded chunks whose
span adapts to the observed document density.

Architecture:
    The chunking layer consists of:
    - definitions.py: Constants and structures (Chunk, ExtractionStats)
    - summary.py: Data summary probe (document count and time bounds)
    - planners.py: Chunk planning logic (cursor, span, re-probe on empty chunks)
    - extractor.py: Chunked extractor and its factory
    - telemetry.py: Structured logging

Usage:
    Wrap any SubExtractorFactory (e.g. a scroll-based one) with a
    ChunkedDataExtractor to stream a long time range without sizing the
    chunks by hand.
"""

from __future__ import annotations

from .definitions import (
    DENSITY_SCALE,
    MIN_CHUNK_SPAN_MS,
    Chunk,
    ExtractionStats,
    compute_chunk_span,
)
from .extractor import ChunkedDataExtractor, ChunkedDataExtractorFactory
from .planners import ChunkPlanner
from .summary import DataSummaryProbe, build_summary_request

__all__ = [
    "DENSITY_SCALE",
    "MIN_CHUNK_SPAN_MS",
    "Chunk",
    "ExtractionStats",
    "compute_chunk_span",
    "ChunkPlanner",
    "DataSummaryProbe",
    "build_summary_request",
    "ChunkedDataExtractor",
    "ChunkedDataExtractorFactory",
]
