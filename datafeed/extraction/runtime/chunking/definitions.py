"""Chunking constants and data structures.

This module defines the constants that drive density-adaptive chunk sizing
and the data structures passed between the planner and the extractor.
"""

from __future__ import annotations

from dataclasses import dataclass

# Empirical factor relating batch size to assumed document density
DENSITY_SCALE = 10

# Lower bound for an adaptive chunk span, in milliseconds
MIN_CHUNK_SPAN_MS = 60_000

EARLIEST_TIME_AGG = "earliest_time"
LATEST_TIME_AGG = "latest_time"


@dataclass(frozen=True)
class Chunk:
    """A half-open time window ``[start, end)`` handed to one sub-extractor.

    Attributes:
        start: Inclusive start in epoch milliseconds
        end: Exclusive end in epoch milliseconds
        chunk_index: Zero-based index of this chunk within the run
    """

    start: int
    end: int
    chunk_index: int = 0

    def __post_init__(self) -> None:
        """Validate chunk bounds."""
        if self.start >= self.end:
            raise ValueError("Chunk start must be before end")

    @property
    def span(self) -> int:
        return self.end - self.start


@dataclass
class ExtractionStats:
    """Counters for a chunked extraction run.

    Attributes:
        probes: Number of data summary searches issued
        chunks_requested: Number of sub-extractors created
        empty_chunks: Number of chunks that yielded no payloads
        payloads: Number of payloads returned to the caller
    """

    probes: int = 0
    chunks_requested: int = 0
    empty_chunks: int = 0
    payloads: int = 0


def compute_chunk_span(
    *,
    total_count: int,
    spread: int,
    batch_size_hint: int,
    remaining: int,
) -> int:
    """Compute a density-adaptive chunk span.

    Each chunk is sized to hold roughly ``DENSITY_SCALE`` batches at the
    observed density, and never less than ``MIN_CHUNK_SPAN_MS``. A zero spread
    cannot be subdivided, so the whole remaining range becomes one chunk.

    Args:
        total_count: Documents observed in the probed range (must be positive)
        spread: Milliseconds between earliest and latest documents
        batch_size_hint: Configured batch size
        remaining: Milliseconds from the cursor to the end of the run

    Returns:
        Chunk span in milliseconds
    """
    if spread == 0:
        return remaining
    span = spread * batch_size_hint * DENSITY_SCALE // total_count
    return max(span, MIN_CHUNK_SPAN_MS)
