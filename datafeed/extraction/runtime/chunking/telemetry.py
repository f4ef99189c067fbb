"""Structured logging for chunked extraction.

This module provides telemetry hooks for chunked extraction, emitting
structured logs keyed by job id.
"""

from __future__ import annotations

import logging

from ...models.summary import DataSummary
from .definitions import Chunk, ExtractionStats

logger = logging.getLogger(__name__)


def log_summary_probe(
    *,
    job_id: str,
    range_start: int,
    range_end: int,
    summary: DataSummary,
) -> None:
    """Log a completed data summary probe.

    Args:
        job_id: Extraction job identifier
        range_start: Inclusive start of the probed range
        range_end: Exclusive end of the probed range
        summary: Probe result
    """
    logger.debug(
        "data_summary_probed",
        extra={
            "job_id": job_id,
            "range_start": range_start,
            "range_end": range_end,
            "total_count": summary.total_count,
            "earliest": summary.earliest,
            "latest": summary.latest,
        },
    )


def log_chunk_started(*, job_id: str, chunk: Chunk) -> None:
    """Log creation of a sub-extractor for a chunk."""
    logger.debug(
        "chunk_started",
        extra={
            "job_id": job_id,
            "chunk_index": chunk.chunk_index,
            "chunk_start": chunk.start,
            "chunk_end": chunk.end,
        },
    )


def log_chunk_completed(*, job_id: str, chunk: Chunk, produced_data: bool) -> None:
    """Log a drained chunk.

    Args:
        job_id: Extraction job identifier
        chunk: The drained chunk
        produced_data: Whether the chunk yielded any payload
    """
    logger.debug(
        "chunk_completed",
        extra={
            "job_id": job_id,
            "chunk_index": chunk.chunk_index,
            "chunk_start": chunk.start,
            "chunk_end": chunk.end,
            "produced_data": produced_data,
        },
    )


def log_chunk_reconfigured(*, job_id: str, cursor: int, end: int) -> None:
    """Log an empty chunk that forces a fresh density estimate."""
    logger.info(
        "chunk_reconfigured",
        extra={"job_id": job_id, "cursor": cursor, "end": end},
    )


def log_chunk_error(
    *,
    job_id: str,
    chunk_index: int | None,
    error_type: str,
    error_message: str,
) -> None:
    """Log an extraction error.

    Args:
        job_id: Extraction job identifier
        chunk_index: Index of the active chunk, or None while probing
        error_type: Type of error (e.g., "DataExtractionError")
        error_message: Error message
    """
    logger.error(
        "chunk_error",
        extra={
            "job_id": job_id,
            "chunk_index": chunk_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_extraction_cancelled(*, job_id: str) -> None:
    logger.info("extraction_cancelled", extra={"job_id": job_id})


def log_extraction_complete(*, job_id: str, stats: ExtractionStats, cancelled: bool) -> None:
    """Log the end of an extraction run."""
    logger.info(
        "extraction_complete",
        extra={
            "job_id": job_id,
            "probes": stats.probes,
            "chunks_requested": stats.chunks_requested,
            "empty_chunks": stats.empty_chunks,
            "payloads": stats.payloads,
            "cancelled": cancelled,
        },
    )
