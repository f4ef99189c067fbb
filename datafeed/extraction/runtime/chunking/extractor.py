"""Chunked data extraction.

This module provides ChunkedDataExtractor, which splits an extraction range
into density-sized chunks and streams the payloads of one sub-extractor per
chunk as a single flat sequence.

Request Flow:
    1. First next() call → planner probes ``[start, end)`` and plans a chunk
    2. Factory creates a sub-extractor for the chunk
    3. Payloads are returned until the sub-extractor is drained
    4. Outcome reported to the planner → advance, or re-probe after an empty chunk
    5. Repeat from 2 until the planner runs out of range or the run is cancelled

Cancellation is only observed between chunks, so payloads already buffered
by the active sub-extractor are always delivered.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

from ...core.base import SearchClient, SubExtractor, SubExtractorFactory
from ...core.context import ExtractionContext
from ...core.exceptions import ValidationError
from .definitions import Chunk, ExtractionStats
from .planners import ChunkPlanner
from .summary import DataSummaryProbe
from .telemetry import (
    log_chunk_completed,
    log_chunk_error,
    log_chunk_started,
    log_extraction_cancelled,
    log_extraction_complete,
)


class ChunkedDataExtractor(SubExtractor):
    """Streams raw payloads for a time range, one chunk at a time.

    Example:
        >>> extractor = ChunkedDataExtractor(client, scroll_factory, context)
        >>> while extractor.has_next():
        ...     payload = await extractor.next()
        ...     if payload is not None:
        ...         process(payload)
    """

    def __init__(
        self,
        client: SearchClient,
        extractor_factory: SubExtractorFactory,
        context: ExtractionContext,
    ) -> None:
        """Initialize chunked extractor.

        Args:
            client: Search client used for data summary probes
            extractor_factory: Creates a sub-extractor per chunk
            context: Extraction context for the run
        """
        self._context = context
        self._factory = extractor_factory
        self._probe = DataSummaryProbe(client, context)
        self._planner = ChunkPlanner(context, self._probe)
        self._stats = ExtractionStats()

        self._current: SubExtractor | None = None
        self._current_chunk: Chunk | None = None
        self._current_produced = False
        self._cancelled = False
        self._done = False

    @property
    def context(self) -> ExtractionContext:
        return self._context

    @property
    def stats(self) -> ExtractionStats:
        """Counters for this run so far."""
        self._stats.probes = self._probe.probe_count
        return self._stats

    def has_next(self) -> bool:
        """Whether next() may still return data.

        Optimistic until the run is known to be finished; calling this never
        issues a search. Once cancelled, only the active sub-extractor counts.
        """
        if self._done:
            return False
        if self._cancelled:
            return self._current is not None and self._current.has_next()
        return True

    async def next(self) -> Any | None:
        """Return the next payload, or None when the run is finished.

        Raises:
            DataExtractionError: If a data summary probe fails. Errors raised
                by sub-extractors propagate unchanged. The run must not be
                resumed after an error.
        """
        if self._done:
            return None
        try:
            return await self._next_payload()
        except Exception as e:
            log_chunk_error(
                job_id=self._context.job_id,
                chunk_index=self._current_chunk.chunk_index if self._current_chunk else None,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

    async def stream(self) -> AsyncIterator[Any]:
        """Yield payloads until the run is finished."""
        while self.has_next():
            payload = await self.next()
            if payload is not None:
                yield payload

    def cancel(self) -> None:
        """Stop opening new chunks. The active chunk is still drained."""
        if not self._cancelled:
            self._cancelled = True
            log_extraction_cancelled(job_id=self._context.job_id)

    def is_cancelled(self) -> bool:
        return self._cancelled

    async def _next_payload(self) -> Any | None:
        while True:
            if self._current is not None:
                if self._current.has_next():
                    payload = await self._current.next()
                    if payload is not None:
                        self._current_produced = True
                        self._stats.payloads += 1
                        return payload
                self._release_current()

            if self._cancelled:
                self._finish()
                return None

            chunk = await self._planner.next_chunk()
            if chunk is None:
                self._finish()
                return None
            self._open(chunk)

    def _open(self, chunk: Chunk) -> None:
        log_chunk_started(job_id=self._context.job_id, chunk=chunk)
        self._current = self._factory.new_extractor(chunk.start, chunk.end)
        self._current_chunk = chunk
        self._current_produced = False
        self._stats.chunks_requested += 1

    def _release_current(self) -> None:
        chunk = self._current_chunk
        assert chunk is not None
        produced = self._current_produced
        if not produced:
            self._stats.empty_chunks += 1
        log_chunk_completed(job_id=self._context.job_id, chunk=chunk, produced_data=produced)
        self._planner.report(chunk, produced)

        self._current = None
        self._current_chunk = None
        self._current_produced = False

    def _finish(self) -> None:
        self._done = True
        log_extraction_complete(
            job_id=self._context.job_id,
            stats=self.stats,
            cancelled=self._cancelled,
        )


class ChunkedDataExtractorFactory(SubExtractorFactory):
    """Creates chunked extractors for arbitrary ranges of one job.

    The template context supplies everything except the time range. Since the
    factory satisfies the SubExtractorFactory contract, a datafeed can request
    a chunked extractor per lookback window the same way it would request a
    plain one.
    """

    def __init__(
        self,
        client: SearchClient,
        extractor_factory: SubExtractorFactory,
        context: ExtractionContext,
    ) -> None:
        self._client = client
        self._extractor_factory = extractor_factory
        self._context = context

    def new_extractor(self, start: int, end: int) -> ChunkedDataExtractor:
        """Create a chunked extractor for ``[start, end)``.

        Raises:
            ValidationError: If start is after end
        """
        if start > end:
            raise ValidationError(f"start [{start}] must be <= end [{end}]")
        return ChunkedDataExtractor(
            self._client,
            self._extractor_factory,
            self._context.with_range(start, end),
        )
