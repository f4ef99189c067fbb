"""Chunk planning logic for determining chunk windows.

This module provides the ChunkPlanner class that walks a cursor through the
extraction range, producing one chunk at a time. Chunk spans are either fixed
by configuration or derived from the document density reported by a data
summary probe.
"""

from __future__ import annotations

from ...core.context import ExtractionContext
from ...models.summary import DataSummary
from .definitions import Chunk, compute_chunk_span
from .summary import DataSummaryProbe
from .telemetry import log_chunk_reconfigured


class ChunkPlanner:
    """Plans chunk windows for a chunked extraction run.

    The planner owns the cursor (start of the next unplanned chunk) and the
    current span estimate. It only advances the cursor once the extractor
    reports that a chunk produced data; an empty chunk instead triggers a new
    probe from the same cursor, since the density estimate was wrong for that
    part of the range.
    """

    def __init__(self, context: ExtractionContext, probe: DataSummaryProbe) -> None:
        """Initialize chunk planner.

        Args:
            context: Extraction context for the run
            probe: Probe used to (re-)estimate density
        """
        self._context = context
        self._probe = probe
        self._cursor = context.start
        self._span: int | None = None
        self._needs_reprobe = False
        self._exhausted = False
        self._chunk_index = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def span(self) -> int | None:
        return self._span

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def seed(self, summary: DataSummary) -> None:
        """Configure the cursor and span from a data summary.

        Args:
            summary: Summary of ``[cursor, end)``
        """
        if not summary.has_data:
            self._exhausted = True
            return

        # Skip the part of the range that precedes the first document
        assert summary.earliest is not None
        self._cursor = max(self._cursor, summary.earliest)

        fixed_span = self._context.chunk_span_ms
        if fixed_span is not None:
            self._span = fixed_span
        else:
            self._span = compute_chunk_span(
                total_count=summary.total_count,
                spread=summary.spread,
                batch_size_hint=self._context.batch_size_hint,
                remaining=self._context.end - self._cursor,
            )
        self._needs_reprobe = False

    async def next_chunk(self) -> Chunk | None:
        """Plan the next chunk.

        Probes ``[cursor, end)`` first when there is no span estimate yet or the
        last chunk came back empty. The cursor is not advanced here.

        Returns:
            Next chunk, or None when the run is complete

        Raises:
            DataExtractionError: If a required probe fails
        """
        end = self._context.end
        if self._exhausted or self._cursor >= end:
            return None

        if self._span is None or self._needs_reprobe:
            summary = await self._probe.probe(self._cursor, end)
            self.seed(summary)
            if self._exhausted:
                return None

        assert self._span is not None
        chunk = Chunk(
            start=self._cursor,
            end=min(self._cursor + self._span, end),
            chunk_index=self._chunk_index,
        )
        self._chunk_index += 1
        return chunk

    def report(self, chunk: Chunk, produced_data: bool) -> None:
        """Record the outcome of a drained chunk.

        Args:
            chunk: Chunk previously returned by next_chunk()
            produced_data: Whether the chunk's sub-extractor yielded any payload
        """
        if produced_data:
            self._cursor = chunk.end
            return

        self._needs_reprobe = True
        log_chunk_reconfigured(
            job_id=self._context.job_id,
            cursor=self._cursor,
            end=self._context.end,
        )
