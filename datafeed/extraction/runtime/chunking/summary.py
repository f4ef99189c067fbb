"""Data summary probe.

This module builds the zero-hit aggregate search used to learn how many
documents a time range holds and when the first and last of them occur. The
chunk planner uses that summary to size chunks.
"""

from __future__ import annotations

from typing import Any

from ...core.base import SearchClient
from ...core.context import ExtractionContext
from ...core.exceptions import DataExtractionError
from ...models.search import SearchResponse
from ...models.summary import DataSummary
from .definitions import EARLIEST_TIME_AGG, LATEST_TIME_AGG
from .telemetry import log_summary_probe


def build_summary_request(
    context: ExtractionContext, range_start: int, range_end: int
) -> dict[str, Any]:
    """Build the search body for a data summary over ``[range_start, range_end)``.

    The body requests no hits and no sort; only the min and max of the time
    field are aggregated. Hit counting is uncapped so the total is exact.
    """
    time_range = {
        "range": {
            context.time_field: {
                "gte": range_start,
                "lt": range_end,
                "format": "epoch_millis",
            }
        }
    }
    return {
        "size": 0,
        "track_total_hits": True,
        "query": {"bool": {"filter": [context.query, time_range]}},
        "aggregations": {
            EARLIEST_TIME_AGG: {"min": {"field": context.time_field}},
            LATEST_TIME_AGG: {"max": {"field": context.time_field}},
        },
    }


class DataSummaryProbe:
    """Issues data summary searches for an extraction context."""

    def __init__(self, client: SearchClient, context: ExtractionContext) -> None:
        self._client = client
        self._context = context
        self.probe_count = 0

    async def probe(self, range_start: int, range_end: int) -> DataSummary:
        """Summarize the documents in ``[range_start, range_end)``.

        Args:
            range_start: Inclusive start in epoch milliseconds
            range_end: Exclusive end in epoch milliseconds

        Returns:
            DataSummary for the range

        Raises:
            DataExtractionError: If the search failed or any shard failed
        """
        body = build_summary_request(self._context, range_start, range_end)
        self.probe_count += 1
        response = await self._client.search(self._context.collections, body)
        summary = self._to_summary(response)

        log_summary_probe(
            job_id=self._context.job_id,
            range_start=range_start,
            range_end=range_end,
            summary=summary,
        )
        return summary

    def _to_summary(self, response: SearchResponse) -> DataSummary:
        job_id = self._context.job_id
        if not response.is_success:
            raise DataExtractionError(
                f"[{job_id}] Data summary search returned status {response.status}",
                status_code=response.status,
            )
        if response.shard_failures:
            raise DataExtractionError(
                f"[{job_id}] Data summary search had {len(response.shard_failures)} "
                f"shard failure(s): {response.shard_failures[0]}",
                status_code=response.status,
                shard_failures=response.shard_failures,
            )
        if response.error is not None:
            raise DataExtractionError(
                f"[{job_id}] Data summary search returned an error: {response.error}",
                status_code=response.status,
            )
        if not response.total_hits_exact:
            raise DataExtractionError(
                f"[{job_id}] Data summary search returned a lower bound of "
                f"{response.total_hits} hits instead of an exact count",
                status_code=response.status,
            )

        if response.total_hits == 0:
            return DataSummary(total_count=0)

        earliest = response.aggregation_value(EARLIEST_TIME_AGG)
        latest = response.aggregation_value(LATEST_TIME_AGG)
        if earliest is None or latest is None:
            raise DataExtractionError(
                f"[{job_id}] Data summary search returned {response.total_hits} hits "
                f"without time bounds for field [{self._context.time_field}]",
                status_code=response.status,
            )
        return DataSummary(
            total_count=response.total_hits,
            earliest=int(earliest),
            latest=int(latest),
        )
