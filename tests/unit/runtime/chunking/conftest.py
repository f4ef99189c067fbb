"""Shared fixtures for chunked extraction tests."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from unittest.mock import MagicMock

import pytest

from datafeed.extraction.core import ExtractionContext, SearchClient, SubExtractor, SubExtractorFactory
from datafeed.extraction.models import SearchResponse


class StubSubExtractor(SubExtractor):
    """Sub-extractor returning canned payloads, then None."""

    def __init__(self, *payloads: Any) -> None:
        self.payloads = list(payloads)
        self._has_next = True

    def has_next(self) -> bool:
        return self._has_next

    async def next(self) -> Any | None:
        if not self.payloads:
            self._has_next = False
            return None
        return self.payloads.pop(0)

    def cancel(self) -> None:
        pass

    def is_cancelled(self) -> bool:
        return False


class RecordingSearchClient(SearchClient):
    """Search client that records requests and replays the next response."""

    def __init__(self) -> None:
        self.requests: list[tuple[tuple[str, ...], dict[str, Any]]] = []
        self.next_response: SearchResponse | None = None
        self.queued: list[SearchResponse] = []

    async def search(self, collections: Sequence[str], body: dict[str, Any]) -> SearchResponse:
        self.requests.append((tuple(collections), body))
        if self.queued:
            return self.queued.pop(0)
        assert self.next_response is not None
        return self.next_response


def summary_response(total_hits: int, earliest: int, latest: int) -> SearchResponse:
    """Successful data summary response."""
    return SearchResponse(
        status=200,
        total_hits=total_hits,
        aggregations={"earliest_time": float(earliest), "latest_time": float(latest)},
    )


def error_response() -> SearchResponse:
    return SearchResponse(status=500)


def shard_failure_response() -> SearchResponse:
    return SearchResponse(status=200, shard_failures=["shard failed"])


@pytest.fixture
def client() -> RecordingSearchClient:
    return RecordingSearchClient()


@pytest.fixture
def extractor_factory():
    """Factory mock mapping (start, end) to registered sub-extractors."""
    factory = MagicMock(spec=SubExtractorFactory)
    factory.extractors = {}

    def new_extractor(start: int, end: int) -> SubExtractor:
        return factory.extractors[(start, end)]

    factory.new_extractor.side_effect = new_extractor
    return factory


@pytest.fixture
def make_context():
    """Build extraction contexts with test defaults."""

    def _make(start: int, end: int, **overrides: Any) -> ExtractionContext:
        values: dict[str, Any] = {
            "job_id": "test-job",
            "time_field": "time",
            "collections": ("index-1", "index-2"),
            "batch_size_hint": 1000,
            "start": start,
            "end": end,
        }
        values.update(overrides)
        return ExtractionContext(**values)

    return _make


@pytest.fixture
def responses():
    """Canned search responses."""

    class Responses:
        summary = staticmethod(summary_response)
        error = staticmethod(error_response)
        shard_failure = staticmethod(shard_failure_response)

    return Responses


@pytest.fixture
def stub_extractor():
    """Build stub sub-extractors."""
    return StubSubExtractor
