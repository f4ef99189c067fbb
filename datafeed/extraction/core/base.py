"""Abstract collaborator contracts.

Architecture:
    The chunked extractor depends on three collaborators it never looks
    inside of:
    - SearchClient: executes a search request body against a set of collections
    - SubExtractor: streams raw payloads for a single time chunk
    - SubExtractorFactory: creates a SubExtractor for ``[start, end)``

Design Decisions:
    - Abstract base classes: Enforce a consistent interface across backends
    - Pull-based sub-extractors: ``has_next``/``next`` keep the caller in control
      of progress, so nothing runs unless it is awaited
    - ``next`` returns None once a sub-extractor is drained, rather than raising

See Also:
    - ChunkedDataExtractor: Composes these contracts into one payload stream
    - HTTPSearchClient: aiohttp-backed SearchClient
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..models.search import SearchResponse


class SubExtractor(ABC):
    """Single-chunk data source."""

    @abstractmethod
    def has_next(self) -> bool:
        """Whether further calls to next() may return data."""

    @abstractmethod
    async def next(self) -> Any | None:
        """Return the next raw payload, or None when drained."""

    @abstractmethod
    def cancel(self) -> None:
        """Request cancellation."""

    @abstractmethod
    def is_cancelled(self) -> bool:
        """Whether cancel() has been called."""


class SubExtractorFactory(ABC):
    """Creates sub-extractors for concrete time chunks."""

    @abstractmethod
    def new_extractor(self, start: int, end: int) -> SubExtractor:
        """Create a sub-extractor covering ``[start, end)`` in epoch millis."""


class SearchClient(ABC):
    """Executes search requests against the backend."""

    @abstractmethod
    async def search(self, collections: Sequence[str], body: dict[str, Any]) -> SearchResponse:
        """Run ``body`` against ``collections`` and return the parsed response.

        Non-success statuses are returned on the response, not raised.
        """
