"""Custom exception hierarchy."""

from __future__ import annotations


class DataError(Exception):
    """Base exception for all library errors."""

    pass


class DataExtractionError(DataError):
    """Search backend reported a failed or partial extraction.

    Raised when a data summary search returns a non-success status, or when
    it succeeds overall but one or more shards failed.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        shard_failures: list[str] | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.shard_failures = shard_failures or []


class ValidationError(DataError):
    """Invalid extraction arguments."""

    pass
