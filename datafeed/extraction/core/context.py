"""Extraction context model.

Immutable configuration for a single chunked extraction run. Timestamps are
epoch milliseconds; ``start`` is inclusive and ``end`` exclusive.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


def _match_all() -> dict[str, Any]:
    return {"match_all": {}}


class ExtractionContext(BaseModel):
    """Configuration for one extraction run."""

    job_id: str = Field(..., min_length=1)
    time_field: str = Field(..., min_length=1)
    collections: tuple[str, ...] = Field(..., min_length=1)
    query: dict[str, Any] = Field(default_factory=_match_all)
    batch_size_hint: int = Field(..., gt=0)
    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)
    chunk_span: timedelta | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("start", "end", mode="before")
    @classmethod
    def normalize_timestamp(cls, v: Any) -> Any:
        """Accept datetimes and convert them to epoch milliseconds."""
        if isinstance(v, datetime):
            if v.tzinfo is None:
                raise ValueError("datetime bounds must be timezone-aware")
            return int(v.timestamp() * 1000)
        return v

    @field_validator("chunk_span", mode="before")
    @classmethod
    def normalize_chunk_span(cls, v: Any) -> Any:
        """Accept integer milliseconds for the chunk span."""
        if isinstance(v, int) and not isinstance(v, bool):
            return timedelta(milliseconds=v)
        return v

    @field_validator("chunk_span")
    @classmethod
    def validate_chunk_span(cls, v: timedelta | None) -> timedelta | None:
        """Validate chunk span is at least one millisecond when set."""
        if v is not None and v < timedelta(milliseconds=1):
            raise ValueError("chunk_span must be at least 1ms")
        return v

    @model_validator(mode="after")
    def validate_range(self) -> ExtractionContext:
        """Validate start <= end."""
        if self.start > self.end:
            raise ValueError("start must be <= end")
        return self

    @property
    def chunk_span_ms(self) -> int | None:
        """Fixed chunk span in milliseconds, or None for adaptive sizing."""
        if self.chunk_span is None:
            return None
        return self.chunk_span // timedelta(milliseconds=1)

    def with_range(self, start: int, end: int) -> ExtractionContext:
        """Return a copy of this context covering ``[start, end)``."""
        return ExtractionContext(**{**self.model_dump(), "start": start, "end": end})
