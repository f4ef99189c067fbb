"""Data summary model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class DataSummary(BaseModel):
    """Document count and time bounds observed over a probed sub-range.

    ``earliest`` and ``latest`` are epoch milliseconds and are only meaningful
    when ``total_count`` is positive.
    """

    total_count: int = Field(..., ge=0)
    earliest: int | None = None
    latest: int | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def has_data(self) -> bool:
        """Check if the probed range contains any documents."""
        return self.total_count > 0

    @property
    def spread(self) -> int:
        """Time between the earliest and latest documents."""
        if not self.has_data or self.earliest is None or self.latest is None:
            return 0
        return self.latest - self.earliest
