"""Search response model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SearchResponse(BaseModel):
    """Parsed search backend response.

    Only the parts the data summary probe needs are kept: the HTTP status,
    the total hit count and whether it is exact, single-value metric
    aggregations, shard failures and any top-level error.
    """

    status: int
    total_hits: int = Field(default=0, ge=0)
    total_hits_exact: bool = True
    aggregations: dict[str, float | None] = Field(default_factory=dict)
    shard_failures: list[str] = Field(default_factory=list)
    error: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_success(self) -> bool:
        """Check if the status is 2xx."""
        return 200 <= self.status < 300

    def aggregation_value(self, name: str) -> float | None:
        """Get a single-value aggregation result by name."""
        return self.aggregations.get(name)

    @classmethod
    def from_payload(cls, status: int, payload: dict[str, Any] | None) -> SearchResponse:
        """Build a response from an Elasticsearch-style ``_search`` JSON body."""
        payload = payload or {}

        total = (payload.get("hits") or {}).get("total", 0)
        exact = True
        # Newer backends wrap the total as {"value": n, "relation": "eq"};
        # "gte" marks a lower bound when hit counting was capped
        if isinstance(total, dict):
            exact = total.get("relation", "eq") == "eq"
            total = total.get("value", 0)

        aggregations: dict[str, float | None] = {}
        for name, agg in (payload.get("aggregations") or {}).items():
            if isinstance(agg, dict):
                aggregations[name] = agg.get("value")

        failures: list[str] = []
        for failure in (payload.get("_shards") or {}).get("failures") or []:
            reason = failure.get("reason", failure) if isinstance(failure, dict) else failure
            if isinstance(reason, dict):
                reason = reason.get("reason") or reason.get("type") or str(reason)
            failures.append(str(reason))

        error = payload.get("error")
        if isinstance(error, dict):
            error = error.get("reason") or error.get("type") or str(error)

        return cls(
            status=status,
            total_hits=total or 0,
            total_hits_exact=exact,
            aggregations=aggregations,
            shard_failures=failures,
            error=str(error) if error is not None else None,
        )
