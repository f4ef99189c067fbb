"""Unit tests for SearchResponse parsing."""

from __future__ import annotations

from datafeed.extraction.models import DataSummary, SearchResponse


class TestSearchResponse:
    """Test SearchResponse.from_payload."""

    def test_from_payload_with_object_total(self):
        """Test hits.total in {"value": n} form."""
        payload = {
            "hits": {"total": {"value": 15000, "relation": "eq"}, "hits": []},
            "aggregations": {
                "earliest_time": {"value": 100000.0, "value_as_string": "100000"},
                "latest_time": {"value": 400000.0},
            },
            "_shards": {"total": 5, "successful": 5, "failed": 0},
        }

        response = SearchResponse.from_payload(200, payload)

        assert response.is_success is True
        assert response.total_hits == 15000
        assert response.aggregation_value("earliest_time") == 100000.0
        assert response.aggregation_value("latest_time") == 400000.0
        assert response.aggregation_value("missing") is None
        assert response.shard_failures == []
        assert response.total_hits_exact is True
        assert response.error is None

    def test_from_payload_with_integer_total(self):
        response = SearchResponse.from_payload(200, {"hits": {"total": 10}})
        assert response.total_hits == 10
        assert response.total_hits_exact is True

    def test_from_payload_with_capped_total(self):
        """Test a "gte" relation marks the total as a lower bound."""
        payload = {"hits": {"total": {"value": 10000, "relation": "gte"}, "hits": []}}

        response = SearchResponse.from_payload(200, payload)

        assert response.total_hits == 10000
        assert response.total_hits_exact is False

    def test_from_payload_with_error_text(self):
        """Test a non-JSON body wrapped as an error string is kept."""
        response = SearchResponse.from_payload(200, {"error": "<html>proxy login</html>"})

        assert response.is_success is True
        assert response.error == "<html>proxy login</html>"
        assert response.total_hits == 0

    def test_from_payload_with_shard_failures(self):
        """Test shard failure reasons are flattened to strings."""
        payload = {
            "hits": {"total": 3},
            "_shards": {
                "total": 2,
                "failed": 1,
                "failures": [
                    {"shard": 0, "reason": {"type": "query_shard_exception", "reason": "bad query"}},
                    {"shard": 1, "reason": "node disconnected"},
                ],
            },
        }

        response = SearchResponse.from_payload(200, payload)

        assert response.shard_failures == ["bad query", "node disconnected"]

    def test_from_error_payload(self):
        """Test error bodies yield an unsuccessful, empty response."""
        response = SearchResponse.from_payload(500, {"error": {"type": "boom"}, "status": 500})

        assert response.is_success is False
        assert response.total_hits == 0
        assert response.aggregations == {}
        assert response.error == "boom"

    def test_from_empty_payload(self):
        response = SearchResponse.from_payload(404, None)
        assert response.status == 404
        assert response.is_success is False


class TestDataSummary:
    """Test DataSummary helpers."""

    def test_spread(self):
        summary = DataSummary(total_count=10, earliest=1000, latest=2200)
        assert summary.has_data is True
        assert summary.spread == 1200

    def test_spread_without_data(self):
        summary = DataSummary(total_count=0)
        assert summary.has_data is False
        assert summary.spread == 0
