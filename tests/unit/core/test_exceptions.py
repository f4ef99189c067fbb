"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from datafeed.extraction.core import DataError, DataExtractionError, ValidationError


def test_data_extraction_error_with_status_code():
    """Test DataExtractionError carries the backend status."""
    error = DataExtractionError("search failed", status_code=503)
    assert str(error) == "search failed"
    assert error.status_code == 503
    assert error.shard_failures == []
    assert isinstance(error, DataError)


def test_data_extraction_error_with_shard_failures():
    """Test DataExtractionError carries shard failure reasons."""
    error = DataExtractionError("partial", status_code=200, shard_failures=["node left"])
    assert error.shard_failures == ["node left"]


def test_validation_error_is_data_error():
    assert isinstance(ValidationError("bad"), DataError)
