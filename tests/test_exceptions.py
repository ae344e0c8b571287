"""Tests for the telemetry exception hierarchy."""

import pytest

from nettelemetry.exceptions import (
    ProcessingError,
    SnapshotError,
    SourceCallError,
    SourceShapeError,
    TelemetryError,
)


class TestExceptionHierarchy:
    """Test exception inheritance and structure."""

    @pytest.mark.parametrize("exc_cls", [SourceShapeError, SourceCallError, ProcessingError, SnapshotError])
    def test_inherits_from_telemetry_error(self, exc_cls):
        assert issubclass(exc_cls, TelemetryError)
        assert issubclass(exc_cls, Exception)

    def test_source_shape_error_message(self):
        exc = SourceShapeError("fetch_counters", {"iface": "eth0"})
        assert exc.operation == "fetch_counters"
        assert exc.result_type == "dict"
        assert str(exc) == "fetch_counters returned non-list result (dict)"

    def test_source_call_error_keeps_cause(self):
        cause = OSError("permission denied")
        exc = SourceCallError("net_if_addrs", cause)
        assert exc.operation == "net_if_addrs"
        assert exc.cause is cause
        assert str(exc) == "net_if_addrs failed: permission denied"

    def test_processing_error_message(self):
        assert str(ProcessingError("bad record")) == "bad record"
