"""
Tests for telemetry helpers
"""
from unittest.mock import patch, MagicMock

from mcp_seam.telemetry import metrics as metrics_module
from mcp_seam.telemetry.metrics import get_counter, get_histogram, increment_counter, record_latency
from mcp_seam.telemetry.tracer import create_span, get_current_trace_id


class TestMetrics:
    """Test instrument caching and recording"""

    def test_counter_is_cached(self):
        assert get_counter("test.cached.counter", "test") is get_counter("test.cached.counter", "test")

    def test_histogram_is_cached(self):
        assert get_histogram("test.cached.histogram", "test") is get_histogram("test.cached.histogram", "test")

    def test_increment_counter_passes_attributes(self):
        counter = MagicMock()
        with patch.dict(metrics_module._counters, {"test.counter": counter}):
            increment_counter("test.counter", 3, {"method": "ping"})
        counter.add.assert_called_once_with(3, {"method": "ping"})

    def test_record_latency_defaults_attributes(self):
        histogram = MagicMock()
        with patch.dict(metrics_module._histograms, {"test.latency": histogram}):
            record_latency("test.latency", 1.5)
        histogram.record.assert_called_once_with(1.5, {})


class TestTracer:
    """Test span helpers without a configured provider"""

    def test_create_span_is_context_manager(self):
        with create_span("test.span", {"key": "value"}):
            pass

    def test_no_trace_id_without_recording_span(self):
        assert get_current_trace_id() is None
