"""
OpenTelemetry Integration Module

Provides tracing and metrics for message dispatch:
- tracer: Tracer setup and span creation
- metrics: Counters and latency histograms
"""

from .metrics import (
    setup_metrics,
    increment_counter,
    record_latency
)
from .tracer import (
    setup_tracer,
    create_span,
    get_current_trace_id,
    set_span_attribute
)

__all__ = [
    "setup_metrics",
    "increment_counter",
    "record_latency",
    "setup_tracer",
    "create_span",
    "get_current_trace_id",
    "set_span_attribute"
]
