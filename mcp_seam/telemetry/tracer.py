"""
OpenTelemetry Tracing

Tracer setup and span helpers used around message dispatch.
"""

import logging
from typing import Any, Dict, Optional

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ALWAYS_ON
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

logger = logging.getLogger(__name__)

def setup_tracer(service_name: str, otlp_endpoint: str = "localhost:4317"):
    """Configure OpenTelemetry tracer

    Args:
        service_name: Service name
        otlp_endpoint: OTLP receiver address

    Returns:
        Tracer: Tracer for the service
    """
    provider = TracerProvider(sampler=ALWAYS_ON)
    provider.add_span_processor(BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint)))
    trace.set_tracer_provider(provider)

    tracer = trace.get_tracer(service_name)

    logger.info(f"OpenTelemetry trace configured, service name: {service_name}, OTLP endpoint: {otlp_endpoint}")

    return tracer

def create_span(name: str, attributes: Dict[str, Any] = None):
    """Start a new span as the current span

    Args:
        name: Span name
        attributes: Span attributes

    Returns:
        Context manager yielding the span
    """
    tracer = trace.get_tracer(__name__)
    return tracer.start_as_current_span(
        name,
        attributes=attributes or {},
        kind=trace.SpanKind.SERVER,
    )

def get_current_trace_id() -> Optional[str]:
    """Hex trace id of the active span, or None outside a recorded span"""
    span_context = trace.get_current_span().get_span_context()
    if not span_context.is_valid:
        return None
    return span_context.trace_id.to_bytes(16, byteorder='big').hex()

def set_span_attribute(key: str, value: Any):
    """Set an attribute on the active span (no-op outside a recorded span)"""
    trace.get_current_span().set_attribute(key, value)
