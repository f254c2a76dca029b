"""Helper functions for OpenTelemetry compatibility."""

from __future__ import annotations

_TRACE_ID_MASK = (1 << 128) - 1
_SPAN_ID_MASK = (1 << 64) - 1


def to_otel_trace_id(trace_id: int) -> int:
    """
    Convert a span trace_id to OTel's unsigned 128-bit form.
    
    Args:
        trace_id: Trace id, possibly a negative signed 64-bit value
    
    Returns:
        Unsigned trace id accepted by opentelemetry.trace.SpanContext
    """
    if trace_id < 0:
        return trace_id & _SPAN_ID_MASK
    return trace_id & _TRACE_ID_MASK


def to_otel_span_id(span_id: int) -> int:
    """
    Convert a span id to OTel's unsigned 64-bit form.
    
    Args:
        span_id: Span id, possibly a negative signed 64-bit value
    
    Returns:
        Unsigned span id accepted by opentelemetry.trace.SpanContext
    """
    return span_id & _SPAN_ID_MASK


def format_trace_id(trace_id: int) -> str:
    """
    Format a trace_id as a 32-character hex string.
    """
    return format(to_otel_trace_id(trace_id), '032x')


def format_span_id(span_id: int) -> str:
    """
    Format a span id as a 16-character hex string.
    """
    return format(to_otel_span_id(span_id), '016x')
