"""Utility functions for forkspan."""

from forkspan.utils.helpers import (
    format_trace_id,
    format_span_id,
    to_otel_trace_id,
    to_otel_span_id,
)

__all__ = [
    "format_trace_id",
    "format_span_id",
    "to_otel_trace_id",
    "to_otel_span_id",
]
