"""Expose the current span as OpenTelemetry context, for OTel-instrumented libraries."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from opentelemetry import context as context_api
from opentelemetry.context import Context
from opentelemetry.trace import NonRecordingSpan, set_span_in_context
from opentelemetry.trace import SpanContext as OTelSpanContext, TraceFlags

from forkspan import runtime_config
from forkspan.context.state import SpanState
from forkspan.tracer.span import Span
from forkspan.utils.helpers import format_span_id, format_trace_id, to_otel_span_id, to_otel_trace_id

logger = logging.getLogger(__name__)


def to_otel_span_context(
    span: Span,
    sample: Optional[bool] = None,
    is_remote: bool = False,
) -> OTelSpanContext:
    """
    Convert a span to an OTel SpanContext.

    Debug spans are always marked sampled.

    Args:
        span: Span to convert
        sample: Sampling decision for the trace
        is_remote: Whether the span was received from an upstream service
    """
    sampled = bool(sample) or span.debug
    return OTelSpanContext(
        trace_id=to_otel_trace_id(span.trace_id),
        span_id=to_otel_span_id(span.span_id),
        is_remote=is_remote,
        trace_flags=TraceFlags(TraceFlags.SAMPLED if sampled else TraceFlags.DEFAULT),
    )


def _current_span_and_origin(state: SpanState) -> Tuple[Optional[Span], bool]:
    span = state.get_current_local_span()
    if span is None:
        span = state.get_current_client_span()
    if span is not None:
        return span, False
    # Server spans arrive from upstream.
    return state.get_current_server_span().span, True


def current_span(state: SpanState) -> Optional[Span]:
    """Top local span if any, falling back to the client span and then the server span."""
    return _current_span_and_origin(state)[0]


def current_otel_context(state: SpanState, context: Optional[Context] = None) -> Context:
    """
    Build an OTel context whose current span mirrors ``state``.

    Args:
        state: Span state to read from
        context: Base OTel context; defaults to the active one

    Returns:
        Context holding a NonRecordingSpan for the current span, or the
        base context unchanged when there is no current span
    """
    base = context if context is not None else context_api.get_current()
    span, is_remote = _current_span_and_origin(state)
    if span is None:
        return base
    otel_context = to_otel_span_context(span, state.sample(), is_remote=is_remote)
    if not otel_context.is_valid:
        return base
    return set_span_in_context(NonRecordingSpan(otel_context), base)


@contextmanager
def attached_otel_context(state: SpanState) -> Iterator[Context]:
    """Attach ``current_otel_context(state)`` for the block, detaching on exit."""
    ctx = current_otel_context(state)
    if runtime_config.get_debug():
        span = current_span(state)
        if span is not None:
            logger.debug(
                f"attaching otel context trace_id={format_trace_id(span.trace_id)} "
                f"span_id={format_span_id(span.span_id)}"
            )
    token = context_api.attach(ctx)
    try:
        yield ctx
    finally:
        context_api.detach(token)
