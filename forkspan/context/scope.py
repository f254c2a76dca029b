"""Scoped helpers that release span state on every exit path."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from forkspan.context.state import InheritableSpanState, SpanState
from forkspan.tracer.server_span import ServerSpan
from forkspan.tracer.span import Span


@contextmanager
def local_span(state: SpanState, span: Span) -> Iterator[Span]:
    """
    Make ``span`` the current local span for the duration of the block.

    The span is popped on exit, whether or not the block raised, so an
    enclosing local span becomes current again.
    """
    state.set_current_local_span(span)
    try:
        yield span
    finally:
        state.set_current_local_span(None)


@contextmanager
def client_span(state: SpanState, span: Optional[Span]) -> Iterator[Optional[Span]]:
    """Set the current client span for the block, restoring the previous one on exit."""
    previous = state.get_current_client_span()
    state.set_current_client_span(span)
    try:
        yield span
    finally:
        state.set_current_client_span(previous)


@contextmanager
def server_span(
    state: SpanState,
    span: Optional[Span],
    sample: Optional[bool] = None,
) -> Iterator[ServerSpan]:
    """
    Set the current server span for the block, restoring the previous one on exit.

    Args:
        state: Span state to update
        span: Span received by the server, or None
        sample: Sampling decision for the trace

    Yields:
        The ServerSpan value installed for the block
    """
    previous = state.get_current_server_span()
    value = ServerSpan.create(span, sample)
    state.set_current_server_span(value)
    try:
        yield value
    finally:
        state.set_current_server_span(previous)


@contextmanager
def clean_context(state: InheritableSpanState) -> Iterator[InheritableSpanState]:
    """
    Clear every slot of ``state`` when the block exits.

    Wrap each unit of work run on a pooled worker so the next unit does not
    observe spans left behind by this one.
    """
    try:
        yield state
    finally:
        state.clear()
