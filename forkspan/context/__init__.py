"""Context-local span state and fork helpers."""

from forkspan.context.fork import create_task, fork_context, start_thread, submit
from forkspan.context.local import ContextLocal
from forkspan.context.otel_bridge import (
    attached_otel_context,
    current_otel_context,
    current_span,
    to_otel_span_context,
)
from forkspan.context.scope import clean_context, client_span, local_span, server_span
from forkspan.context.slots import EMPTY_STACK, ClientSpanSlot, LocalSpanStack, ServerSpanSlot
from forkspan.context.state import InheritableSpanState, SpanState

__all__ = [
    "ContextLocal",
    "fork_context",
    "start_thread",
    "create_task",
    "submit",
    "EMPTY_STACK",
    "ServerSpanSlot",
    "ClientSpanSlot",
    "LocalSpanStack",
    "SpanState",
    "InheritableSpanState",
    "local_span",
    "client_span",
    "server_span",
    "clean_context",
    "current_span",
    "to_otel_span_context",
    "current_otel_context",
    "attached_otel_context",
]
