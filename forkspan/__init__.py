"""forkspan: current trace span state that forked execution contexts inherit."""

from forkspan.context import (
    ContextLocal,
    InheritableSpanState,
    SpanState,
    clean_context,
    client_span,
    create_task,
    fork_context,
    local_span,
    server_span,
    start_thread,
    submit,
)
from forkspan.errors import ForkspanError, ValidationError
from forkspan.tracer import (
    EMPTY,
    NOT_SAMPLED,
    Annotation,
    BinaryAnnotation,
    Endpoint,
    ServerSpan,
    Span,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Span",
    "Annotation",
    "BinaryAnnotation",
    "Endpoint",
    "ServerSpan",
    "EMPTY",
    "NOT_SAMPLED",
    "ContextLocal",
    "SpanState",
    "InheritableSpanState",
    "fork_context",
    "start_thread",
    "create_task",
    "submit",
    "local_span",
    "client_span",
    "server_span",
    "clean_context",
    "ForkspanError",
    "ValidationError",
]
