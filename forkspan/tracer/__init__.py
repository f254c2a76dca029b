"""Span value types."""

from forkspan.tracer.server_span import EMPTY, NOT_SAMPLED, ServerSpan
from forkspan.tracer.span import Annotation, AnnotationType, BinaryAnnotation, Endpoint, Span

__all__ = [
    "Span",
    "Annotation",
    "BinaryAnnotation",
    "AnnotationType",
    "Endpoint",
    "ServerSpan",
    "EMPTY",
    "NOT_SAMPLED",
]
