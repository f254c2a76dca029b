"""Span value types handed to the span state by tracer collaborators."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional


class AnnotationType(IntEnum):
    BOOL = 0
    BYTES = 1
    I16 = 2
    I32 = 3
    I64 = 4
    DOUBLE = 5
    STRING = 6


@dataclass(frozen=True)
class Endpoint:
    """Identity of the local service being traced."""

    ipv4: str
    port: int
    service_name: str


@dataclass(frozen=True)
class Annotation:
    timestamp: int  # epoch microseconds
    value: str
    endpoint: Optional[Endpoint] = None


@dataclass(frozen=True)
class BinaryAnnotation:
    key: str
    value: bytes
    annotation_type: AnnotationType = AnnotationType.STRING
    endpoint: Optional[Endpoint] = None


@dataclass
class Span:
    """
    A timed unit of traced work.

    Scalar fields are mutable while the span is in flight. Annotation lists
    are only appended to before a span is published and never mutated after,
    so clones share them by reference.
    """

    trace_id: int
    span_id: int
    name: str = ""
    parent_id: Optional[int] = None
    timestamp: Optional[int] = None  # epoch microseconds
    duration: Optional[int] = None  # microseconds
    debug: bool = False
    annotations: List[Annotation] = field(default_factory=list)
    binary_annotations: List[BinaryAnnotation] = field(default_factory=list)

    def clone(self) -> "Span":
        """
        Return a copy holding independent scalar fields.

        The annotation lists of the copy are the same objects as the source's.
        """
        return Span(
            trace_id=self.trace_id,
            span_id=self.span_id,
            name=self.name,
            parent_id=self.parent_id,
            timestamp=self.timestamp,
            duration=self.duration,
            debug=self.debug,
            annotations=self.annotations,
            binary_annotations=self.binary_annotations,
        )
