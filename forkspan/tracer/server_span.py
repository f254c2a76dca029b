"""Server span slot value: the span received by this service plus its sample flag."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from forkspan.tracer.span import Span


@dataclass(frozen=True)
class ServerSpan:
    """
    Span received by this service paired with its sampling decision.

    Unhashable: the span it wraps is mutable.
    """

    span: Optional[Span] = None
    sample: Optional[bool] = None  # None = no sampling decision yet

    __hash__ = None

    @classmethod
    def create(cls, span: Optional[Span], sample: Optional[bool] = None) -> "ServerSpan":
        """
        Build a server span value, reusing the shared constants when possible.

        Args:
            span: Span received by the server, or None
            sample: Sampling decision for the trace, or None if undecided

        Returns:
            EMPTY or NOT_SAMPLED when there is no span, otherwise a new value
        """
        if span is None:
            if sample is None:
                return EMPTY
            if sample is False:
                return NOT_SAMPLED
        return cls(span=span, sample=sample)


EMPTY = ServerSpan(span=None, sample=None)
NOT_SAMPLED = ServerSpan(span=None, sample=False)
