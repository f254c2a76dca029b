"""Span state facade consumed by server, client and local tracers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from forkspan.context.slots import ClientSpanSlot, LocalSpanStack, ServerSpanSlot
from forkspan.errors import ValidationError
from forkspan.tracer.server_span import ServerSpan
from forkspan.tracer.span import Endpoint, Span


class SpanState(ABC):
    """Current server, client and local spans as seen by the calling context."""

    @abstractmethod
    def get_current_server_span(self) -> ServerSpan:
        ...

    @abstractmethod
    def set_current_server_span(self, span: Optional[ServerSpan]) -> None:
        ...

    @abstractmethod
    def get_current_client_span(self) -> Optional[Span]:
        ...

    @abstractmethod
    def set_current_client_span(self, span: Optional[Span]) -> None:
        ...

    @abstractmethod
    def get_current_local_span(self) -> Optional[Span]:
        ...

    @abstractmethod
    def set_current_local_span(self, span: Optional[Span]) -> None:
        ...

    @abstractmethod
    def endpoint(self) -> Endpoint:
        ...

    def sample(self) -> Optional[bool]:
        """Sampling decision of the current server span, None if undecided."""
        return self.get_current_server_span().sample


class InheritableSpanState(SpanState):
    """
    Span state that children forked through ``forkspan.context.fork`` inherit.

    A forked child starts with clones of the parent's spans, so neither side
    can see the other's later changes.

    Tracers must pop local spans and reset server/client spans when a unit of
    work completes. A pooled worker thread otherwise hands the leftover spans
    to whatever runs on it next. See ``forkspan.context.scope``.
    """

    def __init__(self, endpoint: Endpoint) -> None:
        """
        Args:
            endpoint: Endpoint of the local service being traced

        Raises:
            ValidationError: if endpoint is None
        """
        if endpoint is None:
            raise ValidationError("Endpoint must be specified.")
        self._endpoint = endpoint
        self._server_span = ServerSpanSlot("server_span")
        self._client_span = ClientSpanSlot("client_span")
        self._local_spans = LocalSpanStack("local_spans")

    def get_current_server_span(self) -> ServerSpan:
        return self._server_span.get()

    def set_current_server_span(self, span: Optional[ServerSpan]) -> None:
        if span is None:
            self._server_span.clear()
        else:
            self._server_span.set(span)

    def get_current_client_span(self) -> Optional[Span]:
        return self._client_span.get()

    def set_current_client_span(self, span: Optional[Span]) -> None:
        self._client_span.set(span)

    def get_current_local_span(self) -> Optional[Span]:
        return self._local_spans.peek_current()

    def set_current_local_span(self, span: Optional[Span]) -> None:
        """
        Push ``span`` as the current local span, or pop the top one if ``span`` is None.
        """
        if span is None:
            self._local_spans.pop_one()
        else:
            self._local_spans.push(span)

    def endpoint(self) -> Endpoint:
        return self._endpoint

    def local_span_depth(self) -> int:
        return self._local_spans.depth()

    def clear(self) -> None:
        """Reset all three slots for the calling context."""
        self._server_span.clear()
        self._client_span.clear()
        self._local_spans.clear()

    def __repr__(self) -> str:
        return (
            "InheritableSpanState("
            f"endpoint={self._endpoint!r}, "
            f"current_local_span={self._local_spans!r}, "
            f"current_client_span={self._client_span!r}, "
            f"current_server_span={self._server_span!r})"
        )
