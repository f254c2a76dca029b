"""The three span slots kept per execution context."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

from forkspan import runtime_config
from forkspan.context.local import ContextLocal
from forkspan.tracer.server_span import EMPTY, ServerSpan
from forkspan.tracer.span import Span

logger = logging.getLogger(__name__)

# Local span stacks are immutable tuples, top first. Push and pop build new
# tuples, so the shared empty stack is never modified through any context.
EMPTY_STACK: Tuple[Span, ...] = ()


class ServerSpanSlot(ContextLocal[ServerSpan]):
    def initial_value(self) -> ServerSpan:
        return EMPTY

    def derive_child_value(self, parent_value: ServerSpan) -> ServerSpan:
        if parent_value.span is None:
            return parent_value
        return ServerSpan(span=parent_value.span.clone(), sample=parent_value.sample)


class ClientSpanSlot(ContextLocal[Optional[Span]]):
    def derive_child_value(self, parent_value: Optional[Span]) -> Optional[Span]:
        if parent_value is None:
            return None
        return parent_value.clone()


class LocalSpanStack(ContextLocal[Tuple[Span, ...]]):
    """
    LIFO stack of local spans.

    Local spans nest when a traced operation calls another one in the same
    context; once the inner span is popped the enclosing one is current again.
    """

    def initial_value(self) -> Tuple[Span, ...]:
        return EMPTY_STACK

    def derive_child_value(self, parent_value: Tuple[Span, ...]) -> Tuple[Span, ...]:
        if not parent_value:
            return parent_value
        return tuple(span.clone() for span in parent_value)

    def peek_current(self) -> Optional[Span]:
        stack = self.get()
        return stack[0] if stack else None

    def push(self, span: Span) -> None:
        self.set((span,) + self.get())

    def pop_one(self) -> None:
        """Remove the top span; does nothing if the stack is empty."""
        stack = self.get()
        if not stack:
            if runtime_config.get_warn_on_empty_pop():
                logger.warning("pop on empty local span stack ignored")
            return
        self.set(stack[1:] or EMPTY_STACK)

    def depth(self) -> int:
        return len(self.get())
