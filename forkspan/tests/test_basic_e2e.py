"""Basic smoke tests for forkspan.

Quick sanity checks that the public API is importable and usable. For the
per-component tests see the other modules in this directory.
"""

import pytest

import forkspan
from forkspan import Endpoint, InheritableSpanState, Span


def test_version_exposed():
    """Smoke test: version is accessible."""
    assert hasattr(forkspan, '__version__')
    assert isinstance(forkspan.__version__, str)
    assert len(forkspan.__version__) > 0


def test_import_state():
    """Smoke test: state can be built and used from the top-level package."""
    state = InheritableSpanState(Endpoint("127.0.0.1", 80, "svc"))
    state.set_current_local_span(Span(trace_id=1, span_id=1, name="op"))

    assert state.get_current_local_span().name == "op"


def test_end_to_end_fork():
    """A forked child sees an equal but distinct copy of the parent's server span."""
    state = InheritableSpanState(Endpoint("127.0.0.1", 80, "svc"))
    state.set_current_server_span(
        forkspan.ServerSpan.create(Span(trace_id=7, span_id=7, name="root"), True)
    )

    parent_value = state.get_current_server_span()
    child = forkspan.fork_context()

    def in_child():
        value = state.get_current_server_span()
        assert value.span == Span(trace_id=7, span_id=7, name="root")
        assert value.sample is True
        assert value.span is not parent_value.span
        assert state.endpoint() == Endpoint("127.0.0.1", 80, "svc")
        value.span.name = "child-mutated"

    child.run(in_child)

    assert state.get_current_server_span().span.name == "root"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
