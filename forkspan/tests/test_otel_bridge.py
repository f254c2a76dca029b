"""Tests for the OpenTelemetry bridge."""

import logging

import pytest
from opentelemetry import context as context_api
from opentelemetry.trace import get_current_span

from forkspan import runtime_config
from forkspan.context import (
    InheritableSpanState,
    attached_otel_context,
    current_otel_context,
    current_span,
    to_otel_span_context,
)
from forkspan.tracer import Endpoint, ServerSpan, Span
from forkspan.utils import format_span_id, format_trace_id, to_otel_span_id, to_otel_trace_id


@pytest.fixture
def state():
    return InheritableSpanState(Endpoint("127.0.0.1", 80, "svc"))


class TestHelpers:
    """Test id conversions."""

    def test_positive_ids_unchanged(self):
        assert to_otel_trace_id(7) == 7
        assert to_otel_span_id(7) == 7

    def test_negative_ids_become_unsigned(self):
        assert to_otel_span_id(-1) == 0xFFFFFFFFFFFFFFFF
        assert to_otel_trace_id(-1) == 0xFFFFFFFFFFFFFFFF

    def test_format(self):
        assert format_trace_id(255) == "000000000000000000000000000000ff"
        assert format_span_id(255) == "00000000000000ff"


class TestToOtelSpanContext:
    """Test Span -> OTel SpanContext conversion."""

    def test_sampled(self):
        ctx = to_otel_span_context(Span(trace_id=1, span_id=2), sample=True)

        assert ctx.trace_id == 1
        assert ctx.span_id == 2
        assert ctx.trace_flags.sampled
        assert ctx.is_valid

    def test_unsampled_and_undecided(self):
        assert not to_otel_span_context(Span(trace_id=1, span_id=2), sample=False).trace_flags.sampled
        assert not to_otel_span_context(Span(trace_id=1, span_id=2)).trace_flags.sampled

    def test_debug_forces_sampled(self):
        ctx = to_otel_span_context(Span(trace_id=1, span_id=2, debug=True), sample=False)
        assert ctx.trace_flags.sampled


class TestCurrentOtelContext:
    """Test mirroring span state into OTel context."""

    def test_nothing_current_returns_base(self, state):
        base = context_api.get_current()
        assert current_otel_context(state) is base
        assert current_span(state) is None

    def test_prefers_local_then_client_then_server(self, state):
        server = Span(trace_id=1, span_id=1, name="server")
        client = Span(trace_id=1, span_id=2, name="client")
        local = Span(trace_id=1, span_id=3, name="local")

        state.set_current_server_span(ServerSpan.create(server, True))
        assert current_span(state) is server

        state.set_current_client_span(client)
        assert current_span(state) is client

        state.set_current_local_span(local)
        assert current_span(state) is local

        otel_span = get_current_span(current_otel_context(state))
        assert otel_span.get_span_context().span_id == 3
        assert otel_span.get_span_context().trace_flags.sampled

    def test_invalid_ids_return_base(self, state):
        state.set_current_local_span(Span(trace_id=0, span_id=0))
        base = context_api.get_current()

        assert current_otel_context(state) is base

    def test_attached_context(self, state):
        state.set_current_local_span(Span(trace_id=5, span_id=6))

        with attached_otel_context(state):
            assert get_current_span().get_span_context().span_id == 6

        assert not get_current_span().get_span_context().is_valid

    def test_server_span_is_remote(self, state):
        state.set_current_server_span(ServerSpan.create(Span(trace_id=1, span_id=1), True))

        otel_context = get_current_span(current_otel_context(state)).get_span_context()
        assert otel_context.is_remote

    def test_local_and_client_spans_are_not_remote(self, state):
        state.set_current_server_span(ServerSpan.create(Span(trace_id=1, span_id=1), True))
        state.set_current_client_span(Span(trace_id=1, span_id=2))
        assert not get_current_span(current_otel_context(state)).get_span_context().is_remote

        state.set_current_local_span(Span(trace_id=1, span_id=3))
        assert not get_current_span(current_otel_context(state)).get_span_context().is_remote

    def test_explicit_remote_flag(self):
        assert to_otel_span_context(Span(trace_id=1, span_id=2), is_remote=True).is_remote
        assert not to_otel_span_context(Span(trace_id=1, span_id=2)).is_remote


@pytest.fixture
def debug_enabled():
    runtime_config.set_debug(True)
    yield
    runtime_config.set_debug(False)


class TestDebugLogging:
    """Test debug output of the bridge."""

    def test_attach_logs_hex_ids(self, state, debug_enabled, caplog):
        state.set_current_local_span(Span(trace_id=255, span_id=16))

        with caplog.at_level(logging.DEBUG, logger="forkspan.context.otel_bridge"):
            with attached_otel_context(state):
                pass

        assert f"trace_id={format_trace_id(255)}" in caplog.text
        assert "span_id=0000000000000010" in caplog.text

    def test_attach_is_quiet_without_debug(self, state, caplog):
        state.set_current_local_span(Span(trace_id=255, span_id=16))

        with caplog.at_level(logging.DEBUG, logger="forkspan.context.otel_bridge"):
            with attached_otel_context(state):
                pass

        assert "attaching otel context" not in caplog.text
