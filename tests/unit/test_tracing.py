"""Tests for per-query stage timing."""

import pytest
from structlog.testing import capture_logs

from hybrid_fusion.observability.tracing import QueryTrace


def test_span_logs_latency():
    trace = QueryTrace("q1")
    with capture_logs() as logs:
        with trace.span("fuse") as span:
            pass

    assert span.duration_ms >= 0.0
    assert logs == [
        {
            "event": "latency",
            "log_level": "info",
            "qid": "q1",
            "stage": "fuse",
            "duration_ms": round(span.duration_ms, 2),
        }
    ]


def test_span_logs_latency_when_stage_fails():
    trace = QueryTrace("q1")
    with capture_logs() as logs:
        with pytest.raises(RuntimeError):
            with trace.span("search"):
                raise RuntimeError("backend down")

    assert [log["stage"] for log in logs] == ["search"]
