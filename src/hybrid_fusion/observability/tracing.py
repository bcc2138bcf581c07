"""Lightweight per-query stage timing with spans."""

from __future__ import annotations

import time
from contextlib import contextmanager
from dataclasses import dataclass

from hybrid_fusion.observability.metrics import log_latency


@dataclass
class Span:
    name: str
    start_ms: float
    end_ms: float = 0.0

    @property
    def duration_ms(self) -> float:
        return self.end_ms - self.start_ms


class QueryTrace:
    def __init__(self, qid: str) -> None:
        self.qid = qid
        self.start_time = time.monotonic()

    @contextmanager
    def span(self, name: str):
        s = Span(name=name, start_ms=(time.monotonic() - self.start_time) * 1000)
        try:
            yield s
        finally:
            s.end_ms = (time.monotonic() - self.start_time) * 1000
            log_latency(self.qid, name, s.duration_ms)
