"""Core domain objects used throughout the system."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ScoreEntry:
    """One candidate's score from one signal."""

    id: str
    score: float
    rank: int = 0  # original ground-truth rank


@dataclass(frozen=True)
class RankedScore:
    id: str
    score: float  # synthetic fused position score
    rank: int


@dataclass
class SearchResult:
    qid: str
    scores: list[RankedScore]


@dataclass
class NdcgResult:
    qid: str
    ndcg: float
    excluded: bool = False  # IDCG was zero, not counted in the mean


@dataclass
class QueryScores:
    qid: str
    signals: dict[str, list[ScoreEntry]] = field(default_factory=dict)
