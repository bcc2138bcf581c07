"""Pydantic models for dataset rows and evaluation reports."""

from __future__ import annotations

from pydantic import BaseModel, Field


class QueryRecord(BaseModel):
    qid: str
    query: str = ""


class ScoreRow(BaseModel):
    """One passage of one query with its per-signal scores."""

    qid: str
    pid: str
    rank: int = Field(default=0, ge=0)
    query: str = ""
    scores: dict[str, float]


class QueryNdcg(BaseModel):
    qid: str
    ndcg: float
    excluded: bool = False


class AlgorithmReport(BaseModel):
    name: str
    kind: str = "fusion"  # "fusion" or "baseline"
    mean_ndcg: float
    evaluated: int
    excluded: int
    per_query: list[QueryNdcg] = Field(default_factory=list)


class SkippedQuery(BaseModel):
    qid: str
    error: str


class EvaluationReport(BaseModel):
    total_queries: int
    reports: list[AlgorithmReport] = Field(default_factory=list)
    skipped: list[SkippedQuery] = Field(default_factory=list)

    def get(self, name: str) -> AlgorithmReport | None:
        for report in self.reports:
            if report.name == name:
                return report
        return None
