"""Metric recording helpers for fusion runs."""

from __future__ import annotations

from hybrid_fusion.observability.logger import get_logger

logger = get_logger("metrics")


def log_fusion_scores(qid: str, algorithm: str, scores: list[tuple[str, float]]) -> None:
    logger.debug(
        "fusion_scores",
        qid=qid,
        algorithm=algorithm,
        scores=[(entry_id, round(score, 4)) for entry_id, score in scores],
    )


def log_ndcg_summary(name: str, mean_ndcg: float, evaluated: int, excluded: int) -> None:
    logger.info(
        "ndcg_summary",
        name=name,
        mean_ndcg=round(mean_ndcg, 4),
        evaluated=evaluated,
        excluded=excluded,
    )


def log_latency(qid: str, stage: str, duration_ms: float) -> None:
    logger.info(
        "latency",
        qid=qid,
        stage=stage,
        duration_ms=round(duration_ms, 2),
    )
