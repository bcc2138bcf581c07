"""NDCG computation and aggregation for fused rankings."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from hybrid_fusion.exceptions import UndefinedMetricError
from hybrid_fusion.models.domain import NdcgResult, RankedScore, SearchResult
from hybrid_fusion.observability.logger import get_logger

logger = get_logger("ndcg")


@dataclass
class NdcgSummary:
    mean: float
    evaluated: int
    excluded: int


def relevance_gains(scores: Sequence[RankedScore]) -> list[int]:
    """Graded relevance per predicted position: ``L - rank + 1``, floored at 1.

    Rank 1 (most relevant) in a list of length L gets gain L. Ranks beyond the
    list length floor to 1, which contributes nothing to DCG.
    """
    length = len(scores)
    return [max(length - s.rank + 1, 1) for s in scores]


def dcg(gains: Iterable[float]) -> float:
    return sum((g**2 - 1) / math.log2(i + 2) for i, g in enumerate(gains))


def ndcg_score(result: SearchResult) -> float:
    """NDCG of one query's predicted order, rounded to 4 decimals.

    Raises:
        UndefinedMetricError: the ideal DCG is zero (e.g. every gain is 1).
    """
    gains = relevance_gains(result.scores)
    idcg = dcg(sorted(gains, reverse=True))
    if idcg == 0:
        raise UndefinedMetricError(f"IDCG is zero for query {result.qid}")
    return round(dcg(gains) / idcg, 4)


def evaluate_ndcg(results: Iterable[SearchResult]) -> list[NdcgResult]:
    """Score every query; queries with an undefined NDCG are kept but excluded."""
    metrics: list[NdcgResult] = []
    for result in results:
        try:
            metrics.append(NdcgResult(qid=result.qid, ndcg=ndcg_score(result)))
        except UndefinedMetricError as e:
            logger.warning("ndcg_undefined", qid=result.qid, reason=str(e))
            metrics.append(NdcgResult(qid=result.qid, ndcg=0.0, excluded=True))
    return metrics


def summarize_ndcg(metrics: Sequence[NdcgResult]) -> NdcgSummary:
    """Arithmetic mean over non-excluded queries."""
    valid = [m.ndcg for m in metrics if not m.excluded]
    mean = sum(valid) / len(valid) if valid else 0.0
    return NdcgSummary(mean=mean, evaluated=len(valid), excluded=len(metrics) - len(valid))
