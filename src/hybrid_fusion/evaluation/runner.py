"""Evaluation runner: pulls signal scores per query, fuses, and scores NDCG."""

from __future__ import annotations

import structlog

from hybrid_fusion.config.settings import Settings
from hybrid_fusion.evaluation.formatting import format_fused, format_signal
from hybrid_fusion.evaluation.metrics import evaluate_ndcg, summarize_ndcg
from hybrid_fusion.exceptions import FusionEngineError, ValidationError
from hybrid_fusion.fusion.fusion_input import FusionInput
from hybrid_fusion.fusion.registry import FusionAlgorithm, fuse_with_scores
from hybrid_fusion.models.domain import QueryScores, SearchResult
from hybrid_fusion.models.schemas import (
    AlgorithmReport,
    EvaluationReport,
    QueryNdcg,
    QueryRecord,
    SkippedQuery,
)
from hybrid_fusion.observability.logger import get_logger
from hybrid_fusion.observability.metrics import log_fusion_scores, log_ndcg_summary
from hybrid_fusion.observability.tracing import QueryTrace
from hybrid_fusion.protocols.search_backend import SearchBackend

logger = get_logger("runner")


def fuse_query(
    scores: QueryScores,
    settings: Settings,
    algorithms: list[FusionAlgorithm],
) -> dict[str, SearchResult]:
    """Fuse one query's signals with every algorithm and reformat for NDCG.

    Returns a SearchResult per algorithm name, plus one per signal when
    baselines are enabled. Raises on any invalid input; nothing partial is
    returned for the query.
    """
    missing = [name for name in settings.signals if name not in scores.signals]
    if missing:
        raise ValidationError(f"Query {scores.qid} has no scores for signals {missing}")

    score_lists = [scores.signals[name] for name in settings.signals]
    fusion_input = FusionInput(score_lists, settings.weights())
    reference = scores.signals[settings.reference_signal]

    results: dict[str, SearchResult] = {}
    for algorithm in algorithms:
        table = fuse_with_scores(fusion_input, algorithm, k=settings.rrf_k)
        if settings.log_fusion_scores:
            log_fusion_scores(scores.qid, algorithm.value, table)
        fused_ids = [entry_id for entry_id, _ in table]
        results[algorithm.value] = SearchResult(
            qid=scores.qid, scores=format_fused(fused_ids, reference)
        )

    if settings.include_baselines:
        for name in settings.signals:
            results[name] = SearchResult(qid=scores.qid, scores=format_signal(scores.signals[name]))
    return results


def build_report(
    name: str,
    kind: str,
    results: list[SearchResult],
) -> AlgorithmReport:
    metrics = evaluate_ndcg(results)
    summary = summarize_ndcg(metrics)
    log_ndcg_summary(name, summary.mean, summary.evaluated, summary.excluded)
    return AlgorithmReport(
        name=name,
        kind=kind,
        mean_ndcg=round(summary.mean, 4),
        evaluated=summary.evaluated,
        excluded=summary.excluded,
        per_query=[QueryNdcg(qid=m.qid, ndcg=m.ndcg, excluded=m.excluded) for m in metrics],
    )


async def run_evaluation(
    backend: SearchBackend,
    settings: Settings | None = None,
    queries: list[QueryRecord] | None = None,
) -> EvaluationReport:
    """Run every query through search, fusion and NDCG scoring.

    Queries are processed sequentially. A query whose scores cannot be fetched
    or fused is recorded as skipped; with ``settings.fail_fast`` the error is
    raised instead.
    """
    settings = settings or Settings()
    settings.validate_signals()
    algorithms = [FusionAlgorithm.parse(name) for name in settings.algorithms]
    queries = queries if queries is not None else backend.queries()

    collected: dict[str, list[SearchResult]] = {a.value: [] for a in algorithms}
    if settings.include_baselines:
        for name in settings.signals:
            collected.setdefault(name, [])
    skipped: list[SkippedQuery] = []

    for query in queries:
        structlog.contextvars.bind_contextvars(qid=query.qid)
        trace = QueryTrace(query.qid)
        try:
            with trace.span("search"):
                scores = await backend.search(query)
            with trace.span("fuse"):
                per_query = fuse_query(scores, settings, algorithms)
        except FusionEngineError as e:
            if settings.fail_fast:
                raise
            logger.warning("query_skipped", error=str(e))
            skipped.append(SkippedQuery(qid=query.qid, error=str(e)))
            continue
        finally:
            structlog.contextvars.unbind_contextvars("qid")

        for name, result in per_query.items():
            collected[name].append(result)

    algorithm_names = {a.value for a in algorithms}
    reports = [
        build_report(name, "fusion" if name in algorithm_names else "baseline", results)
        for name, results in collected.items()
    ]
    logger.info(
        "evaluation_complete",
        total_queries=len(queries),
        skipped=len(skipped),
    )
    return EvaluationReport(total_queries=len(queries), reports=reports, skipped=skipped)
