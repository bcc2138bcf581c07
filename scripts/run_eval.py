"""Run the fusion evaluation over a precomputed score dataset.

Usage:
    python scripts/run_eval.py [--dataset PATH] [--output PATH] [--rrf-k K]

Settings not given on the command line come from FUSION_* env vars or .env.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hybrid_fusion.config.settings import Settings
from hybrid_fusion.evaluation.runner import run_evaluation
from hybrid_fusion.models.schemas import EvaluationReport
from hybrid_fusion.observability.logger import setup_logging
from hybrid_fusion.search.jsonl_backend import JsonlScoreBackend


def print_header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


def print_summary(report: EvaluationReport) -> None:
    print_header("NDCG SUMMARY")
    print(f"  Total queries:   {report.total_queries}")
    print(f"  Skipped queries: {len(report.skipped)}")
    print()
    header = f"  {'Method':<12} {'Kind':<10} {'Mean NDCG':>10} {'Evaluated':>10} {'Excluded':>10}"
    print(header)
    print(f"  {'-' * 56}")
    for r in report.reports:
        print(
            f"  {r.name:<12} {r.kind:<10} {r.mean_ndcg:>10.4f} "
            f"{r.evaluated:>10} {r.excluded:>10}"
        )


def print_skipped(report: EvaluationReport) -> None:
    if not report.skipped:
        return
    print_header("SKIPPED QUERIES")
    for s in report.skipped:
        print(f"  {s.qid:<16} {s.error}")


def save_report(report: EvaluationReport, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(report.model_dump(), f, indent=2)
    print(f"\nRaw results saved to {output_path}")


async def main(settings: Settings) -> None:
    print(f"Dataset: {settings.dataset_path}")
    backend = JsonlScoreBackend(settings.dataset_path)
    report = await run_evaluation(backend, settings)

    print_summary(report)
    print_skipped(report)
    save_report(report, Path(settings.results_path))


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Evaluate rank fusion algorithms with NDCG")
    parser.add_argument("--dataset", help="JSON Lines file of per-signal scores")
    parser.add_argument("--output", help="Path to save the JSON report")
    parser.add_argument("--rrf-k", type=int, help="RRF constant k")
    parser.add_argument(
        "--show-scores",
        action="store_true",
        help="Log the fused per-id score table of every query",
    )
    args = parser.parse_args()

    overrides = {}
    if args.dataset:
        overrides["dataset_path"] = args.dataset
    if args.output:
        overrides["results_path"] = args.output
    if args.rrf_k is not None:
        overrides["rrf_k"] = args.rrf_k
    if args.show_scores:
        overrides["log_fusion_scores"] = True
        overrides["log_level"] = "DEBUG"
    settings = Settings(**overrides)

    setup_logging(settings.log_level, settings.log_format)
    asyncio.run(main(settings))
