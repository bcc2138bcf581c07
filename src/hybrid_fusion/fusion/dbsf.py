"""Distribution-Based Score Fusion (z-score normalization)."""

from __future__ import annotations

from hybrid_fusion.exceptions import DegenerateDistributionError
from hybrid_fusion.fusion.fusion_input import FusionInput, sort_scored
from hybrid_fusion.fusion.normalization import z_scores
from hybrid_fusion.observability.logger import get_logger

logger = get_logger("dbsf")


def distribution_based_fusion(fusion_input: FusionInput) -> list[tuple[str, float]]:
    """Sum weighted z-scores of each signal's raw scores.

    A signal whose scores all coincide has no usable distribution and
    contributes 0 to every id.
    """
    scores = fusion_input.zeroed()
    for i, (weight, score_list) in enumerate(zip(fusion_input.weights, fusion_input.score_lists)):
        try:
            normalized = z_scores(score_list)
        except DegenerateDistributionError as e:
            logger.warning("degenerate_signal", algorithm="dbsf", signal=i, reason=str(e))
            continue
        for entry_id, value in normalized.items():
            scores[entry_id] += weight * value
    return sort_scored(scores.items())
