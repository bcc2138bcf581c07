"""Relative Score Fusion (min-max normalization)."""

from __future__ import annotations

from hybrid_fusion.exceptions import DegenerateDistributionError
from hybrid_fusion.fusion.fusion_input import FusionInput, sort_scored
from hybrid_fusion.fusion.normalization import min_max
from hybrid_fusion.observability.logger import get_logger

logger = get_logger("rsf")


def relative_score_fusion(fusion_input: FusionInput) -> list[tuple[str, float]]:
    scores = fusion_input.zeroed()
    for i, (weight, score_list) in enumerate(zip(fusion_input.weights, fusion_input.score_lists)):
        try:
            normalized = min_max(score_list)
        except DegenerateDistributionError as e:
            # every score identical: neutral contribution
            logger.warning("degenerate_signal", algorithm="rsf", signal=i, reason=str(e))
            continue
        for entry_id, value in normalized.items():
            scores[entry_id] += weight * value
    return sort_scored(scores.items())
