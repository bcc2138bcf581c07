"""Reciprocal Rank Fusion for merging ranked signal lists."""

from __future__ import annotations

from hybrid_fusion.exceptions import ValidationError
from hybrid_fusion.fusion.fusion_input import FusionInput, sort_scored

DEFAULT_K = 60


def reciprocal_rank_fusion(
    fusion_input: FusionInput,
    k: int = DEFAULT_K,
) -> list[tuple[str, float]]:
    """Merge rankings using RRF.

    Args:
        fusion_input: Validated per-signal score lists.
        k: RRF constant (higher = more weight to lower-ranked results). Must be > 0.

    Returns:
        (id, rrf_score) tuples sorted by RRF score descending, ties by id ascending.
    """
    if k <= 0:
        raise ValidationError(f"RRF k must be positive, got {k}")
    scores = fusion_input.zeroed()
    for weight, ranking in zip(fusion_input.weights, fusion_input.rankings):
        for position, entry_id in enumerate(ranking):
            scores[entry_id] += weight * 1.0 / (position + k)
    return sort_scored(scores.items())
