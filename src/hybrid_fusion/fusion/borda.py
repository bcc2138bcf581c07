"""Borda Count fusion over per-signal rankings."""

from __future__ import annotations

from hybrid_fusion.fusion.fusion_input import FusionInput, sort_scored


def borda_count(fusion_input: FusionInput) -> list[tuple[str, float]]:
    """Merge rankings by awarding positional points.

    In a ranking of length L the id at position j earns ``weight * (L - j)``,
    so first place gets L points and last place gets 1.

    Returns:
        (id, points) tuples sorted by points descending, ties by id ascending.
    """
    scores = fusion_input.zeroed()
    for weight, ranking in zip(fusion_input.weights, fusion_input.rankings):
        length = len(ranking)
        for position, entry_id in enumerate(ranking):
            scores[entry_id] += weight * (length - position)
    return sort_scored(scores.items())
