"""Turn a fused id ordering into ranked scores the evaluator can consume."""

from __future__ import annotations

from collections.abc import Sequence

from hybrid_fusion.exceptions import LookupMismatchError
from hybrid_fusion.fusion.fusion_input import rank_entries
from hybrid_fusion.models.domain import RankedScore, ScoreEntry


def format_fused(fused_ids: Sequence[str], reference: Sequence[ScoreEntry]) -> list[RankedScore]:
    """Attach position scores and ground-truth ranks to a fused ordering.

    The id at fused position i of N receives ``score = N - i``; its ``rank`` is
    copied from the reference entry with the same id.

    Raises:
        LookupMismatchError: a fused id has no entry in ``reference``.
    """
    ranks = {entry.id: entry.rank for entry in reference}
    total = len(fused_ids)
    formatted: list[RankedScore] = []
    for position, entry_id in enumerate(fused_ids):
        if entry_id not in ranks:
            raise LookupMismatchError(f"Fused id {entry_id!r} is missing from the reference list")
        formatted.append(RankedScore(id=entry_id, score=total - position, rank=ranks[entry_id]))
    return formatted


def format_signal(entries: Sequence[ScoreEntry]) -> list[RankedScore]:
    """Rank a single signal by its own scores, for baseline evaluation."""
    return format_fused(rank_entries(entries), entries)
