"""Validated, per-query input to the fusion algorithms."""

from __future__ import annotations

from collections.abc import Sequence

from hybrid_fusion.exceptions import ValidationError
from hybrid_fusion.models.domain import ScoreEntry


def sort_scored(pairs) -> list[tuple[str, float]]:
    """Sort (id, score) pairs by descending score, ties by ascending id."""
    return sorted(pairs, key=lambda x: (-x[1], x[0]))


def rank_entries(entries: Sequence[ScoreEntry]) -> list[str]:
    return [entry_id for entry_id, _ in sort_scored((e.id, e.score) for e in entries)]


class FusionInput:
    """Score lists of every signal for one query, plus one weight per signal.

    Validated on construction; rankings (ids ordered by descending score) are
    derived once here and shared by the rank-based algorithms.
    """

    def __init__(
        self,
        score_lists: Sequence[Sequence[ScoreEntry]],
        weights: Sequence[float] | None = None,
    ) -> None:
        self.score_lists: tuple[tuple[ScoreEntry, ...], ...] = tuple(
            tuple(score_list) for score_list in score_lists
        )
        if weights is None:
            weights = [1.0] * len(self.score_lists)
        self.weights: tuple[float, ...] = tuple(float(w) for w in weights)
        self.ids: frozenset[str] = self._validate()
        self.rankings: tuple[list[str], ...] = tuple(
            rank_entries(score_list) for score_list in self.score_lists
        )

    def _validate(self) -> frozenset[str]:
        if not self.score_lists:
            raise ValidationError("At least one score list is required")
        if len(self.weights) != len(self.score_lists):
            raise ValidationError(
                f"Got {len(self.weights)} weights for {len(self.score_lists)} score lists"
            )

        reference: frozenset[str] | None = None
        for i, score_list in enumerate(self.score_lists):
            if not score_list:
                raise ValidationError(f"Score list {i} is empty")
            ids = [entry.id for entry in score_list]
            unique = frozenset(ids)
            if len(unique) != len(ids):
                raise ValidationError(f"Score list {i} contains duplicate ids")
            if reference is None:
                reference = unique
            elif unique != reference:
                missing = sorted(reference - unique)
                extra = sorted(unique - reference)
                raise ValidationError(
                    f"Score list {i} id set differs from score list 0 "
                    f"(missing={missing}, extra={extra})"
                )
        return reference

    def zeroed(self) -> dict[str, float]:
        """Fresh accumulator keyed by the validated id set."""
        return dict.fromkeys(self.ids, 0.0)
