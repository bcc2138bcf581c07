"""Algorithm selection and dispatch for the fusion engine."""

from __future__ import annotations

from enum import Enum

from hybrid_fusion.exceptions import ValidationError
from hybrid_fusion.fusion.borda import borda_count
from hybrid_fusion.fusion.dbsf import distribution_based_fusion
from hybrid_fusion.fusion.fusion_input import FusionInput
from hybrid_fusion.fusion.rrf import DEFAULT_K, reciprocal_rank_fusion
from hybrid_fusion.fusion.rsf import relative_score_fusion


class FusionAlgorithm(str, Enum):
    BORDA = "borda"
    DBSF = "dbsf"
    RRF = "rrf"
    RSF = "rsf"

    @classmethod
    def parse(cls, name: str) -> FusionAlgorithm:
        try:
            return cls(name.lower())
        except ValueError:
            raise ValidationError(
                f"Unknown fusion algorithm {name!r}; expected one of {[a.value for a in cls]}"
            ) from None


def fuse_with_scores(
    fusion_input: FusionInput,
    algorithm: FusionAlgorithm | str,
    k: int = DEFAULT_K,
) -> list[tuple[str, float]]:
    """Run one algorithm and return the full (id, fused score) table, best first."""
    if not isinstance(algorithm, FusionAlgorithm):
        algorithm = FusionAlgorithm.parse(algorithm)
    if algorithm is FusionAlgorithm.BORDA:
        return borda_count(fusion_input)
    if algorithm is FusionAlgorithm.DBSF:
        return distribution_based_fusion(fusion_input)
    if algorithm is FusionAlgorithm.RRF:
        return reciprocal_rank_fusion(fusion_input, k=k)
    return relative_score_fusion(fusion_input)


def fuse(
    fusion_input: FusionInput,
    algorithm: FusionAlgorithm | str,
    k: int = DEFAULT_K,
) -> list[str]:
    """Fused ranking: ids ordered best first."""
    return [entry_id for entry_id, _ in fuse_with_scores(fusion_input, algorithm, k=k)]
