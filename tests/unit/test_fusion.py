"""Tests for the fusion algorithms and their dispatch."""

import pytest
from structlog.testing import capture_logs

from hybrid_fusion.exceptions import ValidationError
from hybrid_fusion.fusion.borda import borda_count
from hybrid_fusion.fusion.dbsf import distribution_based_fusion
from hybrid_fusion.fusion.fusion_input import FusionInput
from hybrid_fusion.fusion.registry import FusionAlgorithm, fuse, fuse_with_scores
from hybrid_fusion.fusion.rsf import relative_score_fusion
from hybrid_fusion.models.domain import ScoreEntry

EXPECTED = {
    FusionAlgorithm.BORDA: ["P1", "P3", "P4", "P2", "P5"],
    FusionAlgorithm.DBSF: ["P1", "P3", "P4", "P2", "P5"],
    FusionAlgorithm.RRF: ["P3", "P1", "P4", "P5", "P2"],
    FusionAlgorithm.RSF: ["P1", "P3", "P4", "P2", "P5"],
}


@pytest.mark.parametrize("algorithm", list(FusionAlgorithm))
def test_reference_scenario(fusion_input, algorithm):
    assert fuse(fusion_input, algorithm, k=60) == EXPECTED[algorithm]


@pytest.mark.parametrize("algorithm", list(FusionAlgorithm))
def test_output_is_permutation_of_ids(fusion_input, algorithm):
    ranking = fuse(fusion_input, algorithm)
    assert len(ranking) == len(set(ranking))
    assert set(ranking) == fusion_input.ids


def test_fuse_accepts_algorithm_name(fusion_input):
    assert fuse(fusion_input, "RRF") == EXPECTED[FusionAlgorithm.RRF]


def test_fuse_unknown_algorithm(fusion_input):
    with pytest.raises(ValidationError):
        fuse(fusion_input, "combsum")


def test_borda_points(fusion_input):
    table = dict(borda_count(fusion_input))
    assert table == {"P1": 7.0, "P2": 5.0, "P3": 7.0, "P4": 6.0, "P5": 5.0}


def test_borda_weighted(fusion_input):
    # Doubling the vector signal lets P3 overtake P1
    weighted = FusionInput(fusion_input.score_lists, [1.0, 2.0])
    assert fuse(weighted, FusionAlgorithm.BORDA)[0] == "P3"


def test_rsf_values_within_signal_count(fusion_input):
    table = dict(relative_score_fusion(fusion_input))
    assert table["P1"] == pytest.approx((0.1874 - 0.0597) / (0.2077 - 0.0597) + (0.6761 - 0.6304) / (0.7479 - 0.6304))
    assert all(0.0 <= value <= 2.0 for value in table.values())


def test_dbsf_z_scores_sum_to_zero(fusion_input):
    table = dict(distribution_based_fusion(fusion_input))
    assert sum(table.values()) == pytest.approx(0.0, abs=1e-9)


def test_fuse_with_scores_sorted(fusion_input):
    table = fuse_with_scores(fusion_input, FusionAlgorithm.DBSF)
    values = [score for _, score in table]
    assert values == sorted(values, reverse=True)


@pytest.mark.parametrize("algorithm", [FusionAlgorithm.BORDA, FusionAlgorithm.RRF])
def test_rank_based_algorithms_ignore_magnitudes(fusion_input, algorithm):
    rescaled = FusionInput(
        [[ScoreEntry(e.id, e.score * 1000 + 5, e.rank) for e in score_list]
         for score_list in fusion_input.score_lists]
    )
    assert fuse(rescaled, algorithm) == fuse(fusion_input, algorithm)


@pytest.mark.parametrize("algorithm", [FusionAlgorithm.DBSF, FusionAlgorithm.RSF])
def test_degenerate_signal_contributes_nothing(lexical_scores, algorithm):
    flat = [ScoreEntry(e.id, 0.5, e.rank) for e in lexical_scores]
    fused = fuse_with_scores(FusionInput([flat, lexical_scores]), algorithm)
    alone = fuse_with_scores(FusionInput([lexical_scores]), algorithm)
    assert [cid for cid, _ in fused] == ["P4", "P1", "P2", "P3", "P5"]
    assert dict(fused) == pytest.approx(dict(alone))


@pytest.mark.parametrize("algorithm", list(FusionAlgorithm))
def test_all_signals_degenerate_still_permutation(algorithm):
    flat = [ScoreEntry(i, 1.0) for i in ("c", "a", "b")]
    fused = fuse(FusionInput([flat, list(reversed(flat))]), algorithm)
    assert fused == ["a", "b", "c"]


def test_single_candidate():
    only = [ScoreEntry("x", 0.3, 1)]
    for algorithm in FusionAlgorithm:
        assert fuse(FusionInput([only, only]), algorithm) == ["x"]


@pytest.mark.parametrize("algorithm", [FusionAlgorithm.DBSF, FusionAlgorithm.RSF])
def test_flat_signal_with_inexact_mean_is_degenerate(algorithm):
    # mean of [0.1, 0.1, 0.1] is not exactly 0.1 in floating point
    live = [ScoreEntry("a", 0.9), ScoreEntry("b", 0.5), ScoreEntry("c", 0.1)]
    flat = [ScoreEntry(e.id, 0.1) for e in live]
    with capture_logs() as logs:
        fused = fuse_with_scores(FusionInput([live, flat]), algorithm)
    alone = fuse_with_scores(FusionInput([live]), algorithm)

    assert dict(fused) == pytest.approx(dict(alone))
    warnings = [log for log in logs if log["event"] == "degenerate_signal"]
    assert len(warnings) == 1
    assert warnings[0]["log_level"] == "warning"
    assert warnings[0]["signal"] == 1
