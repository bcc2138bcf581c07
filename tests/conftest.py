"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from hybrid_fusion.config.settings import Settings
from hybrid_fusion.fusion.fusion_input import FusionInput
from hybrid_fusion.models.domain import ScoreEntry

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def settings(tmp_path):
    """Test settings isolated from any local .env."""
    return Settings(
        _env_file=None,
        dataset_path=str(FIXTURES / "scores.jsonl"),
        results_path=str(tmp_path / "eval_results.json"),
    )


@pytest.fixture
def dataset_path():
    return FIXTURES / "scores.jsonl"


@pytest.fixture
def lexical_scores():
    """TF-IDF style scores of the five-passage reference query."""
    return [
        ScoreEntry("P1", 0.1874, 1),
        ScoreEntry("P2", 0.1241, 2),
        ScoreEntry("P3", 0.081, 3),
        ScoreEntry("P4", 0.2077, 4),
        ScoreEntry("P5", 0.0597, 5),
    ]


@pytest.fixture
def vector_scores():
    """Cosine style scores of the five-passage reference query."""
    return [
        ScoreEntry("P1", 0.6761, 1),
        ScoreEntry("P2", 0.6549, 2),
        ScoreEntry("P3", 0.7479, 3),
        ScoreEntry("P4", 0.6304, 4),
        ScoreEntry("P5", 0.6868, 5),
    ]


@pytest.fixture
def fusion_input(lexical_scores, vector_scores):
    return FusionInput([lexical_scores, vector_scores])
