"""Per-signal score normalization used by the score-based fusions."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from hybrid_fusion.exceptions import DegenerateDistributionError
from hybrid_fusion.models.domain import ScoreEntry


def z_scores(entries: Sequence[ScoreEntry]) -> dict[str, float]:
    """Standard scores using the population mean and standard deviation."""
    values = np.array([e.score for e in entries], dtype=np.float64)
    # identical scores can still yield a tiny nonzero std from rounding in the mean
    if np.ptp(values) == 0:
        raise DegenerateDistributionError(f"Zero variance across {len(entries)} scores")
    mean = float(np.mean(values))
    std = float(np.std(values))
    return {e.id: (e.score - mean) / std for e in entries}


def min_max(entries: Sequence[ScoreEntry]) -> dict[str, float]:
    """Rescale scores into [0, 1] using the list's own min and max."""
    values = np.array([e.score for e in entries], dtype=np.float64)
    if np.ptp(values) == 0:
        raise DegenerateDistributionError(f"Zero range across {len(entries)} scores")
    low = float(np.min(values))
    high = float(np.max(values))
    return {e.id: (e.score - low) / (high - low) for e in entries}
