"""Central configuration via Pydantic Settings. All values driven by env vars."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from hybrid_fusion.exceptions import ConfigurationError


class Settings(BaseSettings):
    # Signals, in the order they are handed to the fusion engine
    signals: list[str] = ["vector", "lexical"]
    signal_weights: dict[str, float] = {}
    reference_signal: str = "vector"

    # Fusion
    rrf_k: int = 60
    algorithms: list[str] = ["borda", "rrf", "rsf", "dbsf"]
    include_baselines: bool = True

    # Driver behaviour
    fail_fast: bool = False
    log_fusion_scores: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    # Data paths
    dataset_path: str = "data/scores.jsonl"
    results_path: str = "data/eval_results.json"

    model_config = {"env_file": ".env", "env_prefix": "FUSION_"}

    def weights(self) -> list[float]:
        """Per-signal weights aligned with ``signals`` (missing entries default to 1.0)."""
        unknown = set(self.signal_weights) - set(self.signals)
        if unknown:
            raise ConfigurationError(f"Weights given for unknown signals: {sorted(unknown)}")
        return [float(self.signal_weights.get(name, 1.0)) for name in self.signals]

    def validate_signals(self) -> None:
        """Fail early on settings that would otherwise reject or clobber every query."""
        self.weights()
        if self.rrf_k <= 0:
            raise ConfigurationError(f"rrf_k must be positive, got {self.rrf_k}")
        clashing = set(self.signals) & {name.lower() for name in self.algorithms}
        if clashing:
            raise ConfigurationError(
                f"Signal names collide with fusion algorithm names: {sorted(clashing)}"
            )
        if self.reference_signal not in self.signals:
            raise ConfigurationError(
                f"Reference signal {self.reference_signal!r} is not one of {self.signals}"
            )
