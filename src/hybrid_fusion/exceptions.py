"""Custom exception hierarchy for the fusion engine."""


class FusionEngineError(Exception):
    """Base exception for all fusion engine errors."""


class ValidationError(FusionEngineError):
    """Fusion input or parameters violate an invariant."""


class DegenerateDistributionError(FusionEngineError):
    """A signal's scores have zero variance or zero range."""


class LookupMismatchError(FusionEngineError):
    """A fused id has no matching entry in the reference list."""


class UndefinedMetricError(FusionEngineError):
    """A metric cannot be computed for the given input (e.g. IDCG of zero)."""


class SearchBackendError(FusionEngineError):
    """The search backend could not produce scores for a query."""


class ConfigurationError(FusionEngineError):
    """Error in system configuration."""
