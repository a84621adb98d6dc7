"""4CAST risk scoring: coefficient sets and the pure scorer."""
from fourcast.scoring.coefficients import (
    DEFAULT_REVISION,
    FOURCAST_V1,
    ModelCoefficients,
    available_revisions,
    get_model,
)
from fourcast.scoring.scorer import (
    RiskScorer,
    ScoreInput,
    ScoreResult,
    Verdict,
    format_percent,
    score,
)

__all__ = [
    "DEFAULT_REVISION",
    "FOURCAST_V1",
    "ModelCoefficients",
    "RiskScorer",
    "ScoreInput",
    "ScoreResult",
    "Verdict",
    "available_revisions",
    "format_percent",
    "get_model",
    "score",
]
