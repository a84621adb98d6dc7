"""
4CAST Smell-Loss Screening

Evaluates the 4CAST logistic-regression model on four questionnaire answers
(age, Type 2 diabetes, self-rated smell ability, self-rated safety impact of
reduced smell) and returns a probability of smell loss with a PASS/FAIL
screening verdict.

The result is advisory, not diagnostic. A FAIL verdict means the answers
resemble those of people with measurable smell loss and that a clinical
smell test is worth considering.
"""
__version__ = "0.1.0"

from fourcast.scoring import (
    FOURCAST_V1,
    ModelCoefficients,
    RiskScorer,
    ScoreInput,
    ScoreResult,
    Verdict,
    score,
)

__all__ = [
    "FOURCAST_V1",
    "ModelCoefficients",
    "RiskScorer",
    "ScoreInput",
    "ScoreResult",
    "Verdict",
    "score",
]
