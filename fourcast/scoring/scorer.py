"""
4CAST Risk Scorer

Evaluates the 4CAST logistic regression for one set of answers:

    z = age * c_age
        + smell_rating * c_smell
        + safety_impact * c_safety
        + diabetes_indicator * c_diabetes
        + intercept

    probability = 1 / (1 + exp(-z))

A probability strictly above 0.5 is a FAIL (likely smell loss); anything at
or below 0.5 is a PASS.

INPUT RANGES:
-------------
The questionnaire accepts age 1-120 and ratings 0-100, and range checks
belong to the caller (see fourcast.schemas). The scorer does not check
ranges: any finite number extrapolates the formula. Non-finite input
(NaN, +/-inf) follows IEEE-754 arithmetic and may yield a NaN probability,
so callers must not pass it. Integers too large for a float are treated as
+/-inf rather than raising.

PERCENT FORMATTING:
-------------------
percent_probability is probability * 100 with one fractional digit, rounded
half-up on the exact binary value of the float. This matches the browser
calculator's toFixed(1) output digit for digit.

The scorer is pure: it does not log, record metrics or keep state, so one
instance can be shared freely.
"""
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from fourcast.scoring.coefficients import FOURCAST_V1, ModelCoefficients

# Probabilities strictly above this are FAIL
FAIL_THRESHOLD = 0.5

_ONE_DECIMAL = Decimal("0.1")


class Verdict(str, Enum):
    """Binary screening outcome."""
    PASS = "PASS"
    FAIL = "FAIL"


@dataclass(frozen=True)
class ScoreInput:
    """Answers to the four screening questions."""
    age: float  # years
    has_diabetes: bool
    smell_rating: float  # 0-100
    safety_impact: float  # 0-100


@dataclass(frozen=True)
class ScoreResult:
    """Outcome of one evaluation."""
    probability: float  # 0.0-1.0
    percent_probability: str  # e.g. "36.2"
    verdict: Verdict

    @property
    def has_smell_loss(self) -> bool:
        """True when the screen suggests smell loss."""
        return self.verdict is Verdict.FAIL


def sigmoid(z: float) -> float:
    """Logistic function, evaluated so that exp() never overflows."""
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    # Also reached for NaN, where exp(nan) propagates
    odds = math.exp(z)
    return odds / (1.0 + odds)


def _as_float(value: float) -> float:
    """Coerce a number to float; integers beyond float range saturate to +/-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def format_percent(probability: float) -> str:
    """
    Render probability as a percentage with exactly one decimal.

    Example:
        >>> format_percent(0.36158)
        '36.2'
        >>> format_percent(0.0)
        '0.0'
    """
    percent = probability * 100
    if math.isnan(percent):
        return "NaN"
    if math.isinf(percent):
        return "Infinity" if percent > 0 else "-Infinity"
    return str(Decimal(percent).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def classify(probability: float) -> Verdict:
    """Map a probability to a verdict; exactly 0.5 is a PASS."""
    return Verdict.FAIL if probability > FAIL_THRESHOLD else Verdict.PASS


class RiskScorer:
    """
    Scores questionnaire answers with an injected coefficient set.

    Args:
        coefficients: Model revision to evaluate. Defaults to FOURCAST_V1.
    """

    def __init__(self, coefficients: ModelCoefficients = FOURCAST_V1):
        self._coefficients = coefficients

    @property
    def coefficients(self) -> ModelCoefficients:
        return self._coefficients

    @property
    def revision(self) -> str:
        return self._coefficients.revision

    def linear_predictor(self, score_input: ScoreInput) -> float:
        """Log-odds of smell loss for the given answers."""
        c = self._coefficients
        diabetes_indicator = 1 if score_input.has_diabetes else 0

        return (
            _as_float(score_input.age) * c.age
            + _as_float(score_input.smell_rating) * c.smell_rating
            + _as_float(score_input.safety_impact) * c.safety_impact
            + diabetes_indicator * c.diabetes
            + c.intercept
        )

    def score(self, score_input: ScoreInput) -> ScoreResult:
        """
        Score one set of answers.

        Args:
            score_input: The four screening answers

        Returns:
            ScoreResult with probability, formatted percentage and verdict
        """
        probability = sigmoid(self.linear_predictor(score_input))

        return ScoreResult(
            probability=probability,
            percent_probability=format_percent(probability),
            verdict=classify(probability),
        )


_default_scorer = RiskScorer()


def score(score_input: ScoreInput) -> ScoreResult:
    """Score answers with the shipped 4CAST revision."""
    return _default_scorer.score(score_input)
