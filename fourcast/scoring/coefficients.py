"""
4CAST Model Coefficients

Each shipped model revision is a frozen ModelCoefficients record. The weights
come from a logistic regression fitted on four questionnaire items:

- age: age in years
- smell_rating: self-rated ability to smell, 0 (none) to 100 (maximum)
- safety_impact: how much reduced smell has affected safety
  (gas leaks, smoke, spoiled food), 0 to 100
- diabetes: Type 2 diabetes diagnosis, as a 0/1 indicator

Changing any number here is a new model revision that needs clinical
re-validation. Register it under a new name instead of editing an existing
record.
"""
from dataclasses import dataclass

from fourcast.errors import UnknownModelRevisionError


@dataclass(frozen=True)
class ModelCoefficients:
    """Trained weights of one model revision."""
    revision: str
    age: float
    smell_rating: float
    safety_impact: float
    diabetes: float
    intercept: float


FOURCAST_V1 = ModelCoefficients(
    revision="4cast-v1",
    age=0.043105212902502056,
    smell_rating=0.027966104711863282,
    safety_impact=0.019908032571725683,
    diabetes=1.3004639643330465,
    intercept=-5.117446511633389,
)

DEFAULT_REVISION = FOURCAST_V1.revision

_REGISTRY: dict[str, ModelCoefficients] = {
    FOURCAST_V1.revision: FOURCAST_V1,
}


def get_model(revision: str = DEFAULT_REVISION) -> ModelCoefficients:
    """
    Look up a shipped coefficient set by revision name.

    Example:
        >>> get_model("4cast-v1").intercept
        -5.117446511633389

    Raises:
        UnknownModelRevisionError: If no revision with that name ships.
    """
    try:
        return _REGISTRY[revision]
    except KeyError:
        raise UnknownModelRevisionError(revision, available_revisions()) from None


def available_revisions() -> tuple[str, ...]:
    """Names of all shipped revisions, sorted."""
    return tuple(sorted(_REGISTRY))
