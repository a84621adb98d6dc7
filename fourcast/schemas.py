"""Pydantic schemas for questionnaire answers and screening reports."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fourcast.scoring import ScoreInput, Verdict

DISCLAIMER = (
    "This tool is for informational purposes only and does not constitute "
    "medical advice. Please consult with a qualified healthcare professional "
    "for any health concerns."
)

FAIL_RECOMMENDATION = "Consider consulting a healthcare professional"

# Answers shown when the questionnaire is first opened or reset
DEFAULT_AGE = 50
DEFAULT_HAS_DIABETES = False
DEFAULT_SMELL_RATING = 50
DEFAULT_SAFETY_IMPACT = 50


class QuestionnaireAnswers(BaseModel):
    """Validated answers to the four 4CAST questions."""
    model_config = ConfigDict(frozen=True)

    age: int = Field(
        DEFAULT_AGE, ge=1, le=120,
        description="Age (years)",
    )
    has_diabetes: bool = Field(
        DEFAULT_HAS_DIABETES,
        description="Have you been diagnosed with Type 2 Diabetes?",
    )
    smell_rating: int = Field(
        DEFAULT_SMELL_RATING, ge=0, le=100,
        description="How would you rate your ability to smell? "
                    "For example: flowers, soap, or garbage",
    )
    safety_impact: int = Field(
        DEFAULT_SAFETY_IMPACT, ge=0, le=100,
        description="How much has reduced smell affected your safety? "
                    "Such as detecting gas leaks, smoke, or spoiled food",
    )

    @field_validator("age", "smell_rating", "safety_impact", mode="before")
    @classmethod
    def reject_booleans(cls, value):
        # bool is an int subclass, so lax mode would read True as 1
        if isinstance(value, bool):
            raise ValueError("must be a number, not a boolean")
        return value

    def to_score_input(self) -> ScoreInput:
        """Convert validated answers to scorer input."""
        return ScoreInput(
            age=self.age,
            has_diabetes=self.has_diabetes,
            smell_rating=self.smell_rating,
            safety_impact=self.safety_impact,
        )


class ScreeningReport(BaseModel):
    """Everything the results screen shows for one screening."""
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    evaluation_id: str
    model_revision: str
    answers: QuestionnaireAnswers
    probability: float = Field(..., description="Predicted probability of smell loss (0-1)")
    percent_probability: str = Field(..., description="Probability as a percentage, one decimal")
    verdict: Verdict
    has_smell_loss: bool
    headline: str
    recommendation: Optional[str] = None
    disclaimer: str = DISCLAIMER
