"""Screening service: validated answers in, advisory report out."""
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from fourcast import metrics
from fourcast.config import Settings, settings as default_settings
from fourcast.logging import (
    TimedOperation,
    clear_evaluation_context,
    generate_evaluation_id,
    get_logger,
    log_screening,
    set_evaluation_context,
)
from fourcast.schemas import FAIL_RECOMMENDATION, QuestionnaireAnswers, ScreeningReport
from fourcast.scoring import RiskScorer, ScoreResult, get_model

logger = get_logger(__name__)


class ScreeningService:
    """
    Service for running 4CAST screenings.

    This service orchestrates:
    1. Validating raw questionnaire answers
    2. Scoring them with the configured model revision
    3. Recording logs and metrics for the screening
    4. Building the report shown to the user
    """

    def __init__(
        self,
        scorer: Optional[RiskScorer] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the screening service.

        Args:
            scorer: Scorer to use (defaults to the revision named in settings)
            settings: Package settings (defaults to environment settings)

        Raises:
            UnknownModelRevisionError: If settings name a revision that does not ship.
        """
        self.settings = settings or default_settings
        self.scorer = scorer or RiskScorer(get_model(self.settings.model_revision))
        metrics.set_service_info(self.settings.service_name)

    def screen_raw(self, data: Mapping[str, Any]) -> ScreeningReport:
        """
        Validate raw answers, then screen them.

        Args:
            data: Mapping with age, has_diabetes, smell_rating, safety_impact

        Raises:
            pydantic.ValidationError: If any answer has the wrong type or is out of range.
        """
        try:
            answers = QuestionnaireAnswers.model_validate(data)
        except ValidationError as e:
            fields = sorted({str(err["loc"][0]) if err["loc"] else "" for err in e.errors()})
            for field in fields:
                metrics.record_validation_failure(field)
            logger.warning("screening_invalid_answers", fields=fields, error_count=e.error_count())
            raise

        return self.screen(answers)

    def screen(self, answers: QuestionnaireAnswers) -> ScreeningReport:
        """
        Score validated answers and build the screening report.

        Args:
            answers: Validated questionnaire answers

        Returns:
            ScreeningReport with verdict, percentage and advisory text
        """
        evaluation_id = generate_evaluation_id()
        set_evaluation_context(evaluation_id)
        revision = self.scorer.revision

        try:
            with TimedOperation(
                "screening",
                logger=logger,
                on_complete=metrics.record_screening_latency,
                model_revision=revision,
            ):
                result = self.scorer.score(answers.to_score_input())
                report = self._build_report(evaluation_id, answers, result)

            log_screening(
                logger,
                evaluation_id=evaluation_id,
                model_revision=revision,
                probability=result.probability,
                percent_probability=result.percent_probability,
                verdict=result.verdict.value,
            )
            metrics.record_screening(
                verdict=result.verdict.value,
                probability=result.probability,
                model_revision=revision,
            )
        finally:
            clear_evaluation_context()

        return report

    def _build_report(
        self,
        evaluation_id: str,
        answers: QuestionnaireAnswers,
        result: ScoreResult,
    ) -> ScreeningReport:
        """Assemble the user-facing report. FAIL is advisory, never a diagnosis."""
        return ScreeningReport(
            evaluation_id=evaluation_id,
            model_revision=self.scorer.revision,
            answers=answers,
            probability=result.probability,
            percent_probability=result.percent_probability,
            verdict=result.verdict,
            has_smell_loss=result.has_smell_loss,
            headline=f"{result.percent_probability}% probability of smell loss",
            recommendation=FAIL_RECOMMENDATION if result.has_smell_loss else None,
        )
