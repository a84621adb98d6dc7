"""
Prometheus Metrics for the 4CAST screening package.

Collectors live in the default prometheus_client registry so a host
application can expose them alongside its own. Metrics are categorized into:

1. Screening Outcome Metrics - For clinical/product review
   - Verdict counts, probability distribution, rejected answers

2. Technical Metrics - For engineering
   - Screening latency
"""
from prometheus_client import Counter, Histogram, Info

from fourcast import __version__
from fourcast.config import settings

# =============================================================================
# SERVICE INFO
# =============================================================================

SERVICE_INFO = Info(
    "fourcast_service",
    "Screening package information"
)


def set_service_info(service_name: str) -> None:
    """Publish the package version under the configured service name."""
    SERVICE_INFO.info({
        "version": __version__,
        "service": service_name,
    })


set_service_info(settings.service_name)

# =============================================================================
# SCREENING OUTCOME METRICS
# =============================================================================

# Counter: Total screenings by verdict and model revision
SCREENING_TOTAL = Counter(
    "fourcast_screening_total",
    "Total screenings evaluated",
    ["verdict", "model_revision"]  # verdict: PASS, FAIL
)

# Histogram: Distribution of predicted smell-loss probability
PROBABILITY = Histogram(
    "fourcast_probability",
    "Distribution of predicted smell-loss probability",
    buckets=[0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9, 1.0]
)

# Counter: Questionnaire answers rejected by validation
VALIDATION_FAILURES = Counter(
    "fourcast_validation_failures_total",
    "Questionnaire answers rejected by range validation",
    ["field"]  # age, has_diabetes, smell_rating, safety_impact
)

# =============================================================================
# TECHNICAL METRICS
# =============================================================================

# Histogram: Screening latency (validation excluded)
SCREENING_LATENCY = Histogram(
    "fourcast_screening_latency_seconds",
    "Time to score a questionnaire and build the report",
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1]
)

# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def record_screening(
    verdict: str,
    probability: float,
    model_revision: str,
) -> None:
    """
    Record all metrics for a single screening.

    Args:
        verdict: "PASS" or "FAIL"
        probability: Predicted probability of smell loss
        model_revision: Revision name of the coefficient set used
    """
    SCREENING_TOTAL.labels(verdict=verdict, model_revision=model_revision).inc()

    # NaN observations would poison the histogram sum
    if probability == probability:
        PROBABILITY.observe(probability)


def record_screening_latency(latency_seconds: float) -> None:
    """Record time taken to score a questionnaire and build the report."""
    SCREENING_LATENCY.observe(latency_seconds)


def record_validation_failure(field: str) -> None:
    """Record one rejected questionnaire field."""
    VALIDATION_FAILURES.labels(field=field or "unknown").inc()
