"""
Structured logging configuration for the 4CAST screening package.

All logs are JSON-formatted with these standard fields:
- timestamp: ISO 8601 timestamp
- event: The log event name (first positional argument)
- evaluation_id: UUID tying together the events of one screening
- duration_ms: Operation duration in milliseconds
- verdict: Screening outcome (for screening events)

Note: In structlog, the first positional argument to logger.info/warning/error
becomes the 'event' field in the JSON output automatically.

Answers themselves are health data and are never logged; only the derived
probability and verdict are.
"""
import logging
import sys
import time
import uuid
from contextvars import ContextVar
from typing import Any, Callable, Optional

import structlog

from fourcast.config import settings

# Context variable for screening-scoped data
evaluation_id_ctx: ContextVar[str] = ContextVar("evaluation_id", default="")


def add_context_vars(
    logger: structlog.typing.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor that adds context variables to log entries."""
    evaluation_id = evaluation_id_ctx.get()

    if evaluation_id:
        event_dict.setdefault("evaluation_id", evaluation_id)

    return event_dict


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog with JSON output and context processors."""
    if level is None:
        level = settings.log_level

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level.upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", key="timestamp"),
            add_context_vars,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


def set_evaluation_context(evaluation_id: str) -> None:
    """Set the screening context for logging."""
    evaluation_id_ctx.set(evaluation_id)


def clear_evaluation_context() -> None:
    """Clear the screening context after the screening completes."""
    evaluation_id_ctx.set("")


def generate_evaluation_id() -> str:
    """Generate a unique evaluation ID."""
    return str(uuid.uuid4())


class TimedOperation:
    """
    Context manager that times a block and logs its outcome.

    On success the duration is handed to ``on_complete`` (in seconds), so
    callers can feed a latency histogram without timing the block twice.
    Failures are logged and re-raised; ``on_complete`` is not called for them.
    """

    def __init__(
        self,
        event: str,
        logger: Optional[structlog.stdlib.BoundLogger] = None,
        on_complete: Optional[Callable[[float], None]] = None,
        **extra_fields: Any,
    ):
        self.event = event
        self.logger = logger or get_logger()
        self.on_complete = on_complete
        self.extra_fields = extra_fields
        self._started: float = 0
        self.duration_seconds: float = 0

    @property
    def duration_ms(self) -> float:
        return round(self.duration_seconds * 1000, 3)

    def __enter__(self) -> "TimedOperation":
        self.logger.info(f"{self.event}_started", **self.extra_fields)
        self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.duration_seconds = time.perf_counter() - self._started

        if exc_type is None:
            self.logger.info(f"{self.event}_completed", duration_ms=self.duration_ms, **self.extra_fields)
            if self.on_complete is not None:
                self.on_complete(self.duration_seconds)
            return

        self.logger.error(
            f"{self.event}_failed",
            duration_ms=self.duration_ms,
            error_type=exc_type.__name__,
            error=str(exc_val),
            **self.extra_fields,
        )



def log_screening(
    logger: structlog.stdlib.BoundLogger,
    evaluation_id: str,
    model_revision: str,
    probability: float,
    percent_probability: str,
    verdict: str,
) -> None:
    """Log a screening outcome with standard fields."""
    logger.info(
        "screening_scored",
        evaluation_id=evaluation_id,
        model_revision=model_revision,
        probability=probability,
        percent_probability=percent_probability,
        verdict=verdict,
        has_smell_loss=verdict == "FAIL",
    )
