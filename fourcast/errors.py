"""Exception types raised by the screening package."""


class FourcastError(Exception):
    """Base class for all screening package errors."""


class UnknownModelRevisionError(FourcastError, KeyError):
    """Raised when a coefficient set is requested by a revision name that is not registered."""

    def __init__(self, revision: str, available: tuple[str, ...] = ()):
        self.revision = revision
        self.available = available
        message = f"Unknown model revision: {revision!r}"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]
