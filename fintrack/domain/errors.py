"""Domain and application error types."""


class FinTrackError(Exception):
    """Base class for errors surfaced to adapters."""


class InvalidNumericInput(ValueError):
    """Raised when an amount is missing, NaN, infinite, or unparsable.

    The core never lets this escape: ``coerce_decimal`` recovers by
    substituting zero.
    """


class InvalidGoalError(FinTrackError):
    """Raised when a savings goal has no name or a non-positive target."""


class GoalNotFoundError(FinTrackError):
    """Raised when a goal id does not exist for the current user."""


class InvalidImportError(FinTrackError):
    """Raised when an import batch is empty or malformed."""


class InvalidTransactionError(FinTrackError):
    """Raised when a recorded transaction lacks an amount, category or date."""


__all__ = [
    "FinTrackError",
    "InvalidNumericInput",
    "InvalidGoalError",
    "GoalNotFoundError",
    "InvalidImportError",
    "InvalidTransactionError",
]
