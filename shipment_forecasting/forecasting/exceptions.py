"""
Exceptions raised by the forecasting engine.

Every failure is a ValueError subclass so callers that only care about
"bad input" can keep catching ValueError.
"""


class ForecastingError(ValueError):
    """Base class for forecasting engine failures."""


class EmptySeriesError(ForecastingError):
    """Raised when a series (or a metric input) has no observations."""


class InvalidSeriesError(ForecastingError):
    """Raised when a series contains non-numeric or non-finite values."""


class InsufficientDataError(ForecastingError):
    """Raised when a method needs more observations than were supplied."""

    def __init__(self, required: int, actual: int, operation: str):
        self.required = required
        self.actual = actual
        self.operation = operation
        super().__init__(
            f"{operation} requires at least {required} observations, got {actual}"
        )


class InvalidParameterError(ForecastingError):
    """Raised when a method parameter (window, alpha, periods) is out of range."""


class UnknownMethodError(ForecastingError):
    """Raised when a forecasting method selector is not recognised."""
