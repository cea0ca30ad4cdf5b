"""
Exceptions raised while fetching economic indicators.
"""


class EconomicDataError(Exception):
    """Base class for economic data failures."""


class UnknownIndicatorError(EconomicDataError):
    """Raised when an indicator name has no known FRED series."""


class UpstreamError(EconomicDataError):
    """Raised when FRED answers with an error status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class UpstreamUnavailable(EconomicDataError):
    """Raised when FRED cannot be reached or times out."""
