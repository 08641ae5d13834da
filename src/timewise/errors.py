"""Errors raised by the regression engine."""


class RegressionError(ValueError):
    """
    Base class for regression failures.

    Attributes:
        kind: Name of the error variant ('EmptyData', 'InsufficientData'
            or 'InvalidInput').
    """

    kind = "RegressionError"
    default_message = "Regression failed"

    def __init__(self, message=None):
        super().__init__(message or self.default_message)


class EmptyDataError(RegressionError):
    """The input series has no observations."""

    kind = "EmptyData"
    default_message = "Empty data provided"


class InsufficientDataError(RegressionError):
    """The input series has a single observation (a line needs two)."""

    kind = "InsufficientData"
    default_message = "Insufficient data for analysis"


class InvalidInputError(RegressionError):
    """Non-finite values, malformed arrays or a numerically unusable fit."""

    kind = "InvalidInput"
    default_message = "Invalid input"
