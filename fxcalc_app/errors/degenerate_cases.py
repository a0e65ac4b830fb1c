"""
Degenerate case error classifications.

These exceptions represent well-formed inputs for which the formula has no
defined answer, such as a zero denominator or a series too short to
describe.
"""

from typing import Optional

from .base import CalculationError


class DegenerateCaseError(CalculationError):
    """Inputs are valid but the formula is undefined for them."""


class ZeroDenominatorError(DegenerateCaseError):
    """A distance, range or deviation used as a divisor is zero."""

    def __init__(self, message: str, denominator: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.denominator = denominator


class InsufficientDataError(DegenerateCaseError):
    """Not enough data points in a price series."""

    def __init__(self, message: str, required_count: Optional[int] = None,
                 available_count: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.required_count = required_count
        self.available_count = available_count
