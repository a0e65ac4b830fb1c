"""
Input quality error classifications.

These exceptions categorize numeric inputs that a formula refuses to
evaluate: non-finite values, negative values where a positive one is
required, and values outside the domain of the formula.
"""

from typing import Any, Optional

from .base import CalculationError


class InvalidInputError(CalculationError):
    """Base class for inputs a formula cannot evaluate."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value


class NonFiniteInputError(InvalidInputError):
    """Input is NaN, infinite, or not a number at all."""


class NegativeInputError(InvalidInputError):
    """Input is negative (or zero) where a positive value is required."""


class OutOfRangeInputError(InvalidInputError):
    """Input lies outside the domain of the formula."""

    def __init__(self, message: str, minimum: Optional[float] = None,
                 maximum: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.minimum = minimum
        self.maximum = maximum
