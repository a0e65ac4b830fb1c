"""
Error classification system for calculator formulas.

This module provides a structured exception hierarchy for the failures a
formula can hit. Formulas raise these internally; the formula boundary turns
them into CalculationFailure results so callers never see them.
"""

from .base import CalculationError, UnknownCalculatorError
from .degenerate_cases import (
    DegenerateCaseError,
    InsufficientDataError,
    ZeroDenominatorError,
)
from .input_quality import (
    InvalidInputError,
    NegativeInputError,
    NonFiniteInputError,
    OutOfRangeInputError,
)
from .out_of_bounds import OutOfBoundsResultError

__all__ = [
    "CalculationError",
    "UnknownCalculatorError",
    # Input Quality Errors
    "InvalidInputError",
    "NonFiniteInputError",
    "NegativeInputError",
    "OutOfRangeInputError",
    # Degenerate Cases
    "DegenerateCaseError",
    "ZeroDenominatorError",
    "InsufficientDataError",
    # Result Bounds
    "OutOfBoundsResultError",
]
