"""
Input validation for calculator formulas.

Each helper checks one numeric argument and raises from the errors package
when it is unusable. Formulas call these first thing; the formula boundary
converts the raised error into a CalculationFailure.
"""

import math
from collections.abc import Sequence
from typing import Any

from ..errors import (
    InsufficientDataError,
    InvalidInputError,
    NegativeInputError,
    NonFiniteInputError,
    OutOfRangeInputError,
    ZeroDenominatorError,
)


def require_finite(name: str, value: Any) -> float:
    """Return value as float, rejecting booleans, non-numbers, NaN and inf."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise NonFiniteInputError(
            f"{name} must be a number, got {type(value).__name__}",
            field=name,
            value=value,
        )
    if math.isnan(value) or math.isinf(value):
        raise NonFiniteInputError(f"{name} must be finite, got {value}", field=name, value=value)
    return float(value)


def require_positive(name: str, value: Any) -> float:
    number = require_finite(name, value)
    if number <= 0:
        raise NegativeInputError(f"{name} must be positive, got {number}", field=name, value=value)
    return number


def require_non_negative(name: str, value: Any) -> float:
    number = require_finite(name, value)
    if number < 0:
        raise NegativeInputError(f"{name} must not be negative, got {number}", field=name, value=value)
    return number


def require_in_range(name: str, value: Any, minimum: float, maximum: float) -> float:
    """Finite value within [minimum, maximum] inclusive."""
    number = require_finite(name, value)
    if number < minimum or number > maximum:
        raise OutOfRangeInputError(
            f"{name} must be between {minimum} and {maximum}, got {number}",
            field=name,
            value=value,
            minimum=minimum,
            maximum=maximum,
        )
    return number


def require_nonzero_denominator(name: str, value: float) -> float:
    if value == 0:
        raise ZeroDenominatorError(f"{name} is zero", denominator=name)
    return value


def require_series(name: str, values: Any, min_length: int = 2) -> list[float]:
    """
    Validate a price series.

    Args:
        name: Argument name for error messages
        values: Sequence of prices in chronological order
        min_length: Minimum number of points required

    Returns:
        The series as a list of floats

    Raises:
        InvalidInputError: If values is not a sequence or holds non-finite items
        InsufficientDataError: If the series is shorter than min_length
    """
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise InvalidInputError(
            f"{name} must be a sequence of numbers",
            field=name,
            value=values,
        )
    if len(values) < min_length:
        raise InsufficientDataError(
            f"{name} needs at least {min_length} points, got {len(values)}",
            required_count=min_length,
            available_count=len(values),
        )
    return [require_finite(f"{name}[{i}]", v) for i, v in enumerate(values)]


def require_matching_lengths(**series: list[float]) -> int:
    """Ensure parallel series have the same length and return it."""
    lengths = {name: len(values) for name, values in series.items()}
    if len(set(lengths.values())) > 1:
        raise InvalidInputError(
            f"Series lengths differ: {lengths}",
            context={"lengths": lengths},
        )
    return next(iter(lengths.values()))


def require_fraction(name: str, value: Any) -> float:
    """A probability in [0, 1]."""
    return require_in_range(name, value, 0.0, 1.0)

