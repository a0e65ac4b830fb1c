"""Fibonacci retracement/extension levels and pivot points"""

from collections.abc import Iterable
from typing import Optional

from ..config.defaults import DefaultConfig
from ..errors import InvalidInputError
from ..models.results import FibonacciLevel, FibonacciResult, PivotPoints
from ..validation.inputs import require_finite, require_positive
from .boundary import formula, resolve_config


def _validate_range(high: float, low: float) -> tuple[float, float]:
    high = require_positive("high", high)
    low = require_positive("low", low)
    if high < low:
        raise InvalidInputError(
            f"high ({high}) is below low ({low})",
            field="high",
            value=high,
        )
    return high, low


def _project(high: float, low: float, uptrend: bool,
             levels: Iterable[float]) -> FibonacciResult:
    """
    Project level percentages onto a high/low range

    uptrend: low + range * level / 100
    otherwise (measured down from the high): high - range * level / 100
    """
    price_range = high - low
    projected = []
    for level in levels:
        if uptrend:
            price = low + price_range * level / 100
        else:
            price = high - price_range * level / 100
        projected.append(FibonacciLevel(level=float(level), price=price))
    return FibonacciResult(levels=tuple(projected))


@formula("fibonacci_levels")
def fibonacci_levels(high: float, low: float, uptrend: bool = False,
                     config: Optional[DefaultConfig] = None) -> FibonacciResult:
    """
    Fibonacci retracement levels for a swing

    Levels are 0, 23.6, 38.2, 50, 61.8, 78.6 and 100 percent.

    Args:
        high: Swing high
        low: Swing low
        uptrend: Measure up from the low instead of down from the high
        config: Optional configuration

    Returns:
        FibonacciResult with one FibonacciLevel per level
    """
    high, low = _validate_range(high, low)
    return _project(high, low, bool(uptrend), resolve_config(config).indicators.fibonacci_levels)


@formula("fibonacci_extensions")
def fibonacci_extensions(high: float, low: float, uptrend: bool = False,
                         config: Optional[DefaultConfig] = None) -> FibonacciResult:
    """Fibonacci extension levels (100 to 261.8 percent) beyond the swing"""
    high, low = _validate_range(high, low)
    return _project(high, low, bool(uptrend), resolve_config(config).indicators.fibonacci_extensions)


@formula("pivot_points")
def pivot_points(high: float, low: float, close: float) -> PivotPoints:
    """
    Standard pivot points from the previous period

    P = (H + L + C) / 3
    R1 = 2P - L, S1 = 2P - H
    R2 = P + (H - L), S2 = P - (H - L)
    R3 = H + 2(P - L), S3 = L - 2(H - P)
    """
    high, low = _validate_range(high, low)
    close = require_finite("close", close)
    if not low <= close <= high:
        raise InvalidInputError(
            f"close ({close}) is outside the high/low range",
            field="close",
            value=close,
        )

    pivot = (high + low + close) / 3
    return PivotPoints(
        pivot=pivot,
        r1=2 * pivot - low,
        r2=pivot + (high - low),
        r3=high + 2 * (pivot - low),
        s1=2 * pivot - high,
        s2=pivot - (high - low),
        s3=low - 2 * (high - pivot),
    )
