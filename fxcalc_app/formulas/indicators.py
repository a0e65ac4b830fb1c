"""
Series indicators: moving average, standard deviation, momentum, RSI,
MACD, Bollinger Bands, Stochastic %K and ATR.

Every indicator works over the full series it is handed; the caller picks
the window. Series need at least two points.

RSI and MACD are deliberately simplified: RSI averages gains and losses in
a single pass without Wilder smoothing, and MACD is the last price minus
the simple mean rather than a difference of EMAs.
"""

import math
from collections.abc import Sequence
from typing import Optional

from ..config.defaults import DefaultConfig
from ..errors import InvalidInputError, ZeroDenominatorError
from ..models.results import (
    ATRResult,
    BollingerBands,
    MACDResult,
    MomentumResult,
    MovingAverageResult,
    RSIResult,
    StandardDeviationResult,
    StochasticResult,
)
from ..validation.inputs import require_matching_lengths, require_positive, require_series
from .boundary import formula, resolve_config


def _series(name: str, values: Sequence[float], config: Optional[DefaultConfig]) -> list[float]:
    # Every indicator compares at least two points
    min_length = max(2, resolve_config(config).indicators.min_series_length)
    return require_series(name, values, min_length)


def _mean(values: list[float]) -> float:
    return sum(values) / len(values)


def _population_std(values: list[float], mean: float) -> float:
    return math.sqrt(sum((v - mean) ** 2 for v in values) / len(values))


def calculate_true_range(high: float, low: float, previous_close: Optional[float] = None) -> float:
    """
    True Range for a single bar

    TR = max(high - low, abs(high - prev_close), abs(low - prev_close))
    """
    if previous_close is None:
        # First bar - use high-low range
        return high - low

    return max(high - low, abs(high - previous_close), abs(low - previous_close))


@formula("moving_average")
def moving_average(series: Sequence[float],
                   config: Optional[DefaultConfig] = None) -> MovingAverageResult:
    """Simple arithmetic mean of the series"""
    values = _series("series", series, config)
    return MovingAverageResult(value=_mean(values), period=len(values))


@formula("standard_deviation")
def standard_deviation(series: Sequence[float],
                       config: Optional[DefaultConfig] = None) -> StandardDeviationResult:
    """Mean and population standard deviation of the series"""
    values = _series("series", series, config)
    mean = _mean(values)
    return StandardDeviationResult(mean=mean, std=_population_std(values, mean))


@formula("momentum")
def momentum(series: Sequence[float], config: Optional[DefaultConfig] = None) -> MomentumResult:
    """
    Momentum as last minus first price, with rate of change in percent

    rate_of_change is None when the first price is zero.
    """
    values = _series("series", series, config)
    change = values[-1] - values[0]
    roc = change / values[0] * 100 if values[0] != 0 else None
    return MomentumResult(momentum=change, rate_of_change=roc)


@formula("rsi")
def rsi(series: Sequence[float], config: Optional[DefaultConfig] = None) -> RSIResult:
    """
    Relative Strength Index, simplified single-pass form

    Average gain and average loss are plain means over every price change
    in the series. No losses gives 100; a flat series gives 50.
    """
    values = _series("series", series, config)
    changes = [b - a for a, b in zip(values, values[1:])]

    average_gain = sum(c for c in changes if c > 0) / len(changes)
    average_loss = sum(-c for c in changes if c < 0) / len(changes)

    if average_loss == 0:
        value = 50.0 if average_gain == 0 else 100.0
    else:
        rs = average_gain / average_loss
        value = 100 - 100 / (1 + rs)

    return RSIResult(value=value, average_gain=average_gain, average_loss=average_loss)


@formula("macd_simplified")
def macd_simplified(series: Sequence[float],
                    config: Optional[DefaultConfig] = None) -> MACDResult:
    """
    Simplified MACD: last price minus the simple mean of the series

    The signal is the same quantity for the series without its last point,
    and the histogram is macd - signal.
    """
    values = _series("series", series, config)

    macd = values[-1] - _mean(values)
    previous = values[:-1]
    signal = previous[-1] - _mean(previous)

    return MACDResult(macd=macd, signal=signal, histogram=macd - signal)


@formula("bollinger_bands")
def bollinger_bands(series: Sequence[float], std_dev_multiplier: Optional[float] = None,
                    config: Optional[DefaultConfig] = None) -> BollingerBands:
    """Bands at mean +/- multiplier * population standard deviation"""
    cfg = resolve_config(config)
    values = _series("series", series, cfg)
    if std_dev_multiplier is None:
        std_dev_multiplier = cfg.indicators.bollinger_std_dev_multiplier
    multiplier = require_positive("std_dev_multiplier", std_dev_multiplier)

    middle = _mean(values)
    width = multiplier * _population_std(values, middle)
    return BollingerBands(upper=middle + width, middle=middle, lower=middle - width)


def _bars(highs: Sequence[float], lows: Sequence[float], closes: Sequence[float],
          config: Optional[DefaultConfig]) -> tuple[list[float], list[float], list[float]]:
    highs = _series("highs", highs, config)
    lows = _series("lows", lows, config)
    closes = _series("closes", closes, config)
    require_matching_lengths(highs=highs, lows=lows, closes=closes)

    for i, (high, low, close) in enumerate(zip(highs, lows, closes)):
        if high < low:
            raise InvalidInputError(
                f"Bar {i}: high ({high}) is below low ({low})",
                field=f"highs[{i}]",
                value=high,
            )
        if not low <= close <= high:
            raise InvalidInputError(
                f"Bar {i}: close ({close}) is outside [{low}, {high}]",
                field=f"closes[{i}]",
                value=close,
            )
    return highs, lows, closes


@formula("stochastic_k")
def stochastic_k(highs: Sequence[float], lows: Sequence[float], closes: Sequence[float],
                 config: Optional[DefaultConfig] = None) -> StochasticResult:
    """
    Stochastic %K over the whole series

    %K = (last close - period low) / (period high - period low) * 100
    """
    highs, lows, closes = _bars(highs, lows, closes, config)

    period_high = max(highs)
    period_low = min(lows)
    if period_high == period_low:
        raise ZeroDenominatorError(
            "Period high equals period low",
            denominator="period_high - period_low",
        )

    k = (closes[-1] - period_low) / (period_high - period_low) * 100
    return StochasticResult(k=k, period_high=period_high, period_low=period_low)


@formula("atr")
def atr(highs: Sequence[float], lows: Sequence[float], closes: Sequence[float],
        config: Optional[DefaultConfig] = None) -> ATRResult:
    """Average True Range: the mean of every bar's true range"""
    highs, lows, closes = _bars(highs, lows, closes, config)

    true_ranges = []
    for i in range(len(highs)):
        previous_close = closes[i - 1] if i > 0 else None
        true_ranges.append(calculate_true_range(highs[i], lows[i], previous_close))

    return ATRResult(value=_mean(true_ranges), true_ranges=tuple(true_ranges))
