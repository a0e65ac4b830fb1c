"""Result records returned by calculator formulas"""

from dataclasses import dataclass, field
from datetime import time
from enum import Enum
from typing import Any, Optional


class FailureKind(str, Enum):
    """Why a formula produced no result."""
    INVALID_INPUT = "invalid_input"
    DEGENERATE_CASE = "degenerate_case"
    INSUFFICIENT_DATA = "insufficient_data"
    OUT_OF_BOUNDS = "out_of_bounds"


@dataclass(frozen=True)
class CalculationFailure:
    """Sentinel returned in place of a result when a formula cannot answer"""
    calculator: str
    kind: FailureKind
    message: str
    context: dict[str, Any] = field(default_factory=dict)


def is_failure(outcome: Any) -> bool:
    """True if a formula returned a CalculationFailure"""
    return isinstance(outcome, CalculationFailure)


# Pip / lot conversion

@dataclass(frozen=True)
class PipValueResult:
    pip_value: float
    per_lot: float
    account_currency: str


@dataclass(frozen=True)
class LotUnits:
    lots: float
    units: float
    mini: float
    micro: float


# Position sizing & risk

@dataclass(frozen=True)
class PositionSizeResult:
    """Position size for a risk budget"""
    lot_size: float
    risk_amount: float
    raw_lot_size: float
    lot_clamped: bool


@dataclass(frozen=True)
class RiskPercentageResult:
    percent: float


@dataclass(frozen=True)
class DrawdownResult:
    percent: float
    amount: float


@dataclass(frozen=True)
class MarginLevelResult:
    """Margin level; level_percent is None when no margin is in use"""
    level_percent: Optional[float]
    free_margin: float

    @property
    def is_unbounded(self) -> bool:
        return self.level_percent is None


@dataclass(frozen=True)
class MarginResult:
    margin: float
    notional: float
    leverage: float


@dataclass(frozen=True)
class LeverageResult:
    leverage: float
    ratio_label: str


# Trade outcome

@dataclass(frozen=True)
class ProfitLossResult:
    pips: float
    profit: float


@dataclass(frozen=True)
class BreakEvenResult:
    price: float
    cost_pips: float


@dataclass(frozen=True)
class SpreadCostResult:
    pips: float
    cost: float


@dataclass(frozen=True)
class CommissionResult:
    per_trade: float
    total: float


@dataclass(frozen=True)
class TradeCostResult:
    spread: float
    commission: float
    swap: float
    total: float


@dataclass(frozen=True)
class RiskRewardResult:
    ratio: float
    risk_pips: float
    reward_pips: float


@dataclass(frozen=True)
class SwapResult:
    long_swap: float
    short_swap: float


# Technical levels

@dataclass(frozen=True)
class FibonacciLevel:
    level: float
    price: float


@dataclass(frozen=True)
class FibonacciResult:
    levels: tuple[FibonacciLevel, ...]

    def price_at(self, level: float) -> Optional[float]:
        """Price for a level percentage, None if that level was not computed"""
        for fib in self.levels:
            if abs(fib.level - level) < 1e-9:
                return fib.price
        return None


@dataclass(frozen=True)
class PivotPoints:
    pivot: float
    r1: float
    r2: float
    r3: float
    s1: float
    s2: float
    s3: float


@dataclass(frozen=True)
class MovingAverageResult:
    value: float
    period: int


@dataclass(frozen=True)
class StandardDeviationResult:
    mean: float
    std: float


@dataclass(frozen=True)
class MomentumResult:
    momentum: float
    rate_of_change: Optional[float]  # percent; None when the first price is zero


@dataclass(frozen=True)
class RSIResult:
    value: float
    average_gain: float
    average_loss: float


@dataclass(frozen=True)
class MACDResult:
    macd: float
    signal: float
    histogram: float


@dataclass(frozen=True)
class BollingerBands:
    upper: float
    middle: float
    lower: float


@dataclass(frozen=True)
class StochasticResult:
    k: float
    period_high: float
    period_low: float


@dataclass(frozen=True)
class ATRResult:
    value: float
    true_ranges: tuple[float, ...]


# Money management

@dataclass(frozen=True)
class CompoundInterestResult:
    future_value: float
    total_contributions: float
    total_interest: float


@dataclass(frozen=True)
class KellyResult:
    fraction: float
    percent: float


@dataclass(frozen=True)
class SharpeResult:
    value: float


@dataclass(frozen=True)
class ExpectedValueResult:
    value: float


@dataclass(frozen=True)
class ROIResult:
    percent: float
    profit: float


@dataclass(frozen=True)
class VaRResult:
    var: float
    percent: float
    z_score: float


@dataclass(frozen=True)
class RiskOfRuinResult:
    percent: float


@dataclass(frozen=True)
class ProfitFactorResult:
    value: float


# Conversion

@dataclass(frozen=True)
class ConversionResult:
    amount: float
    rate: float


@dataclass(frozen=True)
class TimeZoneResult:
    """Converted wall-clock time; day_shift counts calendar days crossed"""
    time: time
    day_shift: int

