"""Formula library for forex trading calculators"""

from .calculator import ForexCalculator
from .conversion import convert_currency, convert_time_zone, convert_with_table
from .indicators import (
    atr,
    bollinger_bands,
    macd_simplified,
    momentum,
    moving_average,
    rsi,
    standard_deviation,
    stochastic_k,
)
from .levels import fibonacci_extensions, fibonacci_levels, pivot_points
from .money import (
    compound_interest,
    expected_value,
    kelly_criterion,
    profit_factor,
    risk_of_ruin,
    roi,
    sharpe_ratio,
    value_at_risk,
)
from .outcome import (
    break_even_price,
    commission_cost,
    profit_loss,
    risk_reward,
    spread_cost,
    swap_cost,
    trade_cost,
)
from .pips import lots_to_units, pip_size, pip_value, units_to_lots
from .risk import (
    effective_leverage,
    margin_for_instrument,
    margin_level,
    margin_required,
    max_drawdown,
    parse_leverage,
    position_size,
    risk_percentage,
)

__all__ = [
    "ForexCalculator",
    # Pip/Lot Conversion
    "pip_size",
    "pip_value",
    "lots_to_units",
    "units_to_lots",
    # Position Sizing & Risk
    "position_size",
    "risk_percentage",
    "max_drawdown",
    "margin_level",
    "margin_required",
    "margin_for_instrument",
    "parse_leverage",
    "effective_leverage",
    # Trade Outcome
    "profit_loss",
    "break_even_price",
    "spread_cost",
    "commission_cost",
    "swap_cost",
    "trade_cost",
    "risk_reward",
    # Technical Levels
    "fibonacci_levels",
    "fibonacci_extensions",
    "pivot_points",
    "moving_average",
    "standard_deviation",
    "momentum",
    "rsi",
    "macd_simplified",
    "bollinger_bands",
    "stochastic_k",
    "atr",
    # Money Management
    "compound_interest",
    "kelly_criterion",
    "sharpe_ratio",
    "expected_value",
    "roi",
    "value_at_risk",
    "risk_of_ruin",
    "profit_factor",
    # Conversion Utilities
    "convert_currency",
    "convert_with_table",
    "convert_time_zone",
]
