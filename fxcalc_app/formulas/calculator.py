"""Calculator facade dispatching named calculations with a shared config and rate table"""

import inspect
from typing import Any, Callable, Mapping, Optional

from ..config.defaults import DefaultConfig, get_default_config
from ..errors import UnknownCalculatorError
from ..logging.config import get_calculation_logger
from ..models.instruments import RateTable
from ..models.results import CalculationFailure, FailureKind
from . import conversion, indicators, levels, money, outcome, pips, risk

logger = get_calculation_logger(__name__)

_FORMULAS: tuple[Callable[..., Any], ...] = (
    pips.pip_value,
    pips.lots_to_units,
    pips.units_to_lots,
    risk.position_size,
    risk.risk_percentage,
    risk.max_drawdown,
    risk.margin_level,
    risk.margin_required,
    risk.margin_for_instrument,
    risk.effective_leverage,
    outcome.profit_loss,
    outcome.break_even_price,
    outcome.spread_cost,
    outcome.commission_cost,
    outcome.swap_cost,
    outcome.trade_cost,
    outcome.risk_reward,
    levels.fibonacci_levels,
    levels.fibonacci_extensions,
    levels.pivot_points,
    indicators.moving_average,
    indicators.standard_deviation,
    indicators.momentum,
    indicators.rsi,
    indicators.macd_simplified,
    indicators.bollinger_bands,
    indicators.stochastic_k,
    indicators.atr,
    money.compound_interest,
    money.kelly_criterion,
    money.sharpe_ratio,
    money.expected_value,
    money.roi,
    money.value_at_risk,
    money.risk_of_ruin,
    money.profit_factor,
    conversion.convert_currency,
    conversion.convert_with_table,
    conversion.convert_time_zone,
)


class ForexCalculator:
    """
    Entry point for UI callers that select a calculator by name.

    Holds an immutable configuration and an injected rate table and passes
    them to formulas that accept them. It keeps no per-calculation state, so
    one instance can serve concurrent callers.
    """

    def __init__(self, config: Optional[DefaultConfig] = None,
                 rates: Optional[Mapping[str, float]] = None,
                 currency_rates: Optional[Mapping[str, float]] = None):
        self.config = config or get_default_config()
        default = self.config.rates.missing_rate_default
        if rates is None:
            rates = self.config.rates.instrument_prices
        self.rates = RateTable.coerce(rates, default=default)
        if currency_rates is None:
            self.currency_rates = conversion.default_currency_rates(self.config)
        else:
            self.currency_rates = RateTable.coerce(currency_rates, default=default)

        self._registry: dict[str, Callable[..., Any]] = {
            func.calculator_name: func for func in _FORMULAS  # type: ignore[attr-defined]
        }

    def available_calculators(self) -> list[str]:
        """Names accepted by calculate()"""
        return sorted(self._registry)

    def calculate(self, name: str, **inputs: Any) -> Any:
        """
        Run a calculator by name

        config and rate tables are injected when the formula accepts them and
        the caller did not pass them explicitly.

        Args:
            name: Registered calculator name, e.g. "position_size"
            **inputs: Keyword inputs of the formula

        Returns:
            The formula's result record or a CalculationFailure

        Raises:
            UnknownCalculatorError: If no calculator has that name
        """
        func = self._registry.get(name)
        if func is None:
            logger.error("Unknown calculator requested", calculator=name)
            raise UnknownCalculatorError(f"Unknown calculator: {name}", calculator=name)

        parameters = inspect.signature(func).parameters
        if "config" in parameters:
            inputs.setdefault("config", self.config)
        if "rates" in parameters and inputs.get("rates") is None:
            inputs["rates"] = self.currency_rates if name == "convert_with_table" else self.rates

        try:
            bound = inspect.signature(func).bind(**inputs)
        except TypeError as e:
            # Missing or unexpected form fields
            logger.warning("Calculator called with bad arguments", calculator=name, error=str(e))
            return CalculationFailure(
                calculator=name,
                kind=FailureKind.INVALID_INPUT,
                message=str(e),
                context={"inputs": sorted(k for k in inputs if k not in ("config", "rates"))},
            )

        return func(*bound.args, **bound.kwargs)

    def reference_price(self, instrument: str) -> float:
        """Reference price from the injected rate table (default for missing symbols)"""
        return self.rates.price(instrument)
