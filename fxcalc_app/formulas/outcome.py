"""Trade outcome: profit/loss, break-even, spread, commission, swap and total cost"""

from typing import Optional, Union

from ..config.defaults import DefaultConfig
from ..errors import InvalidInputError
from ..models.instruments import Direction, Instrument
from ..models.results import (
    BreakEvenResult,
    CommissionResult,
    ProfitLossResult,
    RiskRewardResult,
    SpreadCostResult,
    SwapResult,
    TradeCostResult,
)
from ..validation.inputs import (
    require_finite,
    require_non_negative,
    require_nonzero_denominator,
    require_positive,
)
from .boundary import formula, resolve_config
from .pips import pip_size, pip_value_per_lot

InstrumentLike = Union[Instrument, str]


@formula("profit_loss")
def profit_loss(entry: float, exit: float, lots: float, direction: Union[Direction, str],
                instrument: InstrumentLike, config: Optional[DefaultConfig] = None) -> ProfitLossResult:
    """
    Pips and profit of a closed trade

    pips = (exit - entry) / pip_size for a buy, negated for a sell
    profit = pips * pip value per lot * lots

    Args:
        entry: Entry price
        exit: Exit price
        lots: Position size in standard lots
        direction: "buy"/"sell" (or "long"/"short")
        instrument: Instrument or symbol
        config: Optional configuration

    Returns:
        ProfitLossResult
    """
    cfg = resolve_config(config)
    entry = require_positive("entry", entry)
    exit = require_positive("exit", exit)
    lots = require_non_negative("lots", lots)
    side = Direction.parse(direction)

    pips = side.sign * (exit - entry) / pip_size(instrument, cfg)
    profit = pips * pip_value_per_lot(instrument, cfg) * lots

    return ProfitLossResult(pips=pips, profit=profit)


@formula("break_even_price")
def break_even_price(entry: float, spread_pips: float, commission_per_lot: float,
                     direction: Union[Direction, str] = Direction.BUY,
                     instrument: InstrumentLike = "EUR/USD",
                     config: Optional[DefaultConfig] = None) -> BreakEvenResult:
    """
    Price at which a trade covers its spread and commission

    Commission is converted to pips through the per-lot pip value, so the
    result does not depend on position size. A buy breaks even above the
    entry, a sell below it.
    """
    cfg = resolve_config(config)
    entry = require_positive("entry", entry)
    spread_pips = require_non_negative("spread_pips", spread_pips)
    commission_per_lot = require_non_negative("commission_per_lot", commission_per_lot)
    side = Direction.parse(direction)

    cost_pips = spread_pips + commission_per_lot / pip_value_per_lot(instrument, cfg)
    price = entry + side.sign * cost_pips * pip_size(instrument, cfg)

    return BreakEvenResult(price=price, cost_pips=cost_pips)


@formula("spread_cost")
def spread_cost(bid: float, ask: float, instrument: InstrumentLike, lots: float,
                config: Optional[DefaultConfig] = None) -> SpreadCostResult:
    """Spread in pips and what it costs for a position size"""
    cfg = resolve_config(config)
    bid = require_positive("bid", bid)
    ask = require_positive("ask", ask)
    lots = require_non_negative("lots", lots)
    if ask < bid:
        raise InvalidInputError(
            f"ask ({ask}) is below bid ({bid})",
            field="ask",
            value=ask,
        )

    pips = (ask - bid) / pip_size(instrument, cfg)
    return SpreadCostResult(pips=pips, cost=pips * pip_value_per_lot(instrument, cfg) * lots)


@formula("commission_cost")
def commission_cost(lots: float, rate_per_lot: float, num_trades: float = 1) -> CommissionResult:
    lots = require_non_negative("lots", lots)
    rate_per_lot = require_non_negative("rate_per_lot", rate_per_lot)
    num_trades = require_non_negative("num_trades", num_trades)

    per_trade = lots * rate_per_lot
    return CommissionResult(per_trade=per_trade, total=per_trade * num_trades)


@formula("swap_cost")
def swap_cost(lots: float, swap_long: float, swap_short: float,
              holding_days: float = 1) -> SwapResult:
    """
    Overnight swap for long and short positions

    Swap rates are per lot per day; negative rates are charges.
    """
    lots = require_non_negative("lots", lots)
    swap_long = require_finite("swap_long", swap_long)
    swap_short = require_finite("swap_short", swap_short)
    holding_days = require_non_negative("holding_days", holding_days)

    return SwapResult(
        long_swap=swap_long * lots * holding_days,
        short_swap=swap_short * lots * holding_days,
    )


@formula("trade_cost")
def trade_cost(lots: float, spread_pips: float, commission_per_lot: float,
               swap_per_lot_per_day: float = 0.0, holding_days: float = 0.0,
               instrument: InstrumentLike = "EUR/USD",
               config: Optional[DefaultConfig] = None) -> TradeCostResult:
    """
    Total cost of holding a position

    spread and commission are costs; swap is the signed swap amount
    (negative when charged), so total = spread + commission - swap.
    """
    cfg = resolve_config(config)
    lots = require_non_negative("lots", lots)
    spread_pips = require_non_negative("spread_pips", spread_pips)
    commission_per_lot = require_non_negative("commission_per_lot", commission_per_lot)
    swap_per_lot_per_day = require_finite("swap_per_lot_per_day", swap_per_lot_per_day)
    holding_days = require_non_negative("holding_days", holding_days)

    spread = spread_pips * pip_value_per_lot(instrument, cfg) * lots
    commission = commission_per_lot * lots
    swap = swap_per_lot_per_day * lots * holding_days

    return TradeCostResult(
        spread=spread,
        commission=commission,
        swap=swap,
        total=spread + commission - swap,
    )


@formula("risk_reward")
def risk_reward(entry: float, stop_loss: float, take_profit: float,
                instrument: InstrumentLike = "EUR/USD",
                config: Optional[DefaultConfig] = None) -> RiskRewardResult:
    """Reward to risk ratio with both legs measured in pips"""
    cfg = resolve_config(config)
    entry = require_positive("entry", entry)
    stop_loss = require_positive("stop_loss", stop_loss)
    take_profit = require_positive("take_profit", take_profit)

    size = pip_size(instrument, cfg)
    risk_pips = abs(entry - stop_loss) / size
    reward_pips = abs(take_profit - entry) / size
    require_nonzero_denominator("risk_pips", risk_pips)

    return RiskRewardResult(
        ratio=reward_pips / risk_pips,
        risk_pips=risk_pips,
        reward_pips=reward_pips,
    )
