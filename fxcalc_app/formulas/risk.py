"""Position sizing, drawdown, margin and leverage"""

from typing import Mapping, Optional, Union

from ..config.defaults import DefaultConfig
from ..errors import InvalidInputError
from ..logging.config import get_calculation_logger, log_lot_clamp
from ..models.instruments import Instrument, RateTable
from ..models.results import (
    DrawdownResult,
    LeverageResult,
    MarginLevelResult,
    MarginResult,
    PositionSizeResult,
    RiskPercentageResult,
)
from ..validation.inputs import (
    require_finite,
    require_in_range,
    require_non_negative,
    require_positive,
)
from .boundary import formula, resolve_config

logger = get_calculation_logger(__name__)

LeverageLike = Union[float, int, str]


@formula("position_size")
def position_size(balance: float, risk_percent: float, stop_loss_pips: float,
                  pip_value_per_lot: Optional[float] = None,
                  config: Optional[DefaultConfig] = None) -> PositionSizeResult:
    """
    Lot size that risks a percentage of the balance over a stop distance

    risk_amount = balance * risk_percent / 100
    lot_size = risk_amount / (stop_loss_pips * pip_value_per_lot)

    The lot size is clamped into the configured lot range; raw_lot_size and
    lot_clamped report what happened. A stop of zero pips is rejected rather
    than replaced by a minimum.

    Args:
        balance: Account balance
        risk_percent: Percentage of balance to risk (0-100]
        stop_loss_pips: Stop distance in pips
        pip_value_per_lot: Value of one pip per standard lot (default 10)
        config: Optional configuration

    Returns:
        PositionSizeResult
    """
    cfg = resolve_config(config)
    balance = require_positive("balance", balance)
    risk_percent = require_in_range("risk_percent", risk_percent, 0.0, 100.0)
    risk_percent = require_positive("risk_percent", risk_percent)
    stop_loss_pips = require_positive("stop_loss_pips", stop_loss_pips)
    if pip_value_per_lot is None:
        pip_value_per_lot = cfg.pips.pip_value_per_lot
    pip_value_per_lot = require_positive("pip_value_per_lot", pip_value_per_lot)

    risk_amount = balance * risk_percent / 100
    raw_lot_size = risk_amount / (stop_loss_pips * pip_value_per_lot)

    min_lot, max_lot = cfg.lots.min_lot, cfg.lots.max_lot
    lot_size = min(max(raw_lot_size, min_lot), max_lot)
    clamped = lot_size != raw_lot_size
    if clamped:
        log_lot_clamp(logger, raw_lot_size, lot_size, min_lot, max_lot)

    return PositionSizeResult(
        lot_size=lot_size,
        risk_amount=risk_amount,
        raw_lot_size=raw_lot_size,
        lot_clamped=clamped,
    )


@formula("risk_percentage")
def risk_percentage(balance: float, risk_amount: float) -> RiskPercentageResult:
    """Percentage of the balance that a risk amount represents"""
    balance = require_positive("balance", balance)
    risk_amount = require_non_negative("risk_amount", risk_amount)
    return RiskPercentageResult(percent=risk_amount / balance * 100)


@formula("max_drawdown")
def max_drawdown(peak_balance: float, current_balance: float) -> DrawdownResult:
    """
    Decline from a peak balance to the current balance

    A non-positive peak, or a current balance at or above the peak, is
    reported as zero drawdown.
    """
    peak_balance = require_finite("peak_balance", peak_balance)
    current_balance = require_finite("current_balance", current_balance)

    if peak_balance <= 0 or current_balance >= peak_balance:
        return DrawdownResult(percent=0.0, amount=0.0)

    amount = peak_balance - current_balance
    return DrawdownResult(percent=amount / peak_balance * 100, amount=amount)


@formula("margin_level")
def margin_level(equity: float, used_margin: float) -> MarginLevelResult:
    """
    Margin level percentage and free margin

    With no margin in use the level is unbounded and reported as
    level_percent=None.
    """
    equity = require_finite("equity", equity)
    used_margin = require_non_negative("used_margin", used_margin)

    free_margin = equity - used_margin
    if used_margin == 0:
        return MarginLevelResult(level_percent=None, free_margin=free_margin)

    return MarginLevelResult(
        level_percent=equity / used_margin * 100,
        free_margin=free_margin,
    )


def parse_leverage(leverage: LeverageLike) -> float:
    """
    Parse a leverage given as a number, "100" or a "1:100" ratio

    Raises:
        InvalidInputError: If the value cannot be parsed or is not positive
    """
    if isinstance(leverage, str):
        text = leverage.strip()
        if ":" in text:
            left, _, right = text.partition(":")
            try:
                ratio = float(right) / float(left)
            except (ValueError, ZeroDivisionError):
                raise InvalidInputError(
                    f"Invalid leverage ratio: {leverage!r}", field="leverage", value=leverage
                ) from None
        else:
            try:
                ratio = float(text)
            except ValueError:
                raise InvalidInputError(
                    f"Invalid leverage: {leverage!r}", field="leverage", value=leverage
                ) from None
        return require_positive("leverage", ratio)

    return require_positive("leverage", leverage)


@formula("margin_required")
def margin_required(lots: float, reference_price: float, leverage: LeverageLike,
                    config: Optional[DefaultConfig] = None) -> MarginResult:
    """
    Margin needed to open a position

    margin = lots * contract_size * reference_price / leverage
    """
    params = resolve_config(config).lots
    lots = require_non_negative("lots", lots)
    reference_price = require_positive("reference_price", reference_price)
    leverage_value = parse_leverage(leverage)

    notional = lots * params.contract_size * reference_price
    return MarginResult(
        margin=notional / leverage_value,
        notional=notional,
        leverage=leverage_value,
    )


@formula("margin_for_instrument")
def margin_for_instrument(lots: float, instrument: Union[Instrument, str],
                          leverage: LeverageLike, rates: Optional[Mapping[str, float]] = None,
                          config: Optional[DefaultConfig] = None) -> MarginResult:
    """
    Margin for an instrument using its reference price from a rate table

    The table is read only; symbols it lacks use the table default (1.0).
    Without a table the built-in static prices are used.
    """
    cfg = resolve_config(config)
    if rates is None:
        rates = RateTable(cfg.rates.instrument_prices, default=cfg.rates.missing_rate_default)
    else:
        rates = RateTable.coerce(rates, default=cfg.rates.missing_rate_default)
    reference_price = rates.price(instrument)
    return margin_required(lots, reference_price, leverage, config=cfg)


@formula("effective_leverage")
def effective_leverage(position_value: float, equity: float) -> LeverageResult:
    """Leverage actually in use: position value over equity"""
    position_value = require_non_negative("position_value", position_value)
    equity = require_positive("equity", equity)

    ratio = position_value / equity
    return LeverageResult(leverage=ratio, ratio_label=f"1:{ratio:g}")
