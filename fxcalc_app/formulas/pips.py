"""Pip size, pip value and lot conversion"""

from typing import Optional, Union

from ..config.defaults import DefaultConfig
from ..errors import InvalidInputError
from ..models.instruments import Instrument
from ..models.results import LotUnits, PipValueResult
from ..validation.inputs import require_non_negative
from .boundary import formula, resolve_config

InstrumentLike = Union[Instrument, str]


def pip_size(instrument: InstrumentLike, config: Optional[DefaultConfig] = None) -> float:
    """
    Smallest standardized price increment for an instrument

    0.01 for JPY-quoted pairs, 1 for metals priced in whole units (gold),
    0.0001 otherwise. Depends on the symbol only.

    Args:
        instrument: Instrument or symbol such as "EUR/USD"
        config: Optional configuration

    Returns:
        Pip size, never zero

    Raises:
        InvalidInputError: If the symbol is empty
    """
    params = resolve_config(config).pips
    parsed = Instrument.parse(instrument)

    if parsed.is_jpy_quoted:
        return params.jpy_pip_size
    if parsed.is_whole_unit_metal(params.whole_unit_metals):
        return params.metal_pip_size
    return params.standard_pip_size


def pip_value_per_lot(instrument: InstrumentLike, config: Optional[DefaultConfig] = None) -> float:
    """Account-currency-neutral value of one pip on one standard lot"""
    params = resolve_config(config).pips
    if Instrument.parse(instrument).is_jpy_quoted:
        return params.jpy_pip_value_per_lot
    return params.pip_value_per_lot


@formula("pip_value")
def pip_value(instrument: InstrumentLike, lots: float, account_currency: str = "USD",
              config: Optional[DefaultConfig] = None) -> PipValueResult:
    """
    Value of one pip for a position

    pip_value = lots * per-lot constant, scaled by a static USD to account
    currency factor (1.0 for currencies without a factor).

    Args:
        instrument: Instrument or symbol
        lots: Position size in standard lots
        account_currency: Currency the result is expressed in
        config: Optional configuration

    Returns:
        PipValueResult
    """
    cfg = resolve_config(config)
    lots = require_non_negative("lots", lots)

    if account_currency is None:
        account_currency = "USD"
    if not isinstance(account_currency, str):
        raise InvalidInputError(
            f"Account currency must be a currency code, got {account_currency!r}",
            field="account_currency",
            value=account_currency,
        )
    currency = account_currency.strip().upper() or "USD"
    factor = cfg.account_currency.factors.get(currency, cfg.account_currency.default_factor)
    per_lot = pip_value_per_lot(instrument, cfg) * factor

    return PipValueResult(
        pip_value=lots * per_lot,
        per_lot=per_lot,
        account_currency=currency,
    )


@formula("lots_to_units")
def lots_to_units(lots: float, config: Optional[DefaultConfig] = None) -> LotUnits:
    """Convert standard lots to base currency units, mini lots and micro lots"""
    params = resolve_config(config).lots
    lots = require_non_negative("lots", lots)

    return LotUnits(
        lots=lots,
        units=lots * params.contract_size,
        mini=lots * params.mini_lots_per_lot,
        micro=lots * params.micro_lots_per_lot,
    )


@formula("units_to_lots")
def units_to_lots(units: float, config: Optional[DefaultConfig] = None) -> LotUnits:
    params = resolve_config(config).lots
    units = require_non_negative("units", units)
    lots = units / params.contract_size

    return LotUnits(
        lots=lots,
        units=units,
        mini=lots * params.mini_lots_per_lot,
        micro=lots * params.micro_lots_per_lot,
    )

