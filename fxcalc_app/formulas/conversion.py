"""Currency conversion against an injected rate table, and time zone conversion"""

from datetime import time
from typing import Mapping, Optional, Union

from ..config.defaults import DefaultConfig
from ..models.instruments import RateTable
from ..models.results import ConversionResult, TimeZoneResult
from ..validation.inputs import require_finite, require_in_range, require_non_negative, require_positive
from .boundary import formula, resolve_config

MINUTES_PER_DAY = 24 * 60


@formula("convert_currency")
def convert_currency(amount: float, from_rate: float, to_rate: float) -> ConversionResult:
    """
    Convert an amount between two currencies quoted against a common base

    converted = amount * to_rate / from_rate
    """
    amount = require_non_negative("amount", amount)
    from_rate = require_positive("from_rate", from_rate)
    to_rate = require_positive("to_rate", to_rate)

    rate = to_rate / from_rate
    return ConversionResult(amount=amount * rate, rate=rate)


def default_currency_rates(config: Optional[DefaultConfig] = None) -> RateTable:
    """Static per-USD currency rates shipped with the configuration"""
    cfg = resolve_config(config)
    return RateTable(cfg.rates.currency_rates, default=cfg.rates.missing_rate_default)


@formula("convert_with_table")
def convert_with_table(amount: float, from_currency: str, to_currency: str,
                       rates: Optional[Mapping[str, float]] = None,
                       config: Optional[DefaultConfig] = None) -> ConversionResult:
    """
    Convert using currency rates from a rate table

    The table is only read. Currencies it lacks use the table default
    (1.0, i.e. treated as the base currency).
    """
    if rates is None:
        rates = default_currency_rates(config)
    else:
        rates = RateTable.coerce(rates, default=resolve_config(config).rates.missing_rate_default)
    return convert_currency(amount, rates.price(from_currency), rates.price(to_currency))


@formula("convert_time_zone")
def convert_time_zone(time_of_day: Union[time, float], from_offset_hours: float,
                      to_offset_hours: float) -> TimeZoneResult:
    """
    Convert a wall-clock time between two UTC offsets

    Wraps modulo 24 hours in both directions; day_shift counts the calendar
    days crossed (negative when the result falls on the previous day).

    Args:
        time_of_day: datetime.time or an hour of day as a float in [0, 24)
        from_offset_hours: UTC offset of the source zone (fractions allowed)
        to_offset_hours: UTC offset of the target zone

    Returns:
        TimeZoneResult
    """
    from_offset = require_in_range("from_offset_hours", from_offset_hours, -24.0, 24.0)
    to_offset = require_in_range("to_offset_hours", to_offset_hours, -24.0, 24.0)

    if isinstance(time_of_day, time):
        minutes = time_of_day.hour * 60 + time_of_day.minute + time_of_day.second / 60
    else:
        hours = require_finite("time_of_day", time_of_day)
        hours = require_in_range("time_of_day", hours, 0.0, 24.0 - 1e-9)
        minutes = hours * 60

    shifted = minutes + (to_offset - from_offset) * 60
    day_shift, remainder = divmod(shifted, MINUTES_PER_DAY)

    total_seconds = int(round(remainder * 60)) % (MINUTES_PER_DAY * 60)
    hour, rest = divmod(total_seconds, 3600)
    minute, second = divmod(rest, 60)

    return TimeZoneResult(time=time(hour, minute, second), day_shift=int(day_shift))
