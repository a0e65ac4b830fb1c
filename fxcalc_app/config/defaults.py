"""Default configuration parameters for the forex calculators."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PipParams:
    """Pip size and pip value constants."""
    standard_pip_size: float = 0.0001
    jpy_pip_size: float = 0.01
    metal_pip_size: float = 1.0
    whole_unit_metals: tuple[str, ...] = ("XAU",)
    pip_value_per_lot: float = 10.0                  # USD per pip per standard lot
    jpy_pip_value_per_lot: float = 1000.0 / 100.0    # JPY-quoted pairs


@dataclass(frozen=True)
class LotParams:
    """Lot sizing parameters."""
    contract_size: float = 100000.0   # Units per standard lot
    mini_lots_per_lot: float = 10.0
    micro_lots_per_lot: float = 100.0
    min_lot: float = 0.01
    max_lot: float = 100.0


@dataclass(frozen=True)
class AccountCurrencyParams:
    """Static USD -> account currency factors for pip values."""
    factors: dict[str, float] = field(default_factory=lambda: {
        "USD": 1.0,
        "EUR": 0.92,
        "GBP": 0.79,
        "JPY": 149.5,
    })
    default_factor: float = 1.0


@dataclass(frozen=True)
class IndicatorParams:
    """Technical indicator parameters."""
    min_series_length: int = 2
    bollinger_std_dev_multiplier: float = 2.0
    fibonacci_levels: tuple[float, ...] = (0.0, 23.6, 38.2, 50.0, 61.8, 78.6, 100.0)
    fibonacci_extensions: tuple[float, ...] = (100.0, 127.2, 161.8, 200.0, 261.8)


@dataclass(frozen=True)
class RiskParams:
    """Money management parameters."""
    var_z_scores: dict[float, float] = field(default_factory=lambda: {
        95.0: 1.645,
        99.0: 2.326,
    })
    var_default_z_score: float = 1.96
    months_per_year: int = 12


@dataclass(frozen=True)
class RateParams:
    """Static reference prices used when no fetched rate table is supplied."""
    missing_rate_default: float = 1.0
    instrument_prices: dict[str, float] = field(default_factory=lambda: {
        "EUR/USD": 1.0850, "GBP/USD": 1.2650, "USD/JPY": 149.50, "USD/CHF": 0.8850,
        "AUD/USD": 0.6550, "USD/CAD": 1.3650, "NZD/USD": 0.6150, "XAU/USD": 2350.00,
        "BTC/USD": 67500.00, "ETH/USD": 3450.00,
        "EUR/GBP": 0.8580, "EUR/JPY": 162.15, "GBP/JPY": 189.10, "EUR/CHF": 0.9600,
        "AUD/JPY": 97.90, "CAD/JPY": 109.50, "NZD/JPY": 91.90, "EUR/AUD": 1.6550,
        "GBP/AUD": 1.9300, "EUR/CAD": 1.4800, "GBP/CAD": 1.7250, "AUD/CAD": 0.8940,
        "AUD/NZD": 1.0640, "NZD/CAD": 0.8410, "XAG/USD": 30.50,
    })
    currency_rates: dict[str, float] = field(default_factory=lambda: {
        "USD": 1.0, "EUR": 0.92, "GBP": 0.79, "JPY": 149.50,
        "CHF": 0.88, "AUD": 1.53, "CAD": 1.36, "NZD": 1.63,
    })


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    pips: PipParams
    lots: LotParams
    account_currency: AccountCurrencyParams
    indicators: IndicatorParams
    risk: RiskParams
    rates: RateParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        pips=PipParams(),
        lots=LotParams(),
        account_currency=AccountCurrencyParams(),
        indicators=IndicatorParams(),
        risk=RiskParams(),
        rates=RateParams(),
    )
