"""
Instrument, direction and rate table models.

Instruments are parsed from the symbols a form hands over ("EUR/USD",
"EURUSD", "eur-usd"). Rate tables are injected, read-only price mappings;
formulas read them but never fetch or mutate them.
"""

import math
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Union

import yaml

from ..errors import InvalidInputError, NegativeInputError, NonFiniteInputError

_SEPARATORS = re.compile(r"[/\-_\s.]+")


class Direction(str, Enum):
    """Trade direction."""
    BUY = "buy"
    SELL = "sell"

    @classmethod
    def parse(cls, value: Union["Direction", str]) -> "Direction":
        """Parse a direction, accepting long/short aliases."""
        if isinstance(value, Direction):
            return value
        normalized = str(value).strip().lower()
        if normalized in ("buy", "long"):
            return cls.BUY
        if normalized in ("sell", "short"):
            return cls.SELL
        raise InvalidInputError(
            f"Unknown trade direction: {value!r}",
            field="direction",
            value=value,
        )

    @property
    def sign(self) -> int:
        return 1 if self is Direction.BUY else -1


@dataclass(frozen=True)
class Instrument:
    """A currency pair or asset quoted against another currency."""
    base: str
    quote: str

    @classmethod
    def parse(cls, value: Union["Instrument", str]) -> "Instrument":
        """
        Parse an instrument symbol.

        Six-letter symbols without a separator are split 3/3. A symbol that
        cannot be split is kept as a base with an empty quote so pip size
        resolution still has something to work with.

        Raises:
            InvalidInputError: If the symbol is empty or not a string
        """
        if isinstance(value, Instrument):
            return value
        if not isinstance(value, str) or not value.strip():
            raise InvalidInputError(
                f"Instrument symbol must be a non-empty string, got {value!r}",
                field="instrument",
                value=value,
            )

        parts = [p for p in _SEPARATORS.split(value.strip().upper()) if p]
        if not parts:
            raise InvalidInputError(
                f"Instrument symbol has no currency codes: {value!r}",
                field="instrument",
                value=value,
            )
        if len(parts) >= 2:
            return cls(base=parts[0], quote=parts[1])

        token = parts[0]
        if len(token) == 6 and token.isalpha():
            return cls(base=token[:3], quote=token[3:])
        return cls(base=token, quote="")

    @property
    def symbol(self) -> str:
        return f"{self.base}/{self.quote}" if self.quote else self.base

    @property
    def is_jpy_quoted(self) -> bool:
        return self.quote == "JPY"

    def is_whole_unit_metal(self, metals: tuple[str, ...] = ("XAU",)) -> bool:
        """True for metals priced in whole-dollar increments."""
        return self.base in metals

    def __str__(self) -> str:
        return self.symbol


def normalize_symbol(symbol: str) -> str:
    """Normalize a pair or currency code to its canonical table key."""
    instrument = Instrument.parse(symbol)
    return instrument.symbol


class RateTable(Mapping):
    """
    Read-only mapping from instrument or currency symbol to a price.

    Missing entries fall back to ``default`` through price(); plain
    ``table[key]`` lookups still raise KeyError like any mapping.
    """

    def __init__(self, prices: Mapping[str, float], default: float = 1.0):
        normalized = {}
        for symbol, price in prices.items():
            if not isinstance(price, (int, float)) or isinstance(price, bool) \
                    or math.isnan(price) or math.isinf(price):
                raise NonFiniteInputError(
                    f"Rate for {symbol} must be a finite number, got {price!r}",
                    field=str(symbol),
                    value=price,
                )
            if price <= 0:
                raise NegativeInputError(
                    f"Rate for {symbol} must be positive, got {price}",
                    field=str(symbol),
                    value=price,
                )
            normalized[normalize_symbol(symbol)] = float(price)

        self._prices = MappingProxyType(normalized)
        self.default = float(default)

    @classmethod
    def from_mapping(cls, prices: Mapping[str, float], default: float = 1.0) -> "RateTable":
        return cls(prices, default=default)

    @classmethod
    def coerce(cls, rates: Mapping[str, float], default: float = 1.0) -> "RateTable":
        """Use a RateTable as is and wrap any other mapping of symbol to price."""
        if isinstance(rates, RateTable):
            return rates
        if not isinstance(rates, Mapping):
            raise InvalidInputError(
                f"Rates must be a mapping of symbol to price, got {type(rates).__name__}",
                field="rates",
                value=rates,
            )
        return cls(rates, default=default)

    @classmethod
    def from_yaml(cls, path: Union[str, Path], default: float = 1.0) -> "RateTable":
        """Load a rate table from a YAML file (flat or under a ``rates`` key)."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(data.get("rates", data), default=default)

    def price(self, symbol: Union[Instrument, str]) -> float:
        """Price for a symbol, or the table default if it is missing."""
        key = Instrument.parse(symbol).symbol
        return self._prices.get(key, self.default)

    def __getitem__(self, key: str) -> float:
        return self._prices[normalize_symbol(key)]

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (str, Instrument)):
            return False
        try:
            return Instrument.parse(key).symbol in self._prices
        except InvalidInputError:
            return False

    def __iter__(self) -> Iterator[str]:
        return iter(self._prices)

    def __len__(self) -> int:
        return len(self._prices)

    def __repr__(self) -> str:
        return f"RateTable({dict(self._prices)!r}, default={self.default})"
