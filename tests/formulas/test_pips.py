"""Tests for pip size, pip value and lot conversion"""

import math

import pytest

from fxcalc_app.errors import InvalidInputError
from fxcalc_app.formulas.pips import lots_to_units, pip_size, pip_value, units_to_lots
from fxcalc_app.models.results import FailureKind, LotUnits, PipValueResult, is_failure


class TestPipSize:
    """Test pip size resolution"""

    @pytest.mark.parametrize("symbol", ["USD/JPY", "EUR/JPY", "GBPJPY", "cad-jpy"])
    def test_jpy_quoted_pairs(self, symbol):
        assert pip_size(symbol) == 0.01

    def test_gold_is_priced_in_whole_units(self):
        assert pip_size("XAU/USD") == 1.0

    @pytest.mark.parametrize("symbol", ["EUR/USD", "GBP/USD", "AUD/NZD", "XAG/USD"])
    def test_standard_pairs(self, symbol):
        assert pip_size(symbol) == 0.0001

    def test_jpy_as_base_is_not_jpy_quoted(self):
        """Only the quote currency decides the JPY pip size"""
        assert pip_size("JPY/USD") == 0.0001

    def test_always_one_of_three_values(self):
        symbols = ["EUR/USD", "USD/JPY", "XAU/USD", "BTC/USD", "SOMETHING"]
        for symbol in symbols:
            assert pip_size(symbol) in {0.01, 1.0, 0.0001}
            assert pip_size(symbol) != 0

    def test_deterministic(self):
        assert pip_size("GBP/JPY") == pip_size("GBP/JPY")

    def test_empty_symbol_raises(self):
        with pytest.raises(InvalidInputError):
            pip_size("")


class TestPipValue:
    """Test pip value calculation"""

    def test_standard_lot_usd_account(self):
        result = pip_value("EUR/USD", 1)
        assert isinstance(result, PipValueResult)
        assert result.pip_value == 10.0
        assert result.per_lot == 10.0

    def test_jpy_pair_constant(self):
        result = pip_value("USD/JPY", 2)
        assert result.pip_value == pytest.approx(20.0)

    def test_account_currency_factor(self):
        assert pip_value("EUR/USD", 1, "EUR").pip_value == pytest.approx(9.2)
        assert pip_value("EUR/USD", 1, "GBP").pip_value == pytest.approx(7.9)
        assert pip_value("EUR/USD", 1, "JPY").pip_value == pytest.approx(1495.0)

    def test_unknown_account_currency_uses_factor_one(self):
        assert pip_value("EUR/USD", 0.5, "CHF").pip_value == pytest.approx(5.0)

    @pytest.mark.parametrize("currency", [5, 1.0, ["EUR"]])
    def test_non_string_account_currency_is_invalid(self, currency):
        result = pip_value("EUR/USD", 1, account_currency=currency)
        assert is_failure(result)
        assert result.kind == FailureKind.INVALID_INPUT

    def test_missing_account_currency_is_usd(self):
        assert pip_value("EUR/USD", 1, account_currency=None).account_currency == "USD"

    def test_non_finite_lots_is_failure(self):
        result = pip_value("EUR/USD", math.nan)
        assert is_failure(result)
        assert result.kind == FailureKind.INVALID_INPUT
        assert result.calculator == "pip_value"

    def test_negative_lots_is_failure(self):
        assert is_failure(pip_value("EUR/USD", -1))


class TestLotConversion:
    """Test lot to unit conversion"""

    def test_lots_to_units(self):
        result = lots_to_units(1.5)
        assert result == LotUnits(lots=1.5, units=150000.0, mini=15.0, micro=150.0)

    def test_units_to_lots(self):
        result = units_to_lots(25000)
        assert result.lots == pytest.approx(0.25)
        assert result.mini == pytest.approx(2.5)
        assert result.micro == pytest.approx(25.0)

    def test_infinite_lots_is_failure(self):
        result = lots_to_units(math.inf)
        assert is_failure(result)
        assert result.kind == FailureKind.INVALID_INPUT
