"""Tests for the ForexCalculator facade"""

import pytest

from fxcalc_app.config.loader import ConfigLoader
from fxcalc_app.errors import UnknownCalculatorError
from fxcalc_app.formulas.calculator import ForexCalculator
from fxcalc_app.models.results import FailureKind, PositionSizeResult, is_failure


class TestForexCalculator:
    """Test named dispatch"""

    def test_available_calculators(self, calculator):
        names = calculator.available_calculators()
        assert "position_size" in names
        assert "pivot_points" in names
        assert "convert_time_zone" in names
        assert names == sorted(names)

    def test_calculate_by_name(self, calculator):
        result = calculator.calculate("position_size", balance=10000, risk_percent=2, stop_loss_pips=50)
        assert isinstance(result, PositionSizeResult)
        assert result.lot_size == pytest.approx(0.4)

    def test_injects_rate_table(self, calculator):
        result = calculator.calculate("margin_for_instrument", lots=1, instrument="XAU/USD", leverage="1:100")
        assert result.margin == pytest.approx(2350 * 100000 / 100)

    def test_injects_currency_rates(self, calculator):
        result = calculator.calculate("convert_with_table", amount=100, from_currency="USD", to_currency="EUR")
        assert result.amount == pytest.approx(92.0)

    def test_plain_dict_tables(self):
        calculator = ForexCalculator(rates={"XAU/USD": 2000.0}, currency_rates={"USD": 1.0, "CHF": 0.9})
        margin = calculator.calculate("margin_for_instrument", lots=1, instrument="XAUUSD", leverage=100)
        assert margin.margin == pytest.approx(2000 * 100000 / 100)
        converted = calculator.calculate("convert_with_table", amount=10, from_currency="USD", to_currency="CHF")
        assert converted.amount == pytest.approx(9.0)

    def test_injects_config(self, tmp_path):
        config = ConfigLoader.create(tmp_path).build_config({"lots": {"max_lot": 5.0}})
        calculator = ForexCalculator(config=config)
        result = calculator.calculate("position_size", balance=1_000_000, risk_percent=5, stop_loss_pips=10)
        assert result.lot_size == 5.0
        assert result.lot_clamped is True

    def test_unknown_calculator_raises(self, calculator):
        with pytest.raises(UnknownCalculatorError) as exc_info:
            calculator.calculate("martingale")
        assert exc_info.value.calculator == "martingale"

    def test_missing_inputs_are_a_failure(self, calculator):
        result = calculator.calculate("position_size", balance=10000)
        assert is_failure(result)
        assert result.kind == FailureKind.INVALID_INPUT

    def test_reference_price(self, calculator):
        assert calculator.reference_price("EUR/USD") == 1.0850
        assert calculator.reference_price("GBP/CHF") == 1.0

    def test_repeated_calls_are_identical(self, calculator):
        first = calculator.calculate("pivot_points", high=1.1, low=1.08, close=1.09)
        second = calculator.calculate("pivot_points", high=1.1, low=1.08, close=1.09)
        assert first == second
