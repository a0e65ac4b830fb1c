"""Tests for position sizing, drawdown, margin and leverage"""

import math

import pytest

from fxcalc_app.errors import InvalidInputError
from fxcalc_app.formulas.risk import (
    effective_leverage,
    margin_for_instrument,
    margin_level,
    margin_required,
    max_drawdown,
    parse_leverage,
    position_size,
    risk_percentage,
)
from fxcalc_app.models.results import FailureKind, is_failure


class TestPositionSize:
    """Test position size calculation"""

    def test_reference_case(self):
        result = position_size(10000, 2, 50)
        assert result.risk_amount == pytest.approx(200.0)
        assert result.lot_size == pytest.approx(0.40)
        assert result.lot_clamped is False

    def test_clamped_to_minimum_lot(self):
        result = position_size(100, 1, 500)
        assert result.raw_lot_size == pytest.approx(0.0002)
        assert result.lot_size == 0.01
        assert result.lot_clamped is True

    def test_clamped_to_maximum_lot(self):
        result = position_size(10_000_000, 10, 1)
        assert result.lot_size == 100.0
        assert result.lot_clamped is True

    def test_custom_pip_value(self):
        result = position_size(10000, 1, 20, pip_value_per_lot=5)
        assert result.lot_size == pytest.approx(1.0)

    @pytest.mark.parametrize("stop_loss_pips", [0, -10])
    def test_non_positive_stop_is_invalid(self, stop_loss_pips):
        result = position_size(10000, 2, stop_loss_pips)
        assert is_failure(result)
        assert result.kind == FailureKind.INVALID_INPUT
        assert result.context["field"] == "stop_loss_pips"

    def test_nan_balance_is_invalid(self):
        assert is_failure(position_size(math.nan, 2, 50))

    def test_risk_above_hundred_percent_is_invalid(self):
        assert is_failure(position_size(10000, 150, 50))

    def test_idempotent(self):
        assert position_size(5000, 1.5, 35) == position_size(5000, 1.5, 35)


class TestRiskPercentage:
    """Test risk percentage calculation"""

    def test_inverse_of_position_risk(self):
        assert risk_percentage(10000, 200).percent == pytest.approx(2.0)

    def test_zero_balance_is_invalid(self):
        assert is_failure(risk_percentage(0, 200))


class TestMaxDrawdown:
    """Test drawdown calculation"""

    def test_drawdown(self):
        result = max_drawdown(12000, 9000)
        assert result.amount == pytest.approx(3000.0)
        assert result.percent == pytest.approx(25.0)

    def test_current_above_peak_is_zero(self):
        result = max_drawdown(10000, 11000)
        assert result.amount == 0.0
        assert result.percent == 0.0

    def test_negative_peak_is_zero(self):
        result = max_drawdown(-500, -1000)
        assert result.amount == 0.0
        assert result.percent == 0.0


class TestMarginLevel:
    """Test margin level calculation"""

    def test_margin_level(self):
        result = margin_level(2000, 500)
        assert result.level_percent == pytest.approx(400.0)
        assert result.free_margin == pytest.approx(1500.0)

    def test_zero_used_margin_returns_sentinel(self):
        result = margin_level(1000, 0)
        assert not is_failure(result)
        assert result.level_percent is None
        assert result.is_unbounded
        assert result.free_margin == 1000.0

    def test_negative_used_margin_is_invalid(self):
        assert is_failure(margin_level(1000, -5))


class TestMargin:
    """Test margin requirement and leverage parsing"""

    def test_margin_required(self):
        result = margin_required(1, 1.0850, 100)
        assert result.notional == pytest.approx(108500.0)
        assert result.margin == pytest.approx(1085.0)

    def test_margin_required_with_ratio_string(self):
        result = margin_required(0.5, 1.2, "1:200")
        assert result.leverage == 200.0
        assert result.margin == pytest.approx(300.0)

    @pytest.mark.parametrize("value,expected", [("1:100", 100.0), ("500", 500.0), (50, 50.0)])
    def test_parse_leverage(self, value, expected):
        assert parse_leverage(value) == expected

    @pytest.mark.parametrize("value", ["abc", "1:0", "0:100", 0, -10])
    def test_parse_leverage_rejects_bad_values(self, value):
        with pytest.raises(InvalidInputError):
            parse_leverage(value)

    def test_zero_leverage_is_failure(self):
        assert is_failure(margin_required(1, 1.0850, 0))

    def test_margin_for_instrument_reads_rate_table(self, rate_table):
        result = margin_for_instrument(1, "XAU/USD", "1:100", rates=rate_table)
        assert result.margin == pytest.approx(100000 * 2350.0 / 100)

    def test_margin_for_instrument_missing_rate_defaults_to_one(self, rate_table):
        result = margin_for_instrument(1, "NZD/CAD", 100, rates=rate_table)
        assert result.margin == pytest.approx(1000.0)

    def test_margin_for_instrument_uses_static_prices_without_table(self):
        result = margin_for_instrument(1, "EUR/USD", 100)
        assert result.margin == pytest.approx(1085.0)

    def test_margin_for_instrument_accepts_plain_dict(self):
        result = margin_for_instrument(1, "EUR/USD", 100, rates={"EURUSD": 1.2})
        assert result.margin == pytest.approx(1200.0)

    def test_margin_for_instrument_rejects_non_mapping_rates(self):
        result = margin_for_instrument(1, "EUR/USD", 100, rates=[1.2])
        assert is_failure(result)
        assert result.kind == FailureKind.INVALID_INPUT


class TestEffectiveLeverage:
    """Test effective leverage"""

    def test_leverage_ratio(self):
        result = effective_leverage(50000, 5000)
        assert result.leverage == pytest.approx(10.0)
        assert result.ratio_label == "1:10"

    def test_zero_equity_is_invalid(self):
        assert is_failure(effective_leverage(50000, 0))
