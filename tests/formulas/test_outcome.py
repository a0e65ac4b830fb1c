"""Tests for trade outcome formulas"""

import pytest

from fxcalc_app.formulas.outcome import (
    break_even_price,
    commission_cost,
    profit_loss,
    risk_reward,
    spread_cost,
    swap_cost,
    trade_cost,
)
from fxcalc_app.models.instruments import Direction
from fxcalc_app.models.results import FailureKind, is_failure


class TestProfitLoss:
    """Test profit/loss calculation"""

    def test_long_winner(self):
        result = profit_loss(entry=1.0850, exit=1.0900, lots=1, direction="buy", instrument="EUR/USD")
        assert result.pips == pytest.approx(50.0)
        assert result.profit == pytest.approx(500.0)

    def test_short_is_negated(self):
        result = profit_loss(1.0850, 1.0900, 1, Direction.SELL, "EUR/USD")
        assert result.pips == pytest.approx(-50.0)
        assert result.profit == pytest.approx(-500.0)

    def test_jpy_pair_uses_jpy_pip(self):
        result = profit_loss(149.50, 150.00, 0.5, "long", "USD/JPY")
        assert result.pips == pytest.approx(50.0)
        assert result.profit == pytest.approx(250.0)

    def test_negative_lots_is_invalid(self):
        result = profit_loss(1.0850, 1.0900, -1, "buy", "EUR/USD")
        assert is_failure(result)
        assert result.kind == FailureKind.INVALID_INPUT

    def test_unknown_direction_is_invalid(self):
        assert is_failure(profit_loss(1.0850, 1.0900, 1, "sideways", "EUR/USD"))

    @pytest.mark.parametrize("instrument", ["/", " - "])
    def test_symbol_without_codes_is_invalid(self, instrument):
        result = profit_loss(1.0850, 1.0900, 1, "buy", instrument)
        assert is_failure(result)
        assert result.kind == FailureKind.INVALID_INPUT


class TestBreakEven:
    """Test break-even price"""

    def test_buy_breaks_even_above_entry(self):
        result = break_even_price(1.0850, spread_pips=1.5, commission_per_lot=7)
        assert result.cost_pips == pytest.approx(2.2)
        assert result.price == pytest.approx(1.0850 + 2.2 * 0.0001)

    def test_sell_breaks_even_below_entry(self):
        result = break_even_price(1.0850, 1.5, 7, direction="sell")
        assert result.price == pytest.approx(1.0850 - 2.2 * 0.0001)

    def test_negative_commission_is_invalid(self):
        assert is_failure(break_even_price(1.0850, 1.5, -7))


class TestSpreadAndCommission:
    """Test spread and commission costs"""

    def test_spread_cost(self):
        result = spread_cost(bid=1.0850, ask=1.0852, instrument="EUR/USD", lots=2)
        assert result.pips == pytest.approx(2.0)
        assert result.cost == pytest.approx(40.0)

    def test_inverted_quote_is_invalid(self):
        result = spread_cost(1.0852, 1.0850, "EUR/USD", 1)
        assert is_failure(result)
        assert result.kind == FailureKind.INVALID_INPUT

    def test_commission_cost(self):
        result = commission_cost(lots=2, rate_per_lot=3.5, num_trades=4)
        assert result.per_trade == pytest.approx(7.0)
        assert result.total == pytest.approx(28.0)

    def test_negative_lots_commission_is_invalid(self):
        assert is_failure(commission_cost(-1, 3.5))


class TestSwapAndTradeCost:
    """Test swap and aggregated trade cost"""

    def test_swap_cost(self):
        result = swap_cost(lots=2, swap_long=0.5, swap_short=-2.3, holding_days=3)
        assert result.long_swap == pytest.approx(3.0)
        assert result.short_swap == pytest.approx(-13.8)

    def test_trade_cost_aggregates(self):
        result = trade_cost(lots=1, spread_pips=1.2, commission_per_lot=7,
                            swap_per_lot_per_day=-2.0, holding_days=2)
        assert result.spread == pytest.approx(12.0)
        assert result.commission == pytest.approx(7.0)
        assert result.swap == pytest.approx(-4.0)
        assert result.total == pytest.approx(23.0)


class TestRiskReward:
    """Test risk/reward ratio"""

    def test_ratio(self):
        result = risk_reward(entry=1.0850, stop_loss=1.0800, take_profit=1.0950)
        assert result.risk_pips == pytest.approx(50.0)
        assert result.reward_pips == pytest.approx(100.0)
        assert result.ratio == pytest.approx(2.0)

    def test_zero_risk_is_degenerate(self):
        result = risk_reward(1.0850, 1.0850, 1.0950)
        assert is_failure(result)
        assert result.kind == FailureKind.DEGENERATE_CASE
