#!/usr/bin/env python3
"""
Basic Usage Example - FXCalc Formula Library

This script demonstrates the basic usage of the forex calculators. It shows
how to:
- Call formulas directly
- Handle CalculationFailure results
- Dispatch calculators by name with an injected rate table

Run: python examples/basic_usage.py
"""

from fxcalc_app.formulas import (
    ForexCalculator,
    fibonacci_levels,
    pivot_points,
    position_size,
    profit_loss,
)
from fxcalc_app.logging.config import configure_logging
from fxcalc_app.models.instruments import RateTable
from fxcalc_app.models.results import is_failure


def show_direct_calls() -> None:
    """Call a few formulas directly."""
    size = position_size(balance=10000, risk_percent=2, stop_loss_pips=50)
    print(f"Position size: {size.lot_size:.2f} lots (risking ${size.risk_amount:.2f})")

    trade = profit_loss(entry=1.0850, exit=1.0900, lots=1, direction="buy", instrument="EUR/USD")
    print(f"Profit/loss: {trade.pips:.1f} pips, ${trade.profit:.2f}")

    pivots = pivot_points(high=1.1000, low=1.0800, close=1.0900)
    print(f"Pivot {pivots.pivot:.5f}  R1 {pivots.r1:.5f}  S1 {pivots.s1:.5f}")

    for fib in fibonacci_levels(high=1.1000, low=1.0800).levels:
        print(f"  Fib {fib.level:>5.1f}%: {fib.price:.5f}")


def show_failure_handling() -> None:
    """Invalid input comes back as a failure record, never an exception."""
    result = position_size(balance=10000, risk_percent=2, stop_loss_pips=0)
    if is_failure(result):
        print(f"Position size unavailable ({result.kind.value}): {result.message}")


def show_named_dispatch() -> None:
    """Run calculators by name against a fetched rate table."""
    rates = RateTable({"EUR/USD": 1.0872, "XAU/USD": 2361.40})
    calculator = ForexCalculator(rates=rates)

    margin = calculator.calculate("margin_for_instrument", lots=0.5, instrument="XAU/USD", leverage="1:100")
    print(f"Margin for 0.5 lots XAU/USD: ${margin.margin:,.2f}")

    level = calculator.calculate("margin_level", equity=1000, used_margin=0)
    print(f"Margin level with no open positions: {level.level_percent or 'unbounded'}")


if __name__ == "__main__":
    configure_logging(level="INFO")
    show_direct_calls()
    show_failure_handling()
    show_named_dispatch()
