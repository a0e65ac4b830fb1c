"""Money management: compounding, Kelly, Sharpe, expectancy, ROI, VaR, ruin, profit factor"""

import math
from typing import Optional

from ..config.defaults import DefaultConfig
from ..errors import OutOfRangeInputError
from ..models.results import (
    CompoundInterestResult,
    ExpectedValueResult,
    KellyResult,
    ProfitFactorResult,
    RiskOfRuinResult,
    ROIResult,
    SharpeResult,
    VaRResult,
)
from ..validation.inputs import (
    require_finite,
    require_fraction,
    require_in_range,
    require_non_negative,
    require_nonzero_denominator,
    require_positive,
)
from .boundary import formula, resolve_config


@formula("compound_interest")
def compound_interest(principal: float, monthly_contribution: float, annual_rate_percent: float,
                      years: float, compounds_per_year: int = 12,
                      config: Optional[DefaultConfig] = None) -> CompoundInterestResult:
    """
    Future value of a principal plus regular contributions

    FV = P(1 + r/n)^(nt) + PMT * ((1 + r/n)^(nt) - 1) / (r/n)

    With a zero rate the annuity term degenerates to PMT * n * t.
    Contributions are counted monthly for total_contributions.

    Args:
        principal: Starting amount
        monthly_contribution: Amount added each period
        annual_rate_percent: Annual interest rate in percent
        years: Investment horizon in years
        compounds_per_year: Compounding periods per year
        config: Optional configuration

    Returns:
        CompoundInterestResult
    """
    months_per_year = resolve_config(config).risk.months_per_year
    principal = require_non_negative("principal", principal)
    contribution = require_non_negative("monthly_contribution", monthly_contribution)
    rate = require_finite("annual_rate_percent", annual_rate_percent) / 100
    years = require_non_negative("years", years)
    n = require_positive("compounds_per_year", compounds_per_year)

    periodic_rate = rate / n
    if periodic_rate <= -1:
        raise OutOfRangeInputError(
            f"annual_rate_percent {annual_rate_percent} wipes out the balance each period",
            field="annual_rate_percent",
            value=annual_rate_percent,
            minimum=-100.0 * n,
        )

    periods = n * years
    growth = (1 + periodic_rate) ** periods

    if periodic_rate == 0:
        contributions_value = contribution * periods
    else:
        contributions_value = contribution * (growth - 1) / periodic_rate

    future_value = principal * growth + contributions_value
    total_contributions = principal + contribution * months_per_year * years

    return CompoundInterestResult(
        future_value=future_value,
        total_contributions=total_contributions,
        total_interest=future_value - total_contributions,
    )


@formula("kelly_criterion")
def kelly_criterion(win_rate: float, avg_win: float, avg_loss: float) -> KellyResult:
    """
    Kelly fraction of capital to risk per trade

    f = (w * b - (1 - w)) / b with b = avg_win / avg_loss, never below zero.
    win_rate is a fraction in [0, 1]; avg_loss is a positive magnitude.
    """
    win_rate = require_fraction("win_rate", win_rate)
    avg_win = require_positive("avg_win", avg_win)
    avg_loss = require_positive("avg_loss", avg_loss)

    payoff = avg_win / avg_loss
    fraction = max((win_rate * payoff - (1 - win_rate)) / payoff, 0.0)
    return KellyResult(fraction=fraction, percent=fraction * 100)


@formula("sharpe_ratio")
def sharpe_ratio(avg_return: float, risk_free_rate: float, std_dev: float) -> SharpeResult:
    avg_return = require_finite("avg_return", avg_return)
    risk_free_rate = require_finite("risk_free_rate", risk_free_rate)
    std_dev = require_non_negative("std_dev", std_dev)
    require_nonzero_denominator("std_dev", std_dev)

    return SharpeResult(value=(avg_return - risk_free_rate) / std_dev)


@formula("expected_value")
def expected_value(win_rate: float, avg_win: float, avg_loss: float) -> ExpectedValueResult:
    """Expectancy per trade: w * avg_win - (1 - w) * avg_loss"""
    win_rate = require_fraction("win_rate", win_rate)
    avg_win = require_non_negative("avg_win", avg_win)
    avg_loss = require_non_negative("avg_loss", avg_loss)

    return ExpectedValueResult(value=win_rate * avg_win - (1 - win_rate) * avg_loss)


@formula("roi")
def roi(initial: float, final: float) -> ROIResult:
    initial = require_positive("initial", initial)
    final = require_finite("final", final)

    profit = final - initial
    return ROIResult(percent=profit / initial * 100, profit=profit)


def z_score_for(confidence_level: float, config: Optional[DefaultConfig] = None) -> float:
    """
    Z-score for a confidence level from the fixed table

    95 -> 1.645, 99 -> 2.326, anything else -> 1.96. Fractions such as
    0.95 are read as percentages.
    """
    params = resolve_config(config).risk
    confidence = confidence_level * 100 if confidence_level <= 1 else confidence_level
    for level, z in params.var_z_scores.items():
        if math.isclose(confidence, level):
            return z
    return params.var_default_z_score


@formula("value_at_risk")
def value_at_risk(portfolio_value: float, confidence_level: float, daily_volatility: float,
                  holding_days: float = 1, config: Optional[DefaultConfig] = None) -> VaRResult:
    """
    Parametric Value at Risk

    VaR = value * z * volatility, scaled by sqrt(holding_days).

    Args:
        portfolio_value: Current portfolio value
        confidence_level: Confidence in percent (95, 99) or as a fraction
        daily_volatility: Daily volatility in percent
        holding_days: Horizon in days
        config: Optional configuration

    Returns:
        VaRResult with the loss amount, loss percent and z-score used
    """
    portfolio_value = require_non_negative("portfolio_value", portfolio_value)
    confidence_level = require_in_range("confidence_level", confidence_level, 0.0, 100.0)
    confidence_level = require_positive("confidence_level", confidence_level)
    daily_volatility = require_non_negative("daily_volatility", daily_volatility)
    holding_days = require_positive("holding_days", holding_days)

    z = z_score_for(confidence_level, config)
    percent = z * daily_volatility * math.sqrt(holding_days)
    return VaRResult(var=portfolio_value * percent / 100, percent=percent, z_score=z)


@formula("risk_of_ruin")
def risk_of_ruin(win_rate: float, risk_per_trade_percent: float) -> RiskOfRuinResult:
    """
    Probability of losing the account, in percent

    With edge = 2w - 1 and units = 100 / risk per trade:
    ruin = ((1 - edge) / (1 + edge)) ^ units, or certain ruin without an
    edge. Always within [0, 100].
    """
    win_rate = require_fraction("win_rate", win_rate)
    risk = require_in_range("risk_per_trade_percent", risk_per_trade_percent, 0.0, 100.0)
    risk = require_positive("risk_per_trade_percent", risk)

    edge = 2 * win_rate - 1
    if edge <= 0:
        return RiskOfRuinResult(percent=100.0)

    units = 100 / risk
    ruin = ((1 - edge) / (1 + edge)) ** units * 100
    return RiskOfRuinResult(percent=min(max(ruin, 0.0), 100.0))


@formula("profit_factor")
def profit_factor(gross_profit: float, gross_loss: float) -> ProfitFactorResult:
    """Gross profit over gross loss; the loss may be given signed or as a magnitude"""
    gross_profit = require_non_negative("gross_profit", gross_profit)
    gross_loss = abs(require_finite("gross_loss", gross_loss))
    require_nonzero_denominator("gross_loss", gross_loss)

    return ProfitFactorResult(value=gross_profit / gross_loss)
