"""Shared fixtures for formula tests."""

import pytest

from fxcalc_app.config.defaults import get_default_config
from fxcalc_app.formulas.calculator import ForexCalculator
from fxcalc_app.logging.config import configure_logging
from fxcalc_app.models.instruments import RateTable


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Keep structlog output out of the test run except for warnings."""
    configure_logging(level="WARNING", format_json=True)


@pytest.fixture
def default_config():
    return get_default_config()


@pytest.fixture
def rate_table():
    return RateTable({
        "EUR/USD": 1.0850,
        "USD/JPY": 149.50,
        "XAU/USD": 2350.00,
    })


@pytest.fixture
def calculator(rate_table):
    return ForexCalculator(rates=rate_table)


@pytest.fixture
def rising_series():
    return [1.0800, 1.0810, 1.0825, 1.0820, 1.0840, 1.0850]


@pytest.fixture
def sample_bars():
    """Highs, lows and closes for three bars."""
    return {
        "highs": [105.0, 108.0, 115.0],
        "lows": [95.0, 101.0, 108.0],
        "closes": [102.0, 107.0, 112.0],
    }
