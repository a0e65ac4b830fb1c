"""
Error handling tests for the formula library.

Covers the exception hierarchy, the formula boundary that turns errors into
CalculationFailure results, and the logging of those failures.
"""

import inspect
import math
from unittest.mock import patch

import pytest

from fxcalc_app.errors import (
    CalculationError,
    DegenerateCaseError,
    InsufficientDataError,
    InvalidInputError,
    NegativeInputError,
    NonFiniteInputError,
    OutOfBoundsResultError,
    OutOfRangeInputError,
    UnknownCalculatorError,
    ZeroDenominatorError,
)
from fxcalc_app.formulas import boundary
from fxcalc_app.formulas.boundary import classify, formula
from fxcalc_app.formulas.calculator import ForexCalculator
from fxcalc_app.models.results import CalculationFailure, FailureKind, MarginLevelResult, is_failure


class TestErrorClassification:
    """Test error classification system."""

    def test_input_error_hierarchy(self):
        error = NonFiniteInputError("nan", field="balance", value=math.nan)
        assert isinstance(error, InvalidInputError)
        assert isinstance(error, CalculationError)
        assert error.field == "balance"
        assert error.recoverable is True
        assert error.context == {}

        range_error = OutOfRangeInputError("too big", field="risk_percent", value=150,
                                           minimum=0.0, maximum=100.0)
        assert range_error.maximum == 100.0

    def test_degenerate_error_hierarchy(self):
        zero = ZeroDenominatorError("zero", denominator="std_dev")
        assert isinstance(zero, DegenerateCaseError)
        assert zero.denominator == "std_dev"

        short = InsufficientDataError("short", required_count=2, available_count=1)
        assert isinstance(short, DegenerateCaseError)
        assert short.available_count == 1

    def test_unknown_calculator_is_not_recoverable(self):
        error = UnknownCalculatorError("nope", calculator="x")
        assert error.recoverable is False

    @pytest.mark.parametrize("error,kind", [
        (NegativeInputError("neg"), FailureKind.INVALID_INPUT),
        (ZeroDenominatorError("zero"), FailureKind.DEGENERATE_CASE),
        (InsufficientDataError("short"), FailureKind.INSUFFICIENT_DATA),
        (OutOfBoundsResultError("big"), FailureKind.OUT_OF_BOUNDS),
        (ZeroDivisionError(), FailureKind.DEGENERATE_CASE),
        (OverflowError(), FailureKind.OUT_OF_BOUNDS),
    ])
    def test_classify(self, error, kind):
        assert classify(error) == kind


class TestFormulaBoundary:
    """Test that formulas degrade to failures instead of raising."""

    def test_error_becomes_failure(self):
        @formula("always_invalid")
        def always_invalid():
            raise NegativeInputError("lots must not be negative", field="lots", value=-1)

        result = always_invalid()
        assert isinstance(result, CalculationFailure)
        assert result.calculator == "always_invalid"
        assert result.kind == FailureKind.INVALID_INPUT
        assert result.context == {"field": "lots"}

    def test_raw_division_by_zero_becomes_failure(self):
        @formula("divide")
        def divide(a, b):
            return a / b

        result = divide(1, 0)
        assert is_failure(result)
        assert result.kind == FailureKind.DEGENERATE_CASE

    def test_non_finite_result_becomes_failure(self):
        @formula("leaky")
        def leaky():
            return MarginLevelResult(level_percent=math.inf, free_margin=0.0)

        result = leaky()
        assert is_failure(result)
        assert result.kind == FailureKind.OUT_OF_BOUNDS
        assert result.context["fields"] == ["level_percent"]

    def test_unrelated_errors_propagate(self):
        @formula("buggy")
        def buggy():
            raise KeyError("programming error")

        with pytest.raises(KeyError):
            buggy()

    def test_wrapper_keeps_metadata(self):
        @formula("documented")
        def documented():
            """Docstring"""
            return None

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring"
        assert documented.calculator_name == "documented"

    def test_failure_is_logged(self):
        @formula("logged")
        def logged():
            raise ZeroDenominatorError("std_dev is zero", denominator="std_dev")

        with patch.object(boundary, "log_calculation_failure") as mock_log:
            logged()

        mock_log.assert_called_once()
        args = mock_log.call_args.args
        assert args[1] == "logged"
        assert args[2] == "degenerate_case"


class TestCalculatorErrorHandling:
    """Every registered calculator survives garbage input."""

    @pytest.mark.parametrize("garbage", [math.nan, "/", None])
    @pytest.mark.parametrize("name", ForexCalculator().available_calculators())
    def test_bad_inputs_never_raise(self, name, garbage):
        calculator = ForexCalculator()
        func = calculator._registry[name]
        params = [
            p for p in inspect.signature(func).parameters.values()
            if p.default is inspect.Parameter.empty
        ]
        inputs = {p.name: garbage for p in params}

        result = calculator.calculate(name, **inputs)

        assert is_failure(result)
        assert result.calculator in calculator.available_calculators()
