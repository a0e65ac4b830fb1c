"""
Formula boundary.

Every public formula is wrapped with @formula(name). Errors raised inside a
formula never escape it: they become a CalculationFailure for that
formula's output only, and the failure is logged.
"""

import dataclasses
import functools
import math
from typing import Any, Callable, Optional, TypeVar

from ..config.defaults import DefaultConfig, get_default_config
from ..errors import (
    CalculationError,
    DegenerateCaseError,
    InsufficientDataError,
    InvalidInputError,
    OutOfBoundsResultError,
)
from ..logging.config import get_calculation_logger, log_calculation_failure
from ..models.results import CalculationFailure, FailureKind

logger = get_calculation_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def classify(error: Exception) -> FailureKind:
    """Map an exception to the failure kind reported to callers."""
    if isinstance(error, InsufficientDataError):
        return FailureKind.INSUFFICIENT_DATA
    if isinstance(error, OutOfBoundsResultError):
        return FailureKind.OUT_OF_BOUNDS
    if isinstance(error, InvalidInputError):
        return FailureKind.INVALID_INPUT
    if isinstance(error, (DegenerateCaseError, ZeroDivisionError)):
        return FailureKind.DEGENERATE_CASE
    if isinstance(error, OverflowError):
        return FailureKind.OUT_OF_BOUNDS
    return FailureKind.INVALID_INPUT


def _non_finite_fields(result: Any, prefix: str = "") -> list[str]:
    """Names of float fields in a result (recursively) that are NaN or inf."""
    bad = []
    if dataclasses.is_dataclass(result) and not isinstance(result, type):
        for f in dataclasses.fields(result):
            bad.extend(_non_finite_fields(getattr(result, f.name), f"{prefix}{f.name}."))
    elif isinstance(result, (tuple, list)):
        for i, item in enumerate(result):
            bad.extend(_non_finite_fields(item, f"{prefix}{i}."))
    elif isinstance(result, float) and (math.isnan(result) or math.isinf(result)):
        bad.append(prefix.rstrip("."))
    return bad


def formula(name: str) -> Callable[[F], F]:
    """
    Decorate a formula so it returns a CalculationFailure instead of raising.

    Args:
        name: Calculator name reported in failures and logs
    """
    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                result = func(*args, **kwargs)
            except (CalculationError, ZeroDivisionError, OverflowError) as e:
                context = dict(getattr(e, "context", {}) or {})
                field = getattr(e, "field", None)
                if field is not None:
                    context.setdefault("field", field)
                failure = CalculationFailure(
                    calculator=name,
                    kind=classify(e),
                    message=str(e),
                    context=context,
                )
                log_calculation_failure(logger, name, failure.kind.value, failure.message, context)
                return failure

            bad_fields = _non_finite_fields(result)
            if bad_fields:
                failure = CalculationFailure(
                    calculator=name,
                    kind=FailureKind.OUT_OF_BOUNDS,
                    message=f"Non-finite result in {', '.join(bad_fields)}",
                    context={"fields": bad_fields},
                )
                log_calculation_failure(logger, name, failure.kind.value, failure.message)
                return failure

            return result

        wrapper.calculator_name = name  # type: ignore[attr-defined]
        return wrapper  # type: ignore[return-value]

    return decorator


def resolve_config(config: Optional[DefaultConfig]) -> DefaultConfig:
    """Use the given config or fall back to defaults."""
    return config if config is not None else get_default_config()
