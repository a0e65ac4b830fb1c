"""Base exception for all calculator errors."""

from typing import Any, Dict, Optional


class CalculationError(Exception):
    """Base class for errors raised while evaluating a formula."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class UnknownCalculatorError(CalculationError):
    """A calculator name was requested that is not registered."""

    def __init__(self, message: str, calculator: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.calculator = calculator
        self.recoverable = False
