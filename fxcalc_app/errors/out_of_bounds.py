"""Result bound errors for computed values outside a sane domain."""

from typing import Optional

from .base import CalculationError


class OutOfBoundsResultError(CalculationError):
    """A computed value is outside the domain the caller can act on."""

    def __init__(self, message: str, field: Optional[str] = None,
                 value: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
