"""
Centralized logging configuration for the FXCalc formula library.

This module provides standardized logging configuration using structlog.
Formulas themselves stay silent on the happy path; the formula boundary and
the calculator facade log failures and clamping through the loggers
returned here.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    # Level names map to stdlib constants; anything else is a caller error
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown logging level: {level}")

    # stdlib handler writes the line, structlog renders it
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    # Shared processor chain for formula and facade loggers
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # Optional enrichment
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    # Renderer goes last
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_calculation_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the calculator subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for formula evaluation
    """
    return structlog.get_logger(name, subsystem="calculators")


def log_calculation_failure(
    logger: FilteringBoundLogger,
    calculator: str,
    kind: str,
    reason: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a formula that degraded to a failure result.

    Invalid input is routine (a half-filled form) and goes to DEBUG;
    degenerate cases are worth a WARNING.

    Args:
        logger: Structlog logger instance
        calculator: Name of the calculator that failed
        kind: Failure kind value
        reason: Human readable reason
        context: Additional context data
    """
    bound_logger = logger.bind(
        calculator=calculator,
        failure_kind=kind,
        reason=reason,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if kind == "invalid_input":
        bound_logger.debug("Calculation rejected input")
    else:
        bound_logger.warning("Calculation degraded to failure")


def log_lot_clamp(
    logger: FilteringBoundLogger,
    raw_lot_size: float,
    lot_size: float,
    min_lot: float,
    max_lot: float
) -> None:
    """
    Log a position size that was clamped into the allowed lot range.

    Args:
        logger: Structlog logger instance
        raw_lot_size: Unclamped lot size
        lot_size: Clamped lot size returned to the caller
        min_lot: Lower lot bound
        max_lot: Upper lot bound
    """
    logger.info(
        "Lot size clamped",
        raw_lot_size=raw_lot_size,
        lot_size=lot_size,
        min_lot=min_lot,
        max_lot=max_lot,
    )
