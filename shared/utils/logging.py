"""
Structured logging setup for the aggregation components.

Provides consistent logging configuration with structured output
and instrument-scoped context binding.
"""

import logging
import sys
from typing import Optional
import structlog
from structlog.stdlib import LoggerFactory


def setup_logging(
    service_name: str,
    log_level: str = "info",
    format_type: str = "json"
) -> None:
    """
    Setup structured logging for the service.

    Args:
        service_name: Name of the service
        log_level: Logging level (debug, info, warning, error)
        format_type: Output format (json, console)
    """
    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, log_level.upper())
    )

    # Configure structlog
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if format_type == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    get_logger(service_name).info("logging_configured", log_level=log_level, log_format=format_type)


def configure_logging(config) -> None:
    """Setup logging from a service config and its observability settings."""
    setup_logging(
        config.service_name,
        log_level=config.observability.log_level,
        format_type=config.observability.log_format,
    )


def get_logger(name: Optional[str] = None) -> structlog.BoundLogger:
    """Get a structured logger instance."""
    return structlog.get_logger(name)


def add_instrument_id(logger: structlog.BoundLogger, instrument_id: str) -> structlog.BoundLogger:
    """Add instrument ID to logger context."""
    return logger.bind(instrument_id=instrument_id)


def add_indicator_name(logger: structlog.BoundLogger, indicator: str) -> structlog.BoundLogger:
    """Add indicator name to logger context."""
    return logger.bind(indicator=indicator)
