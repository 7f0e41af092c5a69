"""
Utility modules for the aggregation components.

Provides common utilities for:
- Structured logging
- Error handling
"""

from .logging import setup_logging, configure_logging, get_logger
from .errors import (
    DataProcessingError,
    ValidationError,
    ConfigurationError,
    UnsupportedOperationError,
)

__all__ = [
    "setup_logging",
    "configure_logging",
    "get_logger",
    "DataProcessingError",
    "ValidationError",
    "ConfigurationError",
    "UnsupportedOperationError",
]
