"""
Core framework components.

Provides the configuration base classes shared by the aggregation
components.
"""

from .config import ServiceConfig, ObservabilityConfig

__all__ = [
    "ServiceConfig",
    "ObservabilityConfig",
]
