"""
Schema definitions for aggregation data models.

Provides type-safe models for:
- Ticks fed into the brick aggregator
- Samples flowing through indicator graphs
"""

from .models import TickData, IndicatorDataPoint, InMemoryData

__all__ = [
    "TickData",
    "IndicatorDataPoint",
    "InMemoryData",
]
