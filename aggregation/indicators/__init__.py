"""
Streaming indicators.

Indicator nodes that update incrementally from one sample at a time and
compose into small, statically wired graphs:
- base: node contract, identity and constant leaves
- rolling: variance and standard deviation
- moving_averages: simple, exponential, weighted and Wilders averages
- composite: arithmetic combinators
- bollinger: Bollinger Bands
"""

from .base import ConstantIndicator, Identity, IndicatorBase, WindowIndicator
from .bollinger import BollingerBands
from .composite import CompositeIndicator
from .moving_averages import (
    ExponentialMovingAverage,
    MovingAverageType,
    SimpleMovingAverage,
    WeightedMovingAverage,
    WildersMovingAverage,
)
from .rolling import DeviationMode, StandardDeviation, Variance

__all__ = [
    "BollingerBands",
    "CompositeIndicator",
    "ConstantIndicator",
    "DeviationMode",
    "ExponentialMovingAverage",
    "Identity",
    "IndicatorBase",
    "MovingAverageType",
    "SimpleMovingAverage",
    "StandardDeviation",
    "Variance",
    "WeightedMovingAverage",
    "WildersMovingAverage",
    "WindowIndicator",
]
