"""
Renko bars package.

Contains the brick bar model and the aggregator that builds
fixed-height price-movement bars from streams of ticks.
"""

from .builder import BrickAggregator
from .renko import RenkoBar

__all__ = [
    "BrickAggregator",
    "RenkoBar",
]
