"""
Aggregation package.

Streaming, in-memory transforms for market data:
- bars: Renko (brick) bar model and aggregator
- indicators: incrementally updated indicator nodes, combinators and
  Bollinger Bands
- config: environment-driven configuration for both

Nothing in this package performs I/O; data sourcing belongs to callers.
"""

from .bars import BrickAggregator, RenkoBar
from .config import AggregationConfig
from .indicators import BollingerBands, MovingAverageType

__all__ = [
    "AggregationConfig",
    "BollingerBands",
    "BrickAggregator",
    "MovingAverageType",
    "RenkoBar",
]
