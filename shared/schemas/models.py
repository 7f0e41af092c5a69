"""
Data models for the aggregation pipeline.

Defines the core data structures handed between the tick stream,
the brick aggregator and the indicator graph.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional, Union

from shared.utils.errors import UnsupportedOperationError


Number = Union[Decimal, int, float]


class InMemoryData:
    """Mixin for data types that only ever live in memory.

    Such types are produced by aggregation, never read back from storage,
    so the source/reader hooks always refuse.
    """

    def get_source(self, config: Any = None, date: Optional[datetime] = None) -> str:
        raise UnsupportedOperationError(
            f"{type(self).__name__} does not support get_source; it is never file-backed",
            operation="get_source",
            data_type=type(self).__name__,
        )

    def reader(self, config: Any = None, line: Optional[str] = None, date: Optional[datetime] = None):
        raise UnsupportedOperationError(
            f"{type(self).__name__} does not support reader; it is never parsed from a data line",
            operation="reader",
            data_type=type(self).__name__,
        )


@dataclass(frozen=True)
class TickData(InMemoryData):
    """A single (time, price, volume) observation from an upstream feed."""
    timestamp: datetime
    price: Number
    volume: int = 0
    instrument_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "instrument_id": self.instrument_id,
            "timestamp": self.timestamp.isoformat(),
            "price": str(self.price),
            "volume": self.volume,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TickData":
        """Create from dictionary."""
        return cls(
            timestamp=datetime.fromisoformat(data["timestamp"]),
            price=Decimal(str(data["price"])),
            volume=int(data.get("volume", 0)),
            instrument_id=data.get("instrument_id"),
        )


@dataclass(frozen=True)
class IndicatorDataPoint(InMemoryData):
    """A timestamped value flowing through the indicator graph."""
    time: Optional[datetime]
    value: float

    def __float__(self) -> float:
        return float(self.value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "time": self.time.isoformat() if self.time else None,
            "value": self.value,
        }
