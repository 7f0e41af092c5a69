"""Renko (brick) bar model."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from shared.schemas.models import InMemoryData, Number
from shared.utils.errors import ConfigurationError


def validate_brick_size(brick_size: Number) -> None:
    """Reject brick sizes that are not strictly positive."""
    if isinstance(brick_size, bool) or not isinstance(brick_size, (Decimal, int, float)) or not brick_size > 0:
        raise ConfigurationError(
            f"brick_size must be positive, got {brick_size!r}",
            config_key="brick_size",
            config_value=brick_size,
        )


class RenkoBar(InMemoryData):
    """Bar delimited by price movement instead of time.

    The bar closes once a price reaches ``open - brick_size`` or
    ``open + brick_size``. ``close`` is clamped to that envelope, so ``high``
    and ``low`` never leave it either. A closed bar is immutable; the owner
    starts the next one.
    """

    def __init__(
        self,
        brick_size: Number,
        open_price: Number,
        time: Optional[datetime] = None,
        volume: int = 0,
        symbol: Optional[str] = None,
    ):
        validate_brick_size(brick_size)
        self.symbol = symbol
        self.brick_size = brick_size
        open_price = self._as_price(open_price)
        self.open = open_price
        self.close = open_price
        self.high = open_price
        self.low = open_price
        self.volume = volume
        self.start = time
        self.end = time
        self.is_closed = False

    def update(self, time: datetime, price: Number, volume_delta: int = 0) -> bool:
        """Apply one observation and return whether the bar is now closed.

        Updating a closed bar does nothing. A price beyond the envelope
        closes the bar at the boundary once; the excess is not carried over.
        """
        if self.is_closed:
            return True
        price = self._as_price(price)
        if self.start is None:
            self.start = time
        self.end = time

        low_close = self.open - self.brick_size
        high_close = self.open + self.brick_size

        self.close = min(high_close, max(low_close, price))
        self.volume += volume_delta

        if price <= low_close or price >= high_close:
            self.is_closed = True

        if self.close > self.high:
            self.high = self.close
        if self.close < self.low:
            self.low = self.close

        return self.is_closed

    def _as_price(self, value: Number) -> Number:
        # prices follow the brick size type so Decimal and float never mix
        if isinstance(self.brick_size, Decimal):
            return value if isinstance(value, Decimal) else Decimal(str(value))
        if isinstance(value, Decimal):
            return float(value)
        return value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "symbol": self.symbol,
            "brick_size": str(self.brick_size),
            "open": str(self.open),
            "high": str(self.high),
            "low": str(self.low),
            "close": str(self.close),
            "volume": self.volume,
            "start": self.start.isoformat() if self.start else None,
            "end": self.end.isoformat() if self.end else None,
            "is_closed": self.is_closed,
        }

    def __repr__(self) -> str:
        state = "closed" if self.is_closed else "open"
        return (
            f"RenkoBar({self.symbol or '-'} O:{self.open} H:{self.high} "
            f"L:{self.low} C:{self.close} V:{self.volume} {state})"
        )
