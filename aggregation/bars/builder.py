"""Brick bar aggregator for price-movement bars."""

from collections import deque
from datetime import datetime
from typing import Callable, Deque, Iterable, List, Optional

from shared.schemas.models import Number, TickData
from shared.utils.errors import ValidationError
from shared.utils.logging import add_instrument_id, get_logger

from .renko import RenkoBar, validate_brick_size


logger = get_logger(__name__)

BarClosedHandler = Callable[[RenkoBar], None]


class BrickAggregator:
    """Builds a series of fixed-height Renko bars from a price stream.

    The aggregator owns the current bar and forwards each observation to
    it. It never replaces a closed bar on its own inside ``update``; the
    owner calls :meth:`start_new_bar` to continue the series, or drives a
    whole tick sequence through :meth:`process_ticks`, which does so.

    Closed bars are kept in a bounded history and handed to every
    ``on_bar_closed`` handler exactly once.
    """

    def __init__(
        self,
        brick_size: Number,
        symbol: Optional[str] = None,
        on_bar_closed: Optional[BarClosedHandler] = None,
        max_history: int = 1000,
    ):
        validate_brick_size(brick_size)
        self.brick_size = brick_size
        self.symbol = symbol
        self.on_bar_closed: List[BarClosedHandler] = [on_bar_closed] if on_bar_closed else []

        self.current_bar: Optional[RenkoBar] = None
        self._closed_bars: Deque[RenkoBar] = deque(maxlen=max_history)
        self._logger = add_instrument_id(logger, symbol) if symbol else logger

    @classmethod
    def from_config(
        cls,
        config,
        symbol: Optional[str] = None,
        on_bar_closed: Optional[BarClosedHandler] = None,
    ) -> "BrickAggregator":
        """Build from an ``AggregationConfig``."""
        return cls(
            brick_size=config.brick_size,
            symbol=symbol,
            on_bar_closed=on_bar_closed,
            max_history=config.max_bar_history,
        )

    def start_new_bar(
        self,
        time: Optional[datetime] = None,
        open_price: Optional[Number] = None,
        volume: int = 0,
    ) -> RenkoBar:
        """Start the next bar of the series.

        Without an explicit ``open_price`` the new bar opens at the close of
        the current bar. Without ``time`` its start is taken from its first
        update.
        """
        if open_price is None:
            if self.current_bar is None:
                raise ValidationError(
                    "open_price is required to start the first bar",
                    field="open_price",
                )
            open_price = self.current_bar.close

        if self.current_bar is not None and not self.current_bar.is_closed:
            self._logger.debug("open_bar_discarded", bar=repr(self.current_bar))

        self.current_bar = RenkoBar(
            brick_size=self.brick_size,
            open_price=open_price,
            time=time,
            volume=volume,
            symbol=self.symbol,
        )
        self._logger.debug("bar_started", open=str(open_price), start=time.isoformat() if time else None)
        return self.current_bar

    def update(self, time: datetime, price: Number, volume_delta: int = 0) -> bool:
        """Feed one observation to the current bar and return whether it is closed.

        The first observation opens the series at its own price. Once the
        current bar is closed further calls return True and change nothing
        until a new bar is started.
        """
        if self.current_bar is None:
            self.start_new_bar(time=time, open_price=price)

        bar = self.current_bar
        was_closed = bar.is_closed
        closed = bar.update(time, price, volume_delta)

        if closed and not was_closed:
            self._closed_bars.append(bar)
            self._logger.debug(
                "brick_closed",
                open=str(bar.open),
                close=str(bar.close),
                volume=bar.volume,
            )
            for handler in self.on_bar_closed:
                handler(bar)

        return closed

    def process_ticks(self, ticks: Iterable[TickData]) -> List[RenkoBar]:
        """Drive a tick sequence, starting a new bar after each closure.

        When the next tick arrives after a closure, a new bar is started at
        the previous close and the closing time. The closing tick is not fed
        again, so a gap wider than one brick closes only one bar on that tick.

        Returns:
            The bars closed while processing ``ticks``.
        """
        closed_bars = []
        for tick in ticks:
            if self.current_bar is not None and self.current_bar.is_closed:
                self.start_new_bar(time=self.current_bar.end)
            if self.update(tick.timestamp, tick.price, tick.volume):
                closed_bars.append(self.current_bar)
        return closed_bars

    def get_closed_bars(self, count: Optional[int] = None) -> List[RenkoBar]:
        """Get closed bars, oldest first."""
        bars = list(self._closed_bars)
        if count is not None:
            bars = bars[-count:] if count > 0 else []
        return bars

    def clear(self) -> None:
        """Drop the current bar and the closed history."""
        self._closed_bars.clear()
        self.current_bar = None
