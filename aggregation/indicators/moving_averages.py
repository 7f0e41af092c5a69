"""Moving average indicators.

All averages update incrementally. Until ``period`` samples have been
seen each one reports its average over the samples available so far
(the exponential variants report their seeded recurrence).
"""

from enum import Enum
from typing import Optional, Union

from shared.schemas.models import IndicatorDataPoint
from shared.utils.errors import ConfigurationError

from .base import IndicatorBase, WindowIndicator, validate_period


class SimpleMovingAverage(WindowIndicator):
    """Arithmetic mean of the last ``period`` samples, kept as a running sum."""

    def __init__(self, name: str, period: int):
        super().__init__(name, period)
        self._sum = 0.0

    def compute_window_value(self, added: float, removed: Optional[float]) -> float:
        if removed is not None:
            self._sum -= removed
        self._sum += added
        return self._sum / len(self.window)

    def reset(self) -> None:
        super().reset()
        self._sum = 0.0


class WeightedMovingAverage(WindowIndicator):
    """Linearly weighted average; the newest sample weighs ``period``, the oldest 1.

    Keeps the plain sum and the weighted sum of the window. Sliding the window
    by one sample lowers every weight by one, which subtracts the plain sum.
    """

    def __init__(self, name: str, period: int):
        super().__init__(name, period)
        self._sum = 0.0
        self._weighted_sum = 0.0

    def compute_window_value(self, added: float, removed: Optional[float]) -> float:
        n = len(self.window)
        if removed is not None:
            self._weighted_sum = self._weighted_sum - self._sum + n * added
            self._sum = self._sum - removed + added
        else:
            self._weighted_sum += n * added
            self._sum += added
        return self._weighted_sum / (n * (n + 1) / 2)

    def reset(self) -> None:
        super().reset()
        self._sum = 0.0
        self._weighted_sum = 0.0


class ExponentialMovingAverage(IndicatorBase):
    """Exponential moving average seeded with the first sample.

    The default smoothing factor is ``2 / (period + 1)``.
    """

    def __init__(self, name: str, period: int, smoothing_factor: Optional[float] = None):
        super().__init__(name)
        validate_period(period)
        self.period = period
        self.k = smoothing_factor if smoothing_factor is not None else 2.0 / (period + 1)

    def compute_next_value(self, sample: IndicatorDataPoint) -> float:
        if self.samples == 1:
            return sample.value
        return sample.value * self.k + self.current.value * (1 - self.k)

    def _check_ready(self) -> bool:
        return self.samples >= self.period


class WildersMovingAverage(ExponentialMovingAverage):
    """Wilder's smoothing, an exponential average with factor ``1 / period``."""

    def __init__(self, name: str, period: int):
        validate_period(period)
        super().__init__(name, period, smoothing_factor=1.0 / period)


class MovingAverageType(Enum):
    """Supported moving average kinds."""
    SIMPLE = "simple"
    EXPONENTIAL = "exponential"
    WEIGHTED = "weighted"
    WILDERS = "wilders"

    @classmethod
    def parse(cls, value: Union["MovingAverageType", str]) -> "MovingAverageType":
        """Resolve a type from its name; unknown names are a configuration error."""
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower()):
                return member
        raise ConfigurationError(
            f"Unknown moving average type: {value}",
            config_key="moving_average_type",
            config_value=value,
        )

    def as_indicator(self, name: str, period: int) -> IndicatorBase:
        """Build the moving average indicator for this type."""
        return _MOVING_AVERAGES[self](name, period)


_MOVING_AVERAGES = {
    MovingAverageType.SIMPLE: SimpleMovingAverage,
    MovingAverageType.EXPONENTIAL: ExponentialMovingAverage,
    MovingAverageType.WEIGHTED: WeightedMovingAverage,
    MovingAverageType.WILDERS: WildersMovingAverage,
}
