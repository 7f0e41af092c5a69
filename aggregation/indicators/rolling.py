"""Rolling dispersion statistics."""

import math
from enum import Enum
from typing import Optional, Union

from shared.utils.errors import ConfigurationError

from .base import WindowIndicator


class DeviationMode(Enum):
    """Normalisation used for variance."""
    POPULATION = "population"
    SAMPLE = "sample"

    @classmethod
    def parse(cls, value: Union["DeviationMode", str]) -> "DeviationMode":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ConfigurationError(
                f"Unknown standard deviation mode: {value}",
                config_key="std_dev_mode",
                config_value=value,
            ) from None


class Variance(WindowIndicator):
    """Rolling variance over the last ``period`` samples.

    Uses Welford's recurrence extended with removal, so each sample costs
    O(1) and the running sum of squared deviations never has to be rebuilt.
    Before the window fills the variance covers the samples seen so far.
    """

    def __init__(self, name: str, period: int, mode: Union[DeviationMode, str] = DeviationMode.POPULATION):
        super().__init__(name, period)
        self.mode = DeviationMode.parse(mode)
        self._count = 0
        self._mean = 0.0
        self._m2 = 0.0

    def compute_window_value(self, added: float, removed: Optional[float]) -> float:
        if removed is not None:
            self._remove(removed)
        self._add(added)
        return self._variance()

    def _add(self, x: float) -> None:
        self._count += 1
        delta = x - self._mean
        self._mean += delta / self._count
        self._m2 += delta * (x - self._mean)

    def _remove(self, x: float) -> None:
        self._count -= 1
        if self._count == 0:
            self._mean = 0.0
            self._m2 = 0.0
            return
        delta = x - self._mean
        self._mean -= delta / self._count
        self._m2 -= delta * (x - self._mean)
        if self._m2 < 0.0:
            self._m2 = 0.0

    def _variance(self) -> float:
        if self.mode is DeviationMode.SAMPLE:
            return self._m2 / (self._count - 1) if self._count > 1 else 0.0
        return self._m2 / self._count

    @property
    def mean(self) -> float:
        """Mean of the current window."""
        return self._mean

    def reset(self) -> None:
        super().reset()
        self._count = 0
        self._mean = 0.0
        self._m2 = 0.0


class StandardDeviation(Variance):
    """Rolling standard deviation, the square root of :class:`Variance`."""

    def compute_window_value(self, added: float, removed: Optional[float]) -> float:
        return math.sqrt(super().compute_window_value(added, removed))
