"""Indicator node base classes.

Every indicator is a node with two operations: ``update(sample)``, which
consumes one sample and returns the new value, and ``is_ready``, which
reports whether enough samples have been observed for the value to be
meaningful. Readiness is cached and refreshed each time the value is
recomputed.
"""

from abc import ABC, abstractmethod
from collections import deque
from datetime import datetime
from typing import Callable, Deque, List, Optional, Union

from shared.schemas.models import IndicatorDataPoint, Number
from shared.utils.errors import ConfigurationError
from shared.utils.logging import get_logger


logger = get_logger(__name__)

UpdatedHandler = Callable[["IndicatorBase", IndicatorDataPoint], None]


class IndicatorBase(ABC):
    """Base class for all indicator nodes."""

    def __init__(self, name: str):
        self.name = name
        self.samples = 0
        self.current = IndicatorDataPoint(time=None, value=0.0)
        self.updated: List[UpdatedHandler] = []
        self._is_ready = False
        self._last_input: Optional[IndicatorDataPoint] = None

    @property
    def value(self) -> float:
        """Current value of the indicator."""
        return self.current.value

    @property
    def is_ready(self) -> bool:
        """Whether the indicator has seen enough samples to be trusted."""
        return self._is_ready

    def update(self, sample: IndicatorDataPoint) -> float:
        """Consume one sample and return the new value.

        Samples must be fed in increasing time order. A sample object this
        node has already consumed is ignored, so a node reachable along
        several paths of a graph observes each sample exactly once.
        """
        if sample is self._last_input:
            return self.current.value
        self._last_input = sample
        self.samples += 1

        value = self.compute_next_value(sample)
        self.current = IndicatorDataPoint(time=sample.time, value=value)

        was_ready = self._is_ready
        self._is_ready = self._check_ready()
        if self._is_ready and not was_ready:
            logger.debug("indicator_ready", indicator=self.name, samples=self.samples)

        for handler in self.updated:
            handler(self, self.current)
        return value

    def update_value(self, time: Optional[datetime], value: Number) -> float:
        """Wrap a raw (time, value) pair into a sample and update."""
        return self.update(IndicatorDataPoint(time=time, value=float(value)))

    def reset(self) -> None:
        """Return the indicator to its freshly constructed state."""
        self.samples = 0
        self.current = IndicatorDataPoint(time=None, value=0.0)
        self._is_ready = False
        self._last_input = None

    @abstractmethod
    def compute_next_value(self, sample: IndicatorDataPoint) -> float:
        """Compute the value for the new sample."""

    @abstractmethod
    def _check_ready(self) -> bool:
        """Evaluate readiness right after a recomputation."""

    # Arithmetic composition. Numbers are wrapped as constants.

    def plus(self, other: Union["IndicatorBase", Number], name: Optional[str] = None) -> "IndicatorBase":
        from .composite import CompositeIndicator
        return CompositeIndicator.combine(self, other, "plus", name)

    def minus(self, other: Union["IndicatorBase", Number], name: Optional[str] = None) -> "IndicatorBase":
        from .composite import CompositeIndicator
        return CompositeIndicator.combine(self, other, "minus", name)

    def times(self, other: Union["IndicatorBase", Number], name: Optional[str] = None) -> "IndicatorBase":
        from .composite import CompositeIndicator
        return CompositeIndicator.combine(self, other, "times", name)

    def over(self, other: Union["IndicatorBase", Number], name: Optional[str] = None) -> "IndicatorBase":
        from .composite import CompositeIndicator
        return CompositeIndicator.combine(self, other, "over", name)

    def __add__(self, other):
        return self.plus(other)

    def __sub__(self, other):
        return self.minus(other)

    def __mul__(self, other):
        return self.times(other)

    def __truediv__(self, other):
        return self.over(other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, value={self.value}, ready={self.is_ready})"


class Identity(IndicatorBase):
    """Leaf node whose value is the raw sample."""

    def compute_next_value(self, sample: IndicatorDataPoint) -> float:
        return sample.value

    def _check_ready(self) -> bool:
        return self.samples > 0


class ConstantIndicator(IndicatorBase):
    """Node with a fixed value; ignores every sample and is always ready."""

    def __init__(self, name: str, constant: Number):
        super().__init__(name)
        self.constant = float(constant)
        self.current = IndicatorDataPoint(time=None, value=self.constant)
        self._is_ready = True

    def compute_next_value(self, sample: IndicatorDataPoint) -> float:
        return self.constant

    def _check_ready(self) -> bool:
        return True

    def reset(self) -> None:
        super().reset()
        self.current = IndicatorDataPoint(time=None, value=self.constant)
        self._is_ready = True


class WindowIndicator(IndicatorBase):
    """Node computing over the last ``period`` samples.

    Subclasses receive the rolling window (newest last) plus the value that
    just fell out of it, if any, so they can update accumulators in O(1).
    """

    def __init__(self, name: str, period: int):
        super().__init__(name)
        validate_period(period)
        self.period = period
        self.window: Deque[float] = deque(maxlen=period)

    def compute_next_value(self, sample: IndicatorDataPoint) -> float:
        removed = self.window[0] if len(self.window) == self.period else None
        self.window.append(sample.value)
        return self.compute_window_value(sample.value, removed)

    def _check_ready(self) -> bool:
        return self.samples >= self.period

    def reset(self) -> None:
        super().reset()
        self.window.clear()

    @abstractmethod
    def compute_window_value(self, added: float, removed: Optional[float]) -> float:
        """Update accumulators with the added and removed values."""


def validate_period(period: int) -> None:
    """Reject non-positive or non-integer periods."""
    if isinstance(period, bool) or not isinstance(period, int) or period <= 0:
        raise ConfigurationError(
            f"period must be a positive integer, got {period!r}",
            config_key="period",
            config_value=period,
        )
