"""Bollinger Bands composite indicator."""

from typing import Optional, Union

from shared.schemas.models import IndicatorDataPoint, Number
from shared.utils.logging import get_logger

from .base import ConstantIndicator, IndicatorBase, validate_period
from .moving_averages import MovingAverageType
from .rolling import DeviationMode, StandardDeviation


logger = get_logger(__name__)


class BollingerBands(IndicatorBase):
    """Moving average bracketed by ``k`` rolling standard deviations.

    The indicator owns its sub-graph and is a pass-through: ``update``
    returns the input value unchanged. Readings are exposed through the
    ``middle_band``, ``upper_band``, ``lower_band`` and
    ``standard_deviation`` nodes.

    Args:
        period: Window length for both the standard deviation and the
            moving average.
        k: Multiplier of the standard deviation.
        moving_average_type: Kind of moving average for the middle band.
        name: Indicator name, ``BOL(period,k)`` by default.
        std_dev_mode: Population (default) or sample standard deviation.
    """

    def __init__(
        self,
        period: int,
        k: Number,
        moving_average_type: Union[MovingAverageType, str] = MovingAverageType.SIMPLE,
        name: Optional[str] = None,
        std_dev_mode: Union[DeviationMode, str] = DeviationMode.POPULATION,
    ):
        validate_period(period)
        name = name or f"BOL({period},{k})"
        super().__init__(name)

        self.period = period
        self.k = k
        self.moving_average_type = MovingAverageType.parse(moving_average_type)

        self.standard_deviation = StandardDeviation(f"{name}_StandardDeviation", period, std_dev_mode)
        self.middle_band = self.moving_average_type.as_indicator(f"{name}_MiddleBand", period)
        k_constant = ConstantIndicator(str(k), k)
        self.lower_band = self.middle_band.minus(
            self.standard_deviation.times(k_constant), f"{name}_LowerBand"
        )
        self.upper_band = self.middle_band.plus(
            self.standard_deviation.times(k_constant), f"{name}_UpperBand"
        )

    @classmethod
    def from_config(cls, config, name: Optional[str] = None) -> "BollingerBands":
        """Build from an ``AggregationConfig``."""
        return cls(
            period=config.bollinger_period,
            k=config.bollinger_k,
            moving_average_type=config.moving_average_type,
            name=name,
            std_dev_mode=config.std_dev_mode,
        )

    def compute_next_value(self, sample: IndicatorDataPoint) -> float:
        # dependencies before dependents
        self.standard_deviation.update(sample)
        self.middle_band.update(sample)
        self.upper_band.update(sample)
        self.lower_band.update(sample)
        return sample.value

    def _check_ready(self) -> bool:
        return self.middle_band.is_ready and self.upper_band.is_ready and self.lower_band.is_ready

    def reset(self) -> None:
        super().reset()
        self.standard_deviation.reset()
        self.middle_band.reset()
        self.upper_band.reset()
        self.lower_band.reset()
        logger.debug("indicator_reset", indicator=self.name)
