"""Configuration for the aggregation components."""

import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation

from shared.framework.config import ServiceConfig
from shared.utils.errors import ConfigurationError

from .bars.renko import validate_brick_size
from .indicators.base import validate_period
from .indicators.moving_averages import MovingAverageType
from .indicators.rolling import DeviationMode


def _env_decimal(key: str, default: str) -> Decimal:
    raw = os.getenv(key, default)
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise ConfigurationError(f"{key} is not a number: {raw}", config_key=key, config_value=raw) from None


def _env_int(key: str, default: str) -> int:
    raw = os.getenv(key, default)
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(f"{key} is not an integer: {raw}", config_key=key, config_value=raw) from None


@dataclass
class AggregationConfig(ServiceConfig):
    """Configuration for brick bars and Bollinger Bands."""
    service_name: str = "aggregation"

    brick_size: Decimal = field(default_factory=lambda: _env_decimal("DATA_PROC_AGGREGATION_BRICK_SIZE", "10"))
    max_bar_history: int = field(default_factory=lambda: _env_int("DATA_PROC_AGGREGATION_MAX_BAR_HISTORY", "1000"))

    bollinger_period: int = field(default_factory=lambda: _env_int("DATA_PROC_AGGREGATION_BOLLINGER_PERIOD", "20"))
    bollinger_k: Decimal = field(default_factory=lambda: _env_decimal("DATA_PROC_AGGREGATION_BOLLINGER_K", "2"))
    moving_average_type: MovingAverageType = field(
        default_factory=lambda: os.getenv("DATA_PROC_AGGREGATION_MOVING_AVERAGE_TYPE", "simple")
    )
    std_dev_mode: DeviationMode = field(
        default_factory=lambda: os.getenv("DATA_PROC_AGGREGATION_STD_DEV_MODE", "population")
    )

    def __post_init__(self):
        """Validate configuration after initialization."""
        super().__post_init__()

        validate_brick_size(self.brick_size)
        validate_period(self.bollinger_period)
        if self.max_bar_history <= 0:
            raise ConfigurationError(
                "max_bar_history must be positive",
                config_key="max_bar_history",
                config_value=self.max_bar_history,
            )

        self.moving_average_type = MovingAverageType.parse(self.moving_average_type)
        self.std_dev_mode = DeviationMode.parse(self.std_dev_mode)

    def to_dict(self):
        """Convert configuration to dictionary."""
        result = super().to_dict()
        result.update({
            "brick_size": str(self.brick_size),
            "max_bar_history": self.max_bar_history,
            "bollinger_period": self.bollinger_period,
            "bollinger_k": str(self.bollinger_k),
            "moving_average_type": self.moving_average_type.value,
            "std_dev_mode": self.std_dev_mode.value,
        })
        return result
