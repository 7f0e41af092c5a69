"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from aggregation.bars import BrickAggregator, RenkoBar
from aggregation.config import AggregationConfig
from tests.fixtures.sample_ticks import BASE_TIME, SampleTickGenerator


@pytest.fixture
def base_time():
    """Timestamp of the first sample."""
    return BASE_TIME


@pytest.fixture
def tick_generator():
    """Sample tick generator fixture."""
    return SampleTickGenerator()


@pytest.fixture
def renko_bar():
    """Open bar at 100 with a brick size of 10."""
    return RenkoBar(brick_size=Decimal("10"), open_price=Decimal("100"), time=BASE_TIME, symbol="TEST")


@pytest.fixture
def aggregator():
    """Brick aggregator with a brick size of 10."""
    return BrickAggregator(brick_size=Decimal("10"), symbol="TEST")


@pytest.fixture
def clean_env(monkeypatch):
    """Remove aggregation settings from the environment."""
    for key in (
        "DATA_PROC_ENV",
        "DATA_PROC_LOG_LEVEL",
        "DATA_PROC_LOG_FORMAT",
        "DATA_PROC_AGGREGATION_BRICK_SIZE",
        "DATA_PROC_AGGREGATION_MAX_BAR_HISTORY",
        "DATA_PROC_AGGREGATION_BOLLINGER_PERIOD",
        "DATA_PROC_AGGREGATION_BOLLINGER_K",
        "DATA_PROC_AGGREGATION_MOVING_AVERAGE_TYPE",
        "DATA_PROC_AGGREGATION_STD_DEV_MODE",
    ):
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


@pytest.fixture
def test_config(clean_env):
    """Aggregation configuration with defaults."""
    return AggregationConfig()
