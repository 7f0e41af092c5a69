"""Unit tests for the Bollinger Bands composite indicator."""

import numpy as np
import pytest

from aggregation.indicators import (
    BollingerBands,
    ExponentialMovingAverage,
    MovingAverageType,
    SimpleMovingAverage,
)
from shared.utils.errors import ConfigurationError


def _feed(bands, tick_generator, values):
    return [bands.update(point) for point in tick_generator.points_from_values(values)]


class TestBandAlgebra:
    """Test the relationship between the bands."""

    @pytest.mark.parametrize("ma_type", list(MovingAverageType))
    def test_bands_are_k_deviations_from_middle(self, tick_generator, ma_type):
        bands = BollingerBands(10, 2, ma_type)

        for point in tick_generator.points_from_values(tick_generator.oscillating_values(60)):
            bands.update(point)
            if not bands.is_ready:
                continue
            width = 2 * bands.standard_deviation.value
            assert bands.upper_band.value - bands.middle_band.value == pytest.approx(width)
            assert bands.middle_band.value - bands.lower_band.value == pytest.approx(width)

    def test_readings_match_reference(self, tick_generator):
        values = tick_generator.trending_values(40)
        bands = BollingerBands(20, 2)
        _feed(bands, tick_generator, values)

        window = values[-20:]
        assert bands.middle_band.value == pytest.approx(np.mean(window))
        assert bands.standard_deviation.value == pytest.approx(np.std(window))
        assert bands.upper_band.value == pytest.approx(np.mean(window) + 2 * np.std(window))
        assert bands.lower_band.value == pytest.approx(np.mean(window) - 2 * np.std(window))

    def test_fractional_k(self, tick_generator):
        bands = BollingerBands(5, 1.5)
        _feed(bands, tick_generator, [1, 2, 3, 4, 5])

        assert bands.upper_band.value == pytest.approx(3 + 1.5 * np.std([1, 2, 3, 4, 5]))


class TestReadiness:
    """Test readiness of the composite."""

    def test_ready_after_period_and_never_regresses(self, tick_generator):
        period = 5
        bands = BollingerBands(period, 2)
        readiness = []
        for point in tick_generator.points_from_values(tick_generator.oscillating_values(30)):
            bands.update(point)
            readiness.append(bands.is_ready)

        assert readiness == [False] * (period - 1) + [True] * (30 - period + 1)

    def test_exponential_middle_band_ready_after_period(self, tick_generator):
        bands = BollingerBands(3, 2, "exponential")
        _feed(bands, tick_generator, [1, 2])
        assert bands.is_ready is False

        _feed(bands, tick_generator, [3])
        assert bands.is_ready is True

    def test_reset_clears_children(self, tick_generator):
        bands = BollingerBands(3, 2)
        _feed(bands, tick_generator, [1, 2, 3, 4])
        bands.reset()

        assert bands.is_ready is False
        assert bands.standard_deviation.samples == 0
        assert bands.middle_band.samples == 0
        assert bands.upper_band.is_ready is False
        assert bands.lower_band.is_ready is False


class TestUpdateOrdering:
    """Test that dependencies see each sample before the bands are computed."""

    def test_identical_samples_collapse_bands(self, tick_generator):
        """period samples of 50 give zero deviation and all bands at 50."""
        bands = BollingerBands(20, 2)
        outputs = _feed(bands, tick_generator, [50] * 20)

        assert bands.is_ready is True
        assert bands.standard_deviation.value == 0.0
        assert bands.middle_band.value == 50.0
        assert bands.upper_band.value == 50.0
        assert bands.lower_band.value == 50.0
        assert outputs == [50.0] * 20

    def test_children_observe_each_sample_once(self, tick_generator):
        bands = BollingerBands(4, 2)
        _feed(bands, tick_generator, [10, 11, 12, 13, 14, 15])

        assert bands.samples == 6
        assert bands.standard_deviation.samples == 6
        assert bands.middle_band.samples == 6
        assert bands.upper_band.samples == 6
        assert bands.lower_band.samples == 6

    def test_bands_reflect_latest_sample(self, tick_generator):
        """After each update the upper band uses this sample's mean and deviation."""
        bands = BollingerBands(3, 1)
        values = [10, 20, 60]
        _feed(bands, tick_generator, values)

        assert bands.upper_band.value == pytest.approx(np.mean(values) + np.std(values))
        assert bands.upper_band.current.time == bands.current.time


class TestConstruction:
    """Test construction parameters."""

    def test_default_names(self):
        bands = BollingerBands(20, 2)

        assert bands.name == "BOL(20,2)"
        assert bands.middle_band.name == "BOL(20,2)_MiddleBand"
        assert bands.upper_band.name == "BOL(20,2)_UpperBand"
        assert bands.lower_band.name == "BOL(20,2)_LowerBand"
        assert bands.standard_deviation.name == "BOL(20,2)_StandardDeviation"

    def test_middle_band_type(self):
        assert isinstance(BollingerBands(10, 2).middle_band, SimpleMovingAverage)
        assert isinstance(BollingerBands(10, 2, "exponential").middle_band, ExponentialMovingAverage)

    @pytest.mark.parametrize("period", [0, -1])
    def test_invalid_period_rejected(self, period):
        with pytest.raises(ConfigurationError):
            BollingerBands(period, 2)

    def test_unknown_moving_average_type_rejected(self):
        with pytest.raises(ConfigurationError):
            BollingerBands(20, 2, "triangular-ish")

    def test_from_config(self, test_config):
        bands = BollingerBands.from_config(test_config)

        assert bands.period == 20
        assert bands.moving_average_type is MovingAverageType.SIMPLE
        assert bands.name == "BOL(20,2)"
