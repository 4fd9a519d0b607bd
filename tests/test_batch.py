"""
Unit tests for ipt.batch (mixer batch planning).
"""

import math

import pytest

from ipt.batch import (
    MixerContainer,
    calculate_batches,
    calculate_batches_with_rounding,
    container_volume,
    is_valid_container,
)
from ipt.errors import InvalidInput
from ipt.field import Consumption


@pytest.fixture
def consumption():
    return Consumption(cement=400.0, sand=800.0, gravel=1000.0, water=200.0)


@pytest.fixture
def box():
    """0.1 m³ rectangular container."""
    return MixerContainer(shape="rectangular", length=0.5, height=0.4, width=0.5)


class TestContainerVolume:
    """Tests for container_volume() and is_valid_container()."""

    def test_container_volume_when_rectangular_then_product(self, box):
        assert container_volume(box) == pytest.approx(0.1)

    def test_container_volume_when_no_width_then_square_base(self):
        container = MixerContainer(shape="rectangular", length=0.5, height=0.4)

        assert container_volume(container) == pytest.approx(0.1)

    def test_container_volume_when_circular_then_cylinder(self):
        container = MixerContainer(shape="circular", length=1.0, height=1.0)

        assert container_volume(container) == pytest.approx(math.pi / 4)

    @pytest.mark.parametrize(
        "container",
        [
            MixerContainer(shape="triangular", length=1.0, height=1.0),
            MixerContainer(shape="circular", length=0.0, height=1.0),
            MixerContainer(shape="rectangular", length=1.0, height=1.0, width=-1.0),
        ],
    )
    def test_is_valid_container_when_bad_geometry_then_false(self, container):
        assert not is_valid_container(container)


class TestCalculateBatches:
    """Tests for calculate_batches() and calculate_batches_with_rounding()."""

    def test_calculate_batches_when_partial_batch_then_rounds_count_up(self, consumption, box):
        result = calculate_batches(consumption, box, 0.95)

        assert result.container_volume == 0.1
        assert result.number_of_batches == 10
        assert result.per_batch.cement == pytest.approx(40.0)
        assert result.total.cement == pytest.approx(380.0)
        assert result.total.gravel == pytest.approx(950.0)
        assert result.cement_bags_per_batch is None

    def test_calculate_batches_when_invalid_container_then_raises_invalid_input(self, consumption):
        with pytest.raises(InvalidInput):
            calculate_batches(consumption, MixerContainer("triangular", 1.0, 1.0), 1.0)

    def test_calculate_batches_when_volume_not_positive_then_raises_invalid_input(self, consumption, box):
        with pytest.raises(InvalidInput):
            calculate_batches(consumption, box, 0.0)

    def test_calculate_batches_with_rounding_when_bags_then_counts_whole_bags(self, consumption, box):
        result = calculate_batches_with_rounding(consumption, box, 0.95)

        assert result.number_of_batches == 10
        assert result.per_batch.cement == 40.0
        assert result.cement_bags_per_batch == 1
        assert result.total_cement_bags == 8
