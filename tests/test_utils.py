"""
Unit tests for ipt.utils rounding helpers.
"""

import math

import pytest

from ipt.utils import round_half_away, round_to_increment


class TestRoundHalfAway:
    """Tests for round_half_away()."""

    @pytest.mark.parametrize(
        "value, decimals, expected",
        [
            (2.5, 0, 3.0),
            (-2.5, 0, -3.0),
            (0.125, 2, 0.13),
            (39.075, 2, 39.08),
            (1.23449, 3, 1.234),
        ],
    )
    def test_round_half_away_when_half_then_rounds_away_from_zero(self, value, decimals, expected):
        """Halves go away from zero, unlike Python's banker's round()."""
        assert round_half_away(value, decimals) == expected

    def test_round_half_away_when_tiny_negative_then_returns_positive_zero(self):
        """A value that rounds to zero never comes back as -0.0."""
        result = round_half_away(-0.0001, 2)

        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0


class TestRoundToIncrement:
    """Tests for round_to_increment()."""

    def test_round_to_increment_when_bag_size_then_nearest_multiple(self):
        assert round_to_increment(432.07, 50) == 450.0
        assert round_to_increment(7.0, 5) == 5.0

    def test_round_to_increment_when_exact_half_then_rounds_up(self):
        assert round_to_increment(12.5, 5) == 15.0
