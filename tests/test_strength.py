"""
Unit tests for ipt.strength (dosage strength, NBR 12655).
"""

import pytest

from ipt.errors import InvalidInput
from ipt.strength import (
    all_conditions,
    dosage_strength,
    dosage_strength_from_condition,
    infer_condition,
    standard_deviation,
)


class TestDosageStrength:
    """Tests for dosage_strength()."""

    def test_dosage_strength_when_condition_b_then_rounds_half_up(self):
        """30 + 1.65 * 5.5 = 39.075, published as 39.08."""
        assert dosage_strength(30.0, 5.5) == 39.08

    def test_dosage_strength_when_condition_a_then_fck_plus_quantile(self):
        assert dosage_strength(40.0, 4.0) == 46.6

    @pytest.mark.parametrize("fck, sd", [(0.0, 4.0), (-10.0, 4.0), (30.0, 0.0), (30.0, -1.0)])
    def test_dosage_strength_when_not_positive_then_raises_invalid_input(self, fck, sd):
        with pytest.raises(InvalidInput):
            dosage_strength(fck, sd)


class TestPreparationConditions:
    """Tests for the NBR 12655 condition helpers."""

    def test_standard_deviation_when_lowercase_padded_then_normalised(self):
        assert standard_deviation(" b ") == 5.5

    def test_standard_deviation_when_unknown_then_raises_invalid_input(self):
        with pytest.raises(InvalidInput):
            standard_deviation("D")

    def test_dosage_strength_from_condition_when_a_then_uses_sd_four(self):
        assert dosage_strength_from_condition(30.0, "A") == 36.6

    @pytest.mark.parametrize(
        "sd, expected",
        [(4.0, "A"), (5.5, "B"), (6.25, "B"), (7.0, "C"), (8.0, None)],
    )
    def test_infer_condition_when_declared_sd_then_closest_condition(self, sd, expected):
        assert infer_condition(sd) == expected

    def test_all_conditions_when_listed_then_three_entries_in_order(self):
        rows = all_conditions()

        assert [r["condition"] for r in rows] == ["A", "B", "C"]
        assert [r["sd"] for r in rows] == [4.0, 5.5, 7.0]
