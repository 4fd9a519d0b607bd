"""
Unit tests for ipt.durability (NBR 6118 Tab. 7.1 limits).
"""

import pytest

from ipt.dataset import ElementType
from ipt.durability import (
    NormativeLimits,
    class_description,
    get_limits,
    validate_ac,
    validate_cement,
    validate_fck,
)
from ipt.errors import InvalidInput


class TestGetLimits:
    """Tests for get_limits()."""

    @pytest.mark.parametrize(
        "caa, element, expected",
        [
            (1, "CA", NormativeLimits(0.65, 20.0, 260.0)),
            (2, "CA", NormativeLimits(0.60, 25.0, 280.0)),
            (4, "CA", NormativeLimits(0.45, 40.0, 360.0)),
            (3, "CP", NormativeLimits(0.50, 35.0, 360.0)),
            (4, "CP", NormativeLimits(0.45, 40.0, 400.0)),
        ],
    )
    def test_get_limits_when_known_class_then_table_row(self, caa, element, expected):
        assert get_limits(caa, element) == expected

    def test_get_limits_when_enum_element_then_same_as_string(self):
        assert get_limits(2, ElementType.PRESTRESSED) == get_limits(2, "CP")

    def test_get_limits_when_unknown_class_then_raises_invalid_input(self):
        with pytest.raises(InvalidInput):
            get_limits(5, "CA")

    def test_get_limits_when_unknown_element_then_raises_invalid_input(self):
        with pytest.raises(InvalidInput):
            get_limits(2, "XX")

    def test_class_description_when_marine_class_then_strong(self):
        assert class_description(3).startswith("Strong")


class TestValidateFck:
    """Tests for validate_fck() (flag only, never adjusted in the dosage)."""

    def test_validate_fck_when_below_minimum_then_warning(self):
        result = validate_fck(20.0, 2, ElementType.REINFORCED)

        assert not result.valid
        assert result.adjusted == 25.0
        assert result.warning == "Minimum fck for CAA 2 (CA) is 25 MPa. Value given: 20 MPa"

    def test_validate_fck_when_at_minimum_then_valid(self):
        result = validate_fck(25.0, 2, "CA")

        assert result.valid
        assert result.warning is None


class TestValidateAc:
    """Tests for validate_ac()."""

    def test_validate_ac_when_above_maximum_then_clamped(self):
        result = validate_ac(0.62, 2, "CA")

        assert not result.valid
        assert result.original == 0.62
        assert result.adjusted == 0.60
        assert "limited from 0.620 to 0.6" in result.warning
        assert "CAA 2" in result.warning

    def test_validate_ac_when_equal_to_maximum_then_valid(self):
        result = validate_ac(0.60, 2, "CA")

        assert result.valid
        assert result.adjusted == 0.60


class TestValidateCement:
    """Tests for validate_cement()."""

    def test_validate_cement_when_below_minimum_then_raised(self):
        result = validate_cement(250.0, 1, "CA")

        assert not result.valid
        assert result.adjusted == 260.0
        assert result.warning.startswith("Cement content raised from 250 to 260 kg/m³")

    def test_validate_cement_when_above_minimum_then_unchanged(self):
        result = validate_cement(432.1, 4, "CP")

        assert result.valid
        assert result.adjusted == 432.1


class TestLimitsMonotonicity:
    """Harsher environments never relax a limit."""

    @pytest.mark.parametrize("element", ["CA", "CP"])
    def test_get_limits_when_class_rises_then_every_limit_tightens(self, element):
        rows = [get_limits(caa, element) for caa in (1, 2, 3, 4)]

        for looser, stricter in zip(rows, rows[1:]):
            assert stricter.max_ac < looser.max_ac
            assert stricter.min_fck > looser.min_fck
            assert stricter.min_cement > looser.min_cement

    @pytest.mark.parametrize("caa", [1, 2, 3, 4])
    def test_get_limits_when_prestressed_then_never_looser_than_reinforced(self, caa):
        reinforced = get_limits(caa, "CA")
        prestressed = get_limits(caa, "CP")

        assert prestressed.max_ac <= reinforced.max_ac
        assert prestressed.min_fck >= reinforced.min_fck
        assert prestressed.min_cement >= reinforced.min_cement
