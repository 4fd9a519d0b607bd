"""
Unit tests for ipt.aggregates (sand / gravel split by mortar content).
"""

import pytest

from ipt.aggregates import mortar_content_of, split_dry_ratio, split_warnings


class TestSplitDryRatio:
    """Tests for split_dry_ratio()."""

    def test_split_dry_ratio_when_half_mortar_then_sand_and_gravel(self):
        sand, gravel = split_dry_ratio(5.0, 50.0)

        assert sand == pytest.approx(2.0)
        assert gravel == pytest.approx(3.0)

    def test_split_dry_ratio_when_recombined_then_mortar_content_recovered(self):
        sand, gravel = split_dry_ratio(4.2, 52.0)

        assert sand + gravel == pytest.approx(4.2)
        assert mortar_content_of(sand, 4.2) == pytest.approx(52.0)

    def test_split_dry_ratio_when_mortar_too_low_then_negative_sand_returned(self):
        """Non-physical shares are returned, not raised."""
        sand, _ = split_dry_ratio(3.9157, 15.0)

        assert sand < 0


class TestSplitWarnings:
    """Tests for split_warnings()."""

    def test_split_warnings_when_both_positive_then_empty(self):
        assert split_warnings(1.5, 2.4, 52.0) == []

    def test_split_warnings_when_sand_negative_then_sand_message(self):
        warnings = split_warnings(-0.26, 4.18, 15.0)

        assert len(warnings) == 1
        assert "Mortar content (15%)" in warnings[0]
        assert "sand" in warnings[0]

    def test_split_warnings_when_gravel_negative_then_gravel_message(self):
        warnings = split_warnings(5.5, -0.5, 95.0)

        assert len(warnings) == 1
        assert "gravel" in warnings[0]
