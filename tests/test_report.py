"""
Unit tests for ipt.report (tables shared by the CLI and the Streamlit app).
"""

from dataclasses import replace

import pytest

from ipt.design import calculate_dosage
from ipt.field import Consumption
from ipt.report import coefficients_frame, law_curves, materials_frame, results_download_payload


@pytest.fixture
def out(canonical_points, canonical_target):
    return calculate_dosage(canonical_points, canonical_target)


class TestMaterialsFrame:
    """Tests for materials_frame()."""

    def test_materials_frame_when_nominal_then_four_materials_and_total(self, out):
        df = materials_frame(out)

        assert list(df["Material"]) == ["Cement", "Sand", "Gravel", "Water", "Total"]
        assert df.loc[0, "Unit trace"] == 1.0
        assert df.loc[4, "Mass share (%)"] == 100.0

    def test_materials_frame_when_summed_then_total_matches(self, out):
        df = materials_frame(out)

        assert df["Consumption"].iloc[:4].sum() == pytest.approx(df.loc[4, "Consumption"], abs=0.1)


class TestCoefficientsFrame:
    """Tests for coefficients_frame()."""

    def test_coefficients_frame_when_nominal_then_one_row_per_law(self, out):
        df = coefficients_frame(out.coefficients)

        assert list(df["Law"]) == ["Abrams", "Lyse", "Molinari"]
        assert df.loc[0, "A value"] == out.coefficients.abrams.k1
        assert df.loc[2, "B value"] == out.coefficients.molinari.k6


class TestLawCurves:
    """Tests for law_curves()."""

    def test_law_curves_when_default_grid_then_monotonic_strength(self, out):
        df = law_curves(out.coefficients)

        assert len(df) == 61
        assert list(df.columns) == ["a/c", "fcj (MPa)", "m", "C (kg/m³)"]
        assert df["fcj (MPa)"].is_monotonic_decreasing
        assert df["m"].is_monotonic_increasing


class TestResultsDownloadPayload:
    """Tests for results_download_payload()."""

    def test_results_download_payload_when_nominal_then_single_row(self, out, canonical_target):
        df = results_download_payload(out, canonical_target)

        assert len(df) == 1
        assert df.loc[0, "fcj_target_MPa"] == 39.08
        assert df.loc[0, "element_type"] == "CA"
        assert df.loc[0, "max_ac"] == 0.60
        assert df.loc[0, "warnings"] == ""


class TestMaterialsFrameRounding:
    """The total row rounds like every other published quantity."""

    def test_materials_frame_when_total_ends_in_half_then_rounds_away_from_zero(self, out):
        exact_half = replace(out, consumption=Consumption(cement=100.0, sand=0.25, gravel=0.0, water=0.0))

        df = materials_frame(exact_half)

        assert df.loc[4, "Consumption"] == 100.3
