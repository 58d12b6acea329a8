"""Tests for the tabular reports."""
import pandas as pd
import pytest

from tubcalc.calculator import TubCalculator
from tubcalc.report import (
    SUMMARY_COLUMNS,
    relative_intensity,
    summary_table,
    profile_table,
    save_report,
)


@pytest.fixture
def results(tub, frame, materials):
    return TubCalculator(tub, frame, materials).run()


class TestSummaryTable:

    def test_rows_and_columns(self, results):
        df = summary_table(results)
        assert list(df.columns) == SUMMARY_COLUMNS
        assert list(df["component"]) == ["bottom", "short_wall", "long_wall", "extrusion"]

    def test_mm_conversion(self, results):
        df = summary_table(results).set_index("component")
        assert df.loc["bottom", "delta_max_mm"] == pytest.approx(results.bottom.delta_max * 25.4)


class TestProfileTable:

    def test_labels(self, results):
        df = profile_table(results)
        assert len(df) == 11 + 5 + 11
        bottom = df[df["surface"] == "bottom"]
        assert list(bottom["point"]) == list(range(1, 12))

    def test_mm_columns(self, results):
        df = profile_table(results)
        assert (df["position_mm"] == df["position_in"] * 25.4).all()
        assert (df["deflection_mm"] == df["deflection_in"] * 25.4).all()


class TestRelativeIntensity:

    def test_normalized_to_peak(self):
        intensity = relative_intensity({"bottom": 0.5, "extrusion": 0.25})
        assert intensity == {"bottom": 1.0, "extrusion": 0.5}

    def test_all_zero(self):
        assert relative_intensity({"bottom": 0.0}) == {"bottom": 0.0}

    def test_empty(self):
        assert relative_intensity({}) == {}


class TestSaveReport:

    def test_writes_csv(self, results, tmp_path):
        save_report(results, tmp_path / "out")
        summary = pd.read_csv(tmp_path / "out" / "summary.csv")
        profiles = pd.read_csv(tmp_path / "out" / "profiles.csv")
        assert len(summary) == 4
        assert len(profiles) == 27
