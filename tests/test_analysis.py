import math

import pandas as pd
import pytest

from whiff_models.analysis import compare_feature_sets, generate_insights, summarize_partitions


def _result(accuracy: float, brier: float, calibrated: float, n_test: int = 100) -> dict:
    return {
        "accuracy": accuracy,
        "brier_score": brier,
        "calibrated_brier_score": calibrated,
        "n_test": n_test,
    }


@pytest.fixture
def results() -> dict:
    return {
        ("Fastball", "with_location"): _result(0.82, 0.140, 0.120),
        ("Fastball", "without_location"): _result(0.80, 0.150, 0.135),
        ("Slider", "with_location"): _result(0.70, 0.200, 0.180),
        ("Slider", "without_location"): _result(0.68, 0.205, 0.182),
        ("Cutter", "without_location"): _result(0.75, 0.170, 0.160),
    }


class TestSummarizePartitions:
    def test_counts_and_rates(self) -> None:
        partitions = {
            "Fastball": pd.DataFrame({"Whiff": [1, 0, 0, 0]}),
            "Cutter": pd.DataFrame({"Whiff": pd.Series([], dtype=int)}),
        }
        summary = summarize_partitions(partitions)

        assert summary["pitch_type"].tolist() == ["Fastball", "Cutter"]
        assert summary["swings"].tolist() == [4, 0]
        assert summary["whiffs"].tolist() == [1, 0]
        assert summary["whiff_rate"].iloc[0] == pytest.approx(0.25)
        assert math.isnan(summary["whiff_rate"].iloc[1])


class TestCompareFeatureSets:
    def test_rows_in_category_order(self, results: dict) -> None:
        comparison = compare_feature_sets(results)
        assert comparison["pitch_type"].tolist() == ["Fastball", "Cutter", "Slider"]

    def test_deltas(self, results: dict) -> None:
        comparison = compare_feature_sets(results).set_index("pitch_type")
        assert comparison.loc["Fastball", "brier_delta"] == pytest.approx(-0.010)
        assert comparison.loc["Fastball", "calibrated_brier_delta"] == pytest.approx(-0.015)
        assert comparison.loc["Fastball", "accuracy_delta"] == pytest.approx(0.02)

    def test_missing_run_leaves_nan(self, results: dict) -> None:
        comparison = compare_feature_sets(results).set_index("pitch_type")
        assert math.isnan(comparison.loc["Cutter", "accuracy_with"])
        assert math.isnan(comparison.loc["Cutter", "brier_delta"])
        assert comparison.loc["Cutter", "n_test_with"] == 0

    def test_no_results(self) -> None:
        assert compare_feature_sets({}).empty


class TestGenerateInsights:
    def test_location_value(self, results: dict) -> None:
        insights = generate_insights(compare_feature_sets(results))

        location = insights["Location Value"]
        assert location[0].startswith("Location helps Fastball the most")
        assert location[1].startswith("Location helps Slider the least")
        assert location[-1] == "Adding location lowered calibrated Brier score for 2 of 2 pitch types"
        assert len(insights["Model Quality"]) == 3
        assert "Skipped Runs" not in insights

    def test_reports_failures(self, results: dict) -> None:
        failures = [{"pitch_type": "Curveball", "feature_set": "with_location", "error": "too few swings"}]
        insights = generate_insights(compare_feature_sets(results), failures)
        assert insights["Skipped Runs"] == ["Curveball/with_location: too few swings"]

    def test_empty_comparison(self) -> None:
        failures = [{"pitch_type": "Slider", "feature_set": "with_location", "error": "no swings"}]
        insights = generate_insights(pd.DataFrame(), failures)
        assert insights["No Analysis"] == ["No pitch category produced a trained model"]
        assert insights["Skipped Runs"] == ["Slider/with_location: no swings"]
