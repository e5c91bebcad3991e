import pandas as pd
import pytest

from config import PITCH_CATEGORIES
from main import main, run_pitch_type_analysis
from whiff_models.exceptions import SchemaError


@pytest.fixture
def pitch_csv(mixed_raw_pitches: pd.DataFrame, tmp_path) -> str:
    path = tmp_path / "pitches.csv"
    mixed_raw_pitches.to_csv(path, index=False)
    return str(path)


class TestMain:
    def test_end_to_end(self, pitch_csv: str, tmp_path) -> None:
        output_dir = tmp_path / "results"

        df, partitions, results, comparison = main(pitch_csv, str(output_dir))

        assert len(df) == 600
        assert list(partitions) == PITCH_CATEGORIES
        assert set(results) == {
            ("Fastball", "with_location"),
            ("Fastball", "without_location"),
            ("Slider", "with_location"),
            ("Slider", "without_location"),
        }
        assert comparison["pitch_type"].tolist() == ["Fastball", "Slider"]
        assert (output_dir / "Slider_without_location.png").exists()
        assert (output_dir / "feature_set_comparison.png").exists()

        summary = (output_dir / "whiff_model_summary.txt").read_text(encoding="utf-8")
        assert "Skipped Runs:" in summary
        assert "Curveball/with_location" in summary

    def test_schema_error_aborts_before_training(self, mixed_raw_pitches: pd.DataFrame, tmp_path) -> None:
        path = tmp_path / "broken.csv"
        mixed_raw_pitches.drop(columns=["PitchCall"]).to_csv(path, index=False)

        with pytest.raises(SchemaError):
            main(str(path), str(tmp_path / "results"))
        assert not (tmp_path / "results").exists()

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            main(str(tmp_path / "missing.csv"), str(tmp_path / "results"))


class TestRunPitchTypeAnalysis:
    def test_both_feature_sets(self, pitch_csv: str, tmp_path) -> None:
        results = run_pitch_type_analysis("Slider", data_path=pitch_csv, output_dir=str(tmp_path))

        assert set(results) == {"with_location", "without_location"}
        assert all(r["pitch_type"] == "Slider" for r in results.values())
        assert (tmp_path / "Slider_with_location.png").exists()
