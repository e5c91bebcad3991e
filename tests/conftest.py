"""Shared pytest fixtures for test modules."""

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from tests.helpers import build_raw_pitches
from whiff_models.data_processing import preprocess_pitches


@pytest.fixture
def fastball_swings() -> pd.DataFrame:
    """1000 cleaned Fastball swings with a 15% whiff rate."""
    return preprocess_pitches(build_raw_pitches(1000, pitch_type="FourSeamFastBall", whiff_rate=0.15))


@pytest.fixture
def mixed_raw_pitches() -> pd.DataFrame:
    """Raw swings for two pitch types from pitchers of both hands."""
    return pd.concat(
        [
            build_raw_pitches(300, pitch_type="Fastball", whiff_rate=0.15, throws="Right", seed=1),
            build_raw_pitches(300, pitch_type="Slider", whiff_rate=0.35, throws="Left", seed=2),
        ],
        ignore_index=True,
    )
