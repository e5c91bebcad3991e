import numpy as np
import pandas as pd


def build_raw_pitches(
    n: int = 1000,
    *,
    pitch_type: str = "Fastball",
    whiff_rate: float = 0.15,
    throws: str = "Right",
    seed: int = 0,
) -> pd.DataFrame:
    """Build a raw TrackMan-style table of swings for one tagged pitch type.

    Exactly ``round(n * whiff_rate)`` rows are swinging strikes; the rest are
    split between balls in play and fouls. Whiffs carry a little more velocity,
    ride and height so a model has signal to find.
    """
    rng = np.random.default_rng(seed)
    n_whiff = int(round(n * whiff_rate))
    n_contact = n - n_whiff
    calls = np.array(
        ["StrikeSwinging"] * n_whiff
        + ["InPlay", "FoulBall"] * (n_contact // 2)
        + ["InPlay"] * (n_contact % 2)
    )
    rng.shuffle(calls)
    whiff = (calls == "StrikeSwinging").astype(float)
    in_play = calls == "InPlay"

    return pd.DataFrame({
        "PitcherId": rng.integers(1000, 1020, n),
        "BatterId": rng.integers(2000, 2100, n),
        "Date": "2024-04-01",
        "Balls": rng.integers(0, 4, n),
        "Strikes": rng.integers(0, 3, n),
        "TaggedPitchType": pitch_type,
        "PitchCall": calls,
        "TaggedHitType": np.where(in_play, "GroundBall", "Undefined"),
        "PlayResult": np.where(in_play, "Out", "Undefined"),
        "PitcherThrows": throws,
        "RelSpeed": rng.normal(92.0, 2.0, n) + whiff * 1.5,
        "SpinRate": rng.normal(2300.0, 150.0, n),
        "SpinAxis": rng.uniform(150.0, 250.0, n),
        "RelHeight": rng.normal(5.8, 0.3, n),
        "RelSide": rng.normal(-1.8, 0.4, n),
        "Extension": rng.normal(6.2, 0.3, n),
        "InducedVertBreak": rng.normal(15.0, 3.0, n) + whiff * 3.0,
        "HorzBreak": rng.normal(-8.0, 3.0, n),
        "PlateLocHeight": rng.normal(2.5, 0.6, n) + whiff * 0.5,
        "PlateLocSide": rng.normal(0.0, 0.7, n),
        "Angle": np.where(in_play, rng.normal(10.0, 20.0, n), np.nan),
    })


def raw_row(**overrides) -> dict:
    """A single right-handed fastball foul with every required column."""
    row = {
        "PitcherId": 1001,
        "BatterId": 2001,
        "Date": "2024-04-01",
        "Balls": 1,
        "Strikes": 1,
        "TaggedPitchType": "Fastball",
        "PitchCall": "FoulBall",
        "TaggedHitType": "Undefined",
        "PlayResult": "Undefined",
        "PitcherThrows": "Right",
        "RelSpeed": 93.1,
        "SpinRate": 2310.0,
        "SpinAxis": 210.0,
        "RelHeight": 5.9,
        "RelSide": -1.7,
        "Extension": 6.3,
        "InducedVertBreak": 16.2,
        "HorzBreak": -7.4,
        "PlateLocHeight": 2.6,
        "PlateLocSide": 0.1,
        "Angle": np.nan,
    }
    row.update(overrides)
    return row
