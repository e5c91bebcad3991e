"""
Data processing module for the pitch whiff modeling workflow.

Contains data loading, swing cleaning and handedness normalization,
pitch-type re-binning, partitioning, and feature extraction.
"""

import pandas as pd
import numpy as np
import logging
from typing import Dict, List, Tuple

from config import (
    RAW_COLUMNS, SWING_CALLS, WHIFF_CALL, UNDEFINED_HANDEDNESS, LEFT_HANDED,
    SPIN_AXIS_COLUMN, MIRRORED_ABS_COLUMNS, EXCLUDED_PITCH_TYPES,
    PITCH_TYPE_MAPPING, PITCH_CATEGORIES, PITCH_TYPE_COLUMN, LABEL_COLUMN
)
from .exceptions import SchemaError, UnmappedPitchTypeError

logger = logging.getLogger(__name__)


def load_pitch_data(path: str) -> pd.DataFrame:
    """
    Load a raw pitch-tracking table from a delimited file.

    Args:
        path (str): Path to the CSV export (one row per pitch)

    Returns:
        pd.DataFrame: Raw pitch records exactly as stored on disk

    Raises:
        FileNotFoundError: If the file does not exist
    """
    logger.info(f"Loading pitch data from {path}...")

    try:
        df = pd.read_csv(path, low_memory=False)
    except FileNotFoundError:
        logger.error(f"Pitch data file not found: {path}")
        raise

    logger.info(f"Loaded {len(df)} pitch records with {df.shape[1]} columns")
    return df


def log_step_counts(step: str, before: int, after: int):
    """Log how many rows a cleaning step removed."""
    removed = before - after
    logger.info(f"{step}: kept {after} of {before} rows ({removed} removed)")


def preprocess_pitches(raw_df: pd.DataFrame) -> pd.DataFrame:
    """
    Turn raw pitch records into analysis-ready swing records.

    The steps are order sensitive: handedness must be validated before the
    kinematic mirroring, and placeholder pitch tags must be dropped before
    re-binning so that the category mapping can be exhaustive.

    Cleaning Steps:
    1. Remove exact duplicate rows
    2. Project onto the recognized column set
    3. Keep swings only (in play, foul, swinging strike)
    4. Drop rows without a usable pitcher handedness
    5. Mirror spin axis for left-handed pitchers
    6. Take absolute release side and horizontal break for left-handed pitchers
    7. Drop untagged / placeholder pitch types
    8. Re-bin pitch tags into six categories
    9. Derive the binary Whiff label

    Args:
        raw_df (pd.DataFrame): Raw pitch records, left unmodified

    Returns:
        pd.DataFrame: Cleaned swing records with a numeric Whiff column

    Raises:
        SchemaError: If any required column is absent
        UnmappedPitchTypeError: If a pitch tag has no category after filtering
    """
    logger.info("Preprocessing pitch data...")

    df = raw_df.drop_duplicates()
    log_step_counts("Duplicate removal", len(raw_df), len(df))

    df = _select_columns(df)

    before = len(df)
    df = df[df['PitchCall'].isin(SWING_CALLS)]
    log_step_counts("Swing filter", before, len(df))

    before = len(df)
    df = df[df['PitcherThrows'].notna() & ~df['PitcherThrows'].isin(UNDEFINED_HANDEDNESS)]
    log_step_counts("Handedness filter", before, len(df))

    df = _normalize_handedness(df)

    before = len(df)
    tags = df[PITCH_TYPE_COLUMN]
    df = df[tags.notna() & ~tags.astype(str).str.strip().isin(EXCLUDED_PITCH_TYPES)]
    log_step_counts("Pitch type filter", before, len(df))

    df = _rebin_pitch_types(df)

    df[LABEL_COLUMN] = (df['PitchCall'] == WHIFF_CALL).astype(int)

    if df.empty:
        logger.warning("No swings left after cleaning")
    else:
        logger.info(f"Cleaned data: {len(df)} swings, whiff rate {df[LABEL_COLUMN].mean():.3f}")
    return df


def _select_columns(df: pd.DataFrame) -> pd.DataFrame:
    missing = [col for col in RAW_COLUMNS if col not in df.columns]
    if missing:
        logger.error(f"Missing required columns: {missing}")
        raise SchemaError(missing)
    return df[RAW_COLUMNS].copy()


def _normalize_handedness(df: pd.DataFrame) -> pd.DataFrame:
    """
    Mirror left-handed kinematics into a right-handed reference frame.

    Spin axis is reflected (360 - axis); release side and horizontal break
    become absolute values. Right-handed rows pass through unchanged.

    Args:
        df (pd.DataFrame): Swing records with a valid PitcherThrows column

    Returns:
        pd.DataFrame: Copy with mirrored kinematic columns
    """
    df = df.copy()
    lefty = df['PitcherThrows'] == LEFT_HANDED

    df.loc[lefty, SPIN_AXIS_COLUMN] = 360 - df.loc[lefty, SPIN_AXIS_COLUMN]
    for col in MIRRORED_ABS_COLUMNS:
        df.loc[lefty, col] = df.loc[lefty, col].abs()

    logger.info(f"Mirrored kinematics for {int(lefty.sum())} left-handed pitches")
    return df


def _rebin_pitch_types(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    tags = df[PITCH_TYPE_COLUMN].astype(str).str.strip()

    unmapped = set(tags[~tags.isin(PITCH_TYPE_MAPPING.keys())].unique())
    if unmapped:
        logger.error(f"Unmapped pitch types: {sorted(unmapped)}")
        raise UnmappedPitchTypeError(unmapped)

    df[PITCH_TYPE_COLUMN] = tags.map(PITCH_TYPE_MAPPING)
    return df


def partition_by_pitch_type(df: pd.DataFrame) -> Dict[str, pd.DataFrame]:
    """
    Split cleaned swings into one subset per pitch category.

    Every category in PITCH_CATEGORIES is present in the result, even when
    its subset is empty, so downstream training can report the gap instead
    of silently skipping it.

    Args:
        df (pd.DataFrame): Cleaned swing records

    Returns:
        Dict[str, pd.DataFrame]: Independent copies keyed by category
    """
    partitions = {}
    for category in PITCH_CATEGORIES:
        subset = df[df[PITCH_TYPE_COLUMN] == category].copy()
        partitions[category] = subset

        if subset.empty:
            logger.warning(f"No swings found for pitch category {category}")
        else:
            logger.info(f"{category}: {len(subset)} swings")

    return partitions


def create_single_pitch_features(df: pd.DataFrame, feature_cols: List[str],
                                 label_col: str = LABEL_COLUMN) -> Tuple[pd.DataFrame, pd.Series]:
    """
    Extract the feature matrix and target vector for one model.

    Feature values are coerced to numeric; unparseable or missing values stay
    as NaN and are routed by the booster's missing-value handling rather than
    dropping the row.

    Args:
        df (pd.DataFrame): Cleaned swings for a single pitch category
        feature_cols (List[str]): Column names to use as model features
        label_col (str): Target variable column name

    Returns:
        Tuple[pd.DataFrame, pd.Series]: (features, targets) sharing the row index
    """
    missing = [col for col in feature_cols + [label_col] if col not in df.columns]
    if missing:
        raise SchemaError(missing)

    X = df[feature_cols].apply(pd.to_numeric, errors='coerce').astype(np.float64)
    y = df[label_col].astype(int)

    return X, y
