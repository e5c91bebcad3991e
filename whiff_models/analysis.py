"""
Analysis module for comparing whiff models across pitch types and feature sets.

Contains functions for summarizing pitch-type partitions, measuring the
marginal value of pitch location, and generating plain-language insights.
"""

import pandas as pd
import logging
from typing import Dict, List

from config import PITCH_CATEGORIES, LABEL_COLUMN

logger = logging.getLogger(__name__)


def summarize_partitions(partitions: Dict[str, pd.DataFrame]) -> pd.DataFrame:
    """Count swings and whiffs for each pitch category.

    Args:
        partitions (Dict[str, pd.DataFrame]): Cleaned swings keyed by category.

    Returns:
        pd.DataFrame: One row per category with swings, whiffs, and whiff_rate
            (NaN for empty categories), in partition order.
    """
    rows = []
    for pitch_type, subset in partitions.items():
        swings = len(subset)
        whiffs = int(subset[LABEL_COLUMN].sum()) if swings else 0
        rows.append({
            'pitch_type': pitch_type,
            'swings': swings,
            'whiffs': whiffs,
            'whiff_rate': whiffs / swings if swings else float('nan')
        })
    return pd.DataFrame(rows, columns=['pitch_type', 'swings', 'whiffs', 'whiff_rate'])


def compare_feature_sets(results: Dict, with_set: str = 'with_location',
                         without_set: str = 'without_location') -> pd.DataFrame:
    """
    Compare each pitch category's model with and without location features.

    Negative Brier deltas mean adding location improved the model. Categories
    missing either run keep NaN for the unavailable metrics.

    Args:
        results (Dict): Model artifacts keyed by (pitch_type, feature_set)
        with_set (str): Name of the feature set that includes location
        without_set (str): Name of the feature set that excludes location

    Returns:
        pd.DataFrame: One row per pitch category that produced at least one model
    """
    pitch_types = [p for p in PITCH_CATEGORIES if any(key[0] == p for key in results)]
    pitch_types += sorted({key[0] for key in results} - set(pitch_types))

    rows = []
    for pitch_type in pitch_types:
        row = {'pitch_type': pitch_type}
        for suffix, feature_set in (('with', with_set), ('without', without_set)):
            result = results.get((pitch_type, feature_set))
            row[f'accuracy_{suffix}'] = result['accuracy'] if result else float('nan')
            row[f'brier_{suffix}'] = result['brier_score'] if result else float('nan')
            row[f'calibrated_brier_{suffix}'] = result['calibrated_brier_score'] if result else float('nan')
            row[f'n_test_{suffix}'] = result['n_test'] if result else 0

        row['accuracy_delta'] = row['accuracy_with'] - row['accuracy_without']
        row['brier_delta'] = row['brier_with'] - row['brier_without']
        row['calibrated_brier_delta'] = row['calibrated_brier_with'] - row['calibrated_brier_without']
        rows.append(row)

    return pd.DataFrame(rows)


def generate_insights(comparison: pd.DataFrame, failures: List[Dict] = None) -> Dict[str, List[str]]:
    """Translate the feature-set comparison into concise, readable findings.

    Args:
        comparison (pd.DataFrame): Output of compare_feature_sets.
        failures (List[Dict]): Failure records from train_all_models.

    Returns:
        Dict[str, List[str]]: Buckets of findings on location value, model
            quality, and runs that could not be trained.
    """
    failures = failures or []

    if comparison.empty:
        insights = {"No Analysis": ["No pitch category produced a trained model"]}
        if failures:
            insights["Skipped Runs"] = [f"{f['pitch_type']}/{f['feature_set']}: {f['error']}" for f in failures]
        return insights

    insights = {
        "Location Value": [],
        "Model Quality": [],
        "Skipped Runs": []
    }

    paired = comparison.dropna(subset=['calibrated_brier_delta'])
    if not paired.empty:
        paired = paired.sort_values('calibrated_brier_delta')
        best = paired.iloc[0]
        worst = paired.iloc[-1]

        insights["Location Value"].append(
            f"Location helps {best['pitch_type']} the most: calibrated Brier "
            f"{best['calibrated_brier_without']:.4f} -> {best['calibrated_brier_with']:.4f}"
        )
        if worst['pitch_type'] != best['pitch_type']:
            insights["Location Value"].append(
                f"Location helps {worst['pitch_type']} the least: calibrated Brier "
                f"{worst['calibrated_brier_without']:.4f} -> {worst['calibrated_brier_with']:.4f}"
            )

        improved = paired[paired['calibrated_brier_delta'] < 0]
        insights["Location Value"].append(
            f"Adding location lowered calibrated Brier score for {len(improved)} of {len(paired)} pitch types"
        )

    for _, row in comparison.iterrows():
        brier = row['calibrated_brier_with'] if pd.notna(row['calibrated_brier_with']) else row['calibrated_brier_without']
        accuracy = row['accuracy_with'] if pd.notna(row['accuracy_with']) else row['accuracy_without']
        insights["Model Quality"].append(
            f"{row['pitch_type']}: accuracy {accuracy:.1%}, calibrated Brier {brier:.4f}"
        )

    for failure in failures:
        insights["Skipped Runs"].append(
            f"{failure['pitch_type']}/{failure['feature_set']}: {failure['error']}"
        )

    return {category: items for category, items in insights.items() if items}
