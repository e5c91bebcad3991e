"""
Main execution file for the pitch whiff modeling workflow.

This file orchestrates the complete pipeline from data loading through
per-pitch-type model training, evaluation, and reporting.
"""

import os
import logging
import warnings

import pandas as pd

from whiff_models.data_processing import load_pitch_data, preprocess_pitches, partition_by_pitch_type
from whiff_models.models import train_all_models, run_whiff_model
from whiff_models.analysis import summarize_partitions, compare_feature_sets, generate_insights
from whiff_models.visualization import (
    print_model_report, plot_model_diagnostics, plot_feature_set_comparison, save_summary_report
)
from config import DATA_DIR, DATA_FILE, RESULTS_DIR, FEATURE_SETS

# Configure logging and suppress warnings for cleaner output
warnings.filterwarnings('ignore')
logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')
logger = logging.getLogger(__name__)


def main(data_path: str = os.path.join(DATA_DIR, DATA_FILE), output_dir: str = RESULTS_DIR):
    """Run the end-to-end pipeline: load, clean, partition, train, evaluate, report.

    Steps:
        1) Load the raw pitch table.
        2) Clean swings, mirror left-handed kinematics, re-bin pitch types, label whiffs.
        3) Partition swings into the six pitch categories.
        4) Train one model per category with and without location features.
        5) Print per-run metrics and save diagnostic charts.
        6) Compare feature sets and write the summary report.

    Args:
        data_path (str): CSV file with raw pitch records.
        output_dir (str): Directory for charts and the summary report.

    Returns:
        Tuple: (df, partitions, results, comparison)
            - df: Cleaned swing records.
            - partitions: Cleaned swings keyed by pitch category.
            - results: Model artifacts keyed by (pitch_type, feature_set).
            - comparison: Per-category metrics with and without location.
    """
    logger.info("Starting pitch whiff modeling...")

    try:
        logger.info("Step 1: Loading pitch data...")
        raw_df = load_pitch_data(data_path)

        logger.info("Step 2: Cleaning swings...")
        df = preprocess_pitches(raw_df)

        logger.info("Step 3: Partitioning by pitch type...")
        partitions = partition_by_pitch_type(df)
        partition_summary = summarize_partitions(partitions)
        print(partition_summary.round(4).to_string(index=False))

        logger.info("Step 4: Training whiff models...")
        results, failures = train_all_models(partitions, FEATURE_SETS)

        logger.info("Step 5: Reporting model results...")
        for result in results.values():
            print_model_report(result)
            plot_model_diagnostics(result, output_dir)

        logger.info("Step 6: Comparing feature sets...")
        comparison = compare_feature_sets(results)
        if not comparison.empty:
            print("\nFeature Set Comparison:")
            print(comparison.round(4).to_string(index=False))
        plot_feature_set_comparison(comparison, output_dir)

        insights = generate_insights(comparison, failures)
        logger.info("\nInsights:")
        for category, items in insights.items():
            logger.info(f"\n{category}:")
            for item in items:
                logger.info(f"  • {item}")

        save_summary_report(partition_summary, comparison, insights,
                            os.path.join(output_dir, "whiff_model_summary.txt"))

        logger.info("Pitch whiff modeling completed successfully!")

        return df, partitions, results, comparison

    except Exception as e:
        logger.error(f"Error in main execution: {str(e)}")
        raise


def run_pitch_type_analysis(pitch_type: str, df: pd.DataFrame = None,
                            data_path: str = os.path.join(DATA_DIR, DATA_FILE),
                            output_dir: str = RESULTS_DIR):
    """Train and report both feature sets for a single pitch category.

    Args:
        pitch_type (str): Category name, e.g. "Slider"
        df: Cleaned swing records (optional, loaded and cleaned if not provided)
        data_path (str): CSV file used when df is not provided
        output_dir (str): Directory for diagnostic charts

    Returns:
        Dict: Model artifacts keyed by feature set name
    """
    if df is None:
        df = preprocess_pitches(load_pitch_data(data_path))

    subset = partition_by_pitch_type(df)[pitch_type]

    results = {}
    for feature_set, feature_cols in FEATURE_SETS.items():
        result = run_whiff_model(subset, feature_cols, pitch_type, feature_set)
        print_model_report(result)
        plot_model_diagnostics(result, output_dir)
        results[feature_set] = result
    return results


if __name__ == "__main__":
    # Run the complete modeling pipeline
    df, partitions, results, comparison = main()

    # Optional: Re-run a single pitch category
    # Uncomment and modify the pitch type as needed
    # run_pitch_type_analysis("Slider", df)

    print("\nAnalysis complete! Check the generated files:")
    print(f"- {RESULTS_DIR}/<pitch_type>_<feature_set>.png (diagnostics)")
    print(f"- {RESULTS_DIR}/feature_set_comparison.png (location comparison)")
    print(f"- {RESULTS_DIR}/whiff_model_summary.txt (summary report)")
