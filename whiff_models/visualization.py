"""
Visualization and reporting functionality for whiff model results.

Contains functions for console reports, diagnostic charts, and the plain-text summary.
"""

import os
import logging
from typing import Dict, List

import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd

from config import PLOT_CONFIG, TARGET_NAMES

logger = logging.getLogger(__name__)


def format_confusion_matrix(cm: pd.DataFrame) -> str:
    """Render a 2x2 confusion table with readable labels."""
    table = cm.copy()
    table.index = [f"Actual {name}" for name in TARGET_NAMES]
    table.columns = [f"Pred {name}" for name in TARGET_NAMES]
    return table.to_string()


def print_model_report(result: Dict):
    """Print the metrics block, confusion table and importance ranking for one run.

    Args:
        result (Dict): Model artifact from run_whiff_model.
    """
    title = f"{result['pitch_type']} - {result['feature_set']}"
    print("\n" + "=" * 60)
    print(title)
    print("=" * 60)
    print(f"Train / calibration / test rows: {result['n_train']} / {result['n_calibration']} / {result['n_test']}")
    print(f"Test whiff rate:        {result['test_whiff_rate']:.3f}")
    print(f"Accuracy:               {result['accuracy']:.4f}")
    print(f"Brier score:            {result['brier_score']:.4f}")
    print(f"Calibrated Brier score: {result['calibrated_brier_score']:.4f} "
          f"(calibrated on {result['calibration_source']} rows)")

    print("\nConfusion Matrix:")
    print(format_confusion_matrix(result['confusion_matrix']))

    print("\nFeature Importance (gain):")
    for _, row in result['feature_importance'].iterrows():
        print(f"  {row['feature']:<18} {row['gain']:.3f}")


def plot_model_diagnostics(result: Dict, output_dir: str = None) -> plt.Figure:
    """Create the importance chart and raw/calibrated probability histograms for one run.

    Args:
        result (Dict): Model artifact from run_whiff_model.
        output_dir (str): Directory for the PNG; nothing is saved when None.

    Returns:
        plt.Figure: The figure, closed unless PLOT_CONFIG['show'] is set.

    Notes:
        - Files are named '<pitch_type>_<feature_set>.png'.
    """
    fig, axes = plt.subplots(1, 3, figsize=(18, 5))
    title = f"{result['pitch_type']} ({result['feature_set']})"

    # Feature importance
    importance = result['feature_importance']
    sns.barplot(data=importance, x='gain', y='feature', ax=axes[0], color='steelblue')
    axes[0].set_xlabel('Gain')
    axes[0].set_ylabel('')
    axes[0].set_title(f'Feature Importance - {title}')

    # Raw probabilities
    bins = PLOT_CONFIG['histogram_bins']
    sns.histplot(result['probabilities'], bins=bins, binrange=(0, 1), ax=axes[1], color='lightcoral')
    axes[1].set_xlabel('Predicted Whiff Probability')
    axes[1].set_title(f"Raw Probabilities (Brier {result['brier_score']:.4f})")

    # Calibrated probabilities
    sns.histplot(result['calibrated_probabilities'], bins=bins, binrange=(0, 1), ax=axes[2], color='seagreen')
    axes[2].set_xlabel('Calibrated Whiff Probability')
    axes[2].set_title(f"Calibrated Probabilities (Brier {result['calibrated_brier_score']:.4f})")

    for ax in axes[1:]:
        ax.grid(True, alpha=0.3)

    fig.tight_layout()

    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
        filename = os.path.join(output_dir, f"{result['pitch_type']}_{result['feature_set']}.png")
        fig.savefig(filename, dpi=PLOT_CONFIG['dpi'], bbox_inches='tight')
        logger.info(f"Diagnostics saved as '{filename}'")

    if PLOT_CONFIG['show']:
        plt.show()
    else:
        plt.close(fig)
    return fig


def plot_feature_set_comparison(comparison: pd.DataFrame, output_dir: str = None) -> plt.Figure:
    """Heatmap of calibrated Brier scores by pitch type, with and without location.

    Args:
        comparison (pd.DataFrame): Output of compare_feature_sets.
        output_dir (str): Directory for 'feature_set_comparison.png'; nothing is saved when None.
    """
    if comparison.empty:
        logger.warning("No model comparison data to plot")
        return None

    heat = comparison.set_index('pitch_type')[['calibrated_brier_with', 'calibrated_brier_without']]
    heat.columns = ['With Location', 'Without Location']

    fig, ax = plt.subplots(figsize=(8, 6))
    sns.heatmap(heat, annot=True, fmt='.4f', cmap='RdYlBu_r', ax=ax)
    ax.set_title('Calibrated Brier Score by Pitch Type\n(lower is better)')
    ax.set_xlabel('')
    ax.set_ylabel('Pitch Type')
    fig.tight_layout()

    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
        filename = os.path.join(output_dir, 'feature_set_comparison.png')
        fig.savefig(filename, dpi=PLOT_CONFIG['dpi'], bbox_inches='tight')
        logger.info(f"Comparison heatmap saved as '{filename}'")

    if PLOT_CONFIG['show']:
        plt.show()
    else:
        plt.close(fig)
    return fig


def save_summary_report(partition_summary: pd.DataFrame, comparison: pd.DataFrame,
                        insights: Dict[str, List[str]], filename: str = "whiff_model_summary.txt"):
    """Generate and save a plain-text summary of the whole batch.

    Args:
        partition_summary (pd.DataFrame): Output of summarize_partitions
        comparison (pd.DataFrame): Output of compare_feature_sets
        insights (Dict[str, List[str]]): Output of generate_insights
        filename (str): Output text file name
    """
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(filename, 'w', encoding='utf-8') as f:
        f.write("PITCH WHIFF MODELS - ANALYSIS SUMMARY\n")
        f.write("=" * 50 + "\n\n")

        f.write("SWINGS BY PITCH TYPE\n")
        f.write("-" * 20 + "\n")
        for _, row in partition_summary.iterrows():
            rate = f"{row['whiff_rate']:.1%}" if pd.notna(row['whiff_rate']) else "n/a"
            f.write(f"  {row['pitch_type']:<14} {int(row['swings']):>7} swings, whiff rate {rate}\n")

        f.write("\nMODEL PERFORMANCE (WITH vs WITHOUT LOCATION)\n")
        f.write("-" * 44 + "\n")
        if comparison.empty:
            f.write("  No models trained\n")
        for _, row in comparison.iterrows():
            f.write(f"  {row['pitch_type']}: ")
            f.write(f"accuracy {row['accuracy_with']:.3f} / {row['accuracy_without']:.3f}, ")
            f.write(f"Brier {row['brier_with']:.4f} / {row['brier_without']:.4f}, ")
            f.write(f"calibrated Brier {row['calibrated_brier_with']:.4f} / {row['calibrated_brier_without']:.4f}\n")

        f.write("\nINSIGHTS\n")
        f.write("-" * 8 + "\n")
        for category, items in insights.items():
            f.write(f"\n{category}:\n")
            for item in items:
                f.write(f"  • {item}\n")

    logger.info(f"Summary report saved as '{filename}'")
