"""
Pitch Whiff Models

Per-pitch-type gradient-boosted classifiers predicting whether a swing
will miss, built from TrackMan pitch kinematics with and without pitch
location, with Platt-calibrated probabilities.
"""

from .data_processing import load_pitch_data, preprocess_pitches, partition_by_pitch_type
from .models import run_whiff_model, train_all_models
from .analysis import summarize_partitions, compare_feature_sets, generate_insights
from .visualization import print_model_report, plot_model_diagnostics, save_summary_report
from .exceptions import (
    WhiffModelError, SchemaError, UnmappedPitchTypeError,
    EmptyPartitionError, DegenerateLabelError
)

__version__ = "1.0"

__all__ = [
    'load_pitch_data',
    'preprocess_pitches',
    'partition_by_pitch_type',
    'run_whiff_model',
    'train_all_models',
    'summarize_partitions',
    'compare_feature_sets',
    'generate_insights',
    'print_model_report',
    'plot_model_diagnostics',
    'save_summary_report',
    'WhiffModelError',
    'SchemaError',
    'UnmappedPitchTypeError',
    'EmptyPartitionError',
    'DegenerateLabelError'
]
