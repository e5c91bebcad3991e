"""
Gradient-boosted whiff models and training functionality.

Contains the classifier definition, stratified splitting, Platt calibration,
evaluation, and the per-pitch-type batch runner.
"""

import numpy as np
import pandas as pd
import xgboost as xgb
from sklearn.linear_model import LogisticRegression
from sklearn.metrics import accuracy_score, brier_score_loss, confusion_matrix
from sklearn.model_selection import StratifiedShuffleSplit
import logging
from typing import Dict, List, Tuple

from config import (
    MODEL_CONFIG, SPLIT_CONFIG, MIN_SAMPLES, DECISION_THRESHOLD,
    FEATURE_SETS, LABEL_COLUMN
)
from .data_processing import create_single_pitch_features
from .exceptions import WhiffModelError, EmptyPartitionError, DegenerateLabelError

logger = logging.getLogger(__name__)


def build_whiff_classifier(**overrides) -> xgb.XGBClassifier:
    """Create an unfitted XGBoost classifier with the fixed whiff hyperparameters."""
    params = dict(MODEL_CONFIG)
    params.update(overrides)
    return xgb.XGBClassifier(**params)


def validate_training_subset(subset: pd.DataFrame, pitch_type: str,
                             label_col: str = LABEL_COLUMN):
    """
    Check that a pitch-type subset can support a binary classifier.

    Args:
        subset (pd.DataFrame): Cleaned swings for one pitch category
        pitch_type (str): Category name, used in error messages
        label_col (str): Binary target column

    Raises:
        EmptyPartitionError: Fewer than MIN_SAMPLES['partition_rows'] rows
        DegenerateLabelError: A single label value, or too few minority rows
            to stratify the train/test and calibration splits
    """
    n_rows = len(subset)
    if n_rows < MIN_SAMPLES['partition_rows']:
        raise EmptyPartitionError(pitch_type, n_rows, MIN_SAMPLES['partition_rows'])

    counts = subset[label_col].value_counts().to_dict()
    if len(counts) < 2:
        raise DegenerateLabelError(pitch_type, counts, "only one Whiff value present")

    minority = min(counts.values())
    if minority < MIN_SAMPLES['class_rows']:
        raise DegenerateLabelError(
            pitch_type, counts,
            f"minority class has {minority} rows, at least {MIN_SAMPLES['class_rows']} required"
        )


def stratified_split(X: pd.DataFrame, y: pd.Series,
                     test_size: float = SPLIT_CONFIG['test_size'],
                     random_state: int = SPLIT_CONFIG['random_state']) -> Tuple[np.ndarray, np.ndarray]:
    """
    Split rows into two stratified, reproducible partitions.

    Args:
        X (pd.DataFrame): Feature matrix
        y (pd.Series): Binary target used for stratification
        test_size (float): Share of rows assigned to the second partition
        random_state (int): Seed controlling the assignment

    Returns:
        Tuple[np.ndarray, np.ndarray]: Positional indices of (train, test) rows
    """
    sss = StratifiedShuffleSplit(n_splits=1, test_size=test_size, random_state=random_state)
    train_idx, test_idx = next(sss.split(X, y))
    return train_idx, test_idx


def fit_platt_calibrator(probabilities: np.ndarray, actuals: np.ndarray,
                         pitch_type: str = "") -> LogisticRegression:
    """
    Fit a one-variable logistic regression from raw probability to outcome.

    Args:
        probabilities (np.ndarray): Raw P(whiff) from the booster
        actuals (np.ndarray): True Whiff labels for the same rows
        pitch_type (str): Category name, used in error messages

    Returns:
        LogisticRegression: Fitted Platt calibrator

    Raises:
        DegenerateLabelError: If the calibration rows contain a single label
    """
    actuals = np.asarray(actuals).astype(int)
    if len(np.unique(actuals)) < 2:
        counts = pd.Series(actuals).value_counts().to_dict()
        raise DegenerateLabelError(pitch_type, counts, "calibration rows contain a single Whiff value")

    calibrator = LogisticRegression()
    calibrator.fit(np.asarray(probabilities).reshape(-1, 1), actuals)
    return calibrator


def calibrate_probabilities(calibrator: LogisticRegression, probabilities: np.ndarray) -> np.ndarray:
    return calibrator.predict_proba(np.asarray(probabilities).reshape(-1, 1))[:, 1]


def get_feature_importance(model: xgb.XGBClassifier, feature_cols: List[str]) -> pd.DataFrame:
    """Rank features by total split gain; features never split on score 0."""
    scores = model.get_booster().get_score(importance_type='gain')
    importance = pd.DataFrame({
        'feature': feature_cols,
        'gain': [float(scores.get(col, 0.0)) for col in feature_cols]
    })
    return importance.sort_values('gain', ascending=False, kind='mergesort').reset_index(drop=True)


def evaluate_whiff_model(model: xgb.XGBClassifier, X_test: pd.DataFrame, y_test: pd.Series,
                         threshold: float = DECISION_THRESHOLD) -> Dict:
    """Evaluate a fitted whiff model on held-out test rows.

    Args:
        model (xgb.XGBClassifier): Fitted classifier.
        X_test (pd.DataFrame): Test features in training column order.
        y_test (pd.Series): True Whiff labels.
        threshold (float): Probability at or above which a whiff is predicted.

    Returns:
        Dict: Dictionary containing:
            - accuracy (float): Share of hard predictions matching the label.
            - brier_score (float): Mean squared error of raw probabilities.
            - confusion_matrix (pd.DataFrame): Counts indexed by actual, columns predicted.
            - predictions (np.ndarray): Hard 0/1 predictions.
            - probabilities (np.ndarray): Raw P(whiff) per row.
            - actuals (np.ndarray): True labels for comparison.
    """
    probabilities = model.predict_proba(X_test)[:, 1]
    predictions = (probabilities >= threshold).astype(int)
    actuals = np.asarray(y_test).astype(int)

    accuracy = accuracy_score(actuals, predictions)
    brier = brier_score_loss(actuals, probabilities)

    cm = confusion_matrix(actuals, predictions, labels=[0, 1])
    cm = pd.DataFrame(cm,
                      index=pd.Index([0, 1], name='actual'),
                      columns=pd.Index([0, 1], name='predicted'))

    return {
        'accuracy': float(accuracy),
        'brier_score': float(brier),
        'confusion_matrix': cm,
        'predictions': predictions,
        'probabilities': probabilities,
        'actuals': actuals
    }


def run_whiff_model(subset: pd.DataFrame, feature_cols: List[str],
                    pitch_type: str, feature_set: str = "") -> Dict:
    """
    Train, evaluate, and calibrate one whiff model for a pitch category.

    Procedure:
    1. Validate the subset size and label balance
    2. Stratified 80/20 train/test split on Whiff
    3. Hold out part of the training rows for calibration (when configured)
    4. Fit the gradient-boosted classifier on the remaining training rows
    5. Score the test rows: accuracy, Brier score, confusion table
    6. Platt-calibrate and recompute the Brier score on the test rows

    When SPLIT_CONFIG['calibration_size'] is 0 the calibrator is fitted on the
    test rows it is evaluated on, which flatters the calibrated Brier score.

    Args:
        subset (pd.DataFrame): Cleaned swings for one pitch category
        feature_cols (List[str]): Predictor columns
        pitch_type (str): Category name the artifact is keyed to
        feature_set (str): Feature set name the artifact is keyed to

    Returns:
        Dict: Trained model artifact with metrics, probabilities and the
            fitted model and calibrator

    Raises:
        EmptyPartitionError, DegenerateLabelError: If the subset cannot
            support a binary classifier
    """
    label = f"{pitch_type}/{feature_set}" if feature_set else pitch_type
    logger.info(f"Training whiff model for {label} ({len(subset)} swings)...")

    validate_training_subset(subset, pitch_type)

    X, y = create_single_pitch_features(subset, feature_cols)
    train_idx, test_idx = stratified_split(X, y)
    X_train, X_test = X.iloc[train_idx], X.iloc[test_idx]
    y_train, y_test = y.iloc[train_idx], y.iloc[test_idx]

    calibration_size = SPLIT_CONFIG['calibration_size']
    if calibration_size > 0:
        fit_idx, cal_idx = stratified_split(X_train, y_train, test_size=calibration_size)
        X_fit, X_cal = X_train.iloc[fit_idx], X_train.iloc[cal_idx]
        y_fit, y_cal = y_train.iloc[fit_idx], y_train.iloc[cal_idx]
        calibration_source = 'holdout'
    else:
        logger.warning(f"{label}: calibrating on the test set; calibrated Brier score is optimistic")
        X_fit, y_fit = X_train, y_train
        X_cal, y_cal = X_test, y_test
        calibration_source = 'test'

    model = build_whiff_classifier()
    model.fit(X_fit, y_fit)

    results = evaluate_whiff_model(model, X_test, y_test)

    cal_probabilities = model.predict_proba(X_cal)[:, 1]
    calibrator = fit_platt_calibrator(cal_probabilities, y_cal, pitch_type)
    calibrated = calibrate_probabilities(calibrator, results['probabilities'])
    calibrated_brier = brier_score_loss(results['actuals'], calibrated)

    logger.info(f"{label}: accuracy {results['accuracy']:.4f}, Brier {results['brier_score']:.4f}, "
                f"calibrated Brier {calibrated_brier:.4f}")

    results.update({
        'pitch_type': pitch_type,
        'feature_set': feature_set,
        'features': list(feature_cols),
        'model': model,
        'calibrator': calibrator,
        'calibration_source': calibration_source,
        'n_train': len(X_fit),
        'n_calibration': len(X_cal),
        'n_test': len(X_test),
        'test_index': X_test.index,
        'test_whiff_rate': float(y_test.mean()),
        'train_whiff_rate': float(y_fit.mean()),
        'calibrated_probabilities': calibrated,
        'calibrated_brier_score': float(calibrated_brier),
        'feature_importance': get_feature_importance(model, feature_cols)
    })
    return results


def train_all_models(partitions: Dict[str, pd.DataFrame],
                     feature_sets: Dict[str, List[str]] = FEATURE_SETS) -> Tuple[Dict, List[Dict]]:
    """
    Train one whiff model per (pitch category, feature set) pair.

    Runs are independent: a subset that cannot support a model is logged and
    recorded as a failure while the remaining runs continue.

    Args:
        partitions (Dict[str, pd.DataFrame]): Cleaned swings keyed by category
        feature_sets (Dict[str, List[str]]): Feature lists keyed by set name

    Returns:
        Tuple containing:
        - Results keyed by (pitch_type, feature_set)
        - Failure records with pitch_type, feature_set and error message
    """
    results = {}
    failures = []

    for pitch_type, subset in partitions.items():
        for feature_set, feature_cols in feature_sets.items():
            try:
                results[(pitch_type, feature_set)] = run_whiff_model(
                    subset, feature_cols, pitch_type, feature_set
                )
            except WhiffModelError as e:
                logger.warning(f"Skipping {pitch_type}/{feature_set}: {e}")
                failures.append({
                    'pitch_type': pitch_type,
                    'feature_set': feature_set,
                    'error_type': type(e).__name__,
                    'error': str(e)
                })

    logger.info(f"Trained {len(results)} models, {len(failures)} runs failed")
    return results, failures
