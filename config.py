"""
Configuration file for the pitch whiff modeling workflow.

Contains all constants, mappings, and configuration parameters used throughout the project.
"""

# Raw TrackMan columns retained after loading (order preserved in the cleaned table)
RAW_COLUMNS = [
    # Identifiers
    'PitcherId', 'BatterId', 'Date',

    # Count state
    'Balls', 'Strikes',

    # Categorical tags
    'TaggedPitchType', 'PitchCall', 'TaggedHitType', 'PlayResult', 'PitcherThrows',

    # Pitch kinematics
    'RelSpeed', 'SpinRate', 'SpinAxis', 'RelHeight', 'RelSide', 'Extension',
    'InducedVertBreak', 'HorzBreak',

    # Location and contact
    'PlateLocHeight', 'PlateLocSide', 'Angle'
]

# Pitch calls that mean the batter swung
SWING_CALLS = ['InPlay', 'FoulBall', 'StrikeSwinging']
WHIFF_CALL = 'StrikeSwinging'

# Handedness values that cannot be mirrored into a right-handed frame
UNDEFINED_HANDEDNESS = ['Both', 'Undefined']
LEFT_HANDED = 'Left'

# Columns mirrored for left-handed pitchers
SPIN_AXIS_COLUMN = 'SpinAxis'
MIRRORED_ABS_COLUMNS = ['RelSide', 'HorzBreak']

# Pitch tags dropped before re-binning (untagged or placeholder values)
EXCLUDED_PITCH_TYPES = ['Other', 'Undefined', ',', '']

# Many-to-one re-binning of tagged pitch types into analysis categories
PITCH_TYPE_MAPPING = {
    'Fastball': 'Fastball',
    'FourSeamFastBall': 'Fastball',
    'OneSeamFastball': 'Sec_Fastball',   # Arm-side run, sinks
    'TwoSeamFastBall': 'Sec_Fastball',
    'Sinker': 'Sec_Fastball',
    'Cutter': 'Cutter',
    'ChangeUp': 'Offspeed',              # Change of pace pitches
    'Splitter': 'Offspeed',
    'Knuckleball': 'Offspeed',
    'Curveball': 'Curveball',
    'Slider': 'Slider'
}

PITCH_CATEGORIES = ['Fastball', 'Sec_Fastball', 'Cutter', 'Offspeed', 'Curveball', 'Slider']

PITCH_TYPE_COLUMN = 'TaggedPitchType'
LABEL_COLUMN = 'Whiff'

# Feature sets compared for every pitch category
LOCATION_FEATURES = ['PlateLocHeight', 'PlateLocSide']

FEATURE_SETS = {
    'with_location': [
        'RelSpeed', 'SpinAxis', 'RelHeight', 'RelSide',
        'InducedVertBreak', 'HorzBreak',
        'PlateLocHeight', 'PlateLocSide'
    ],
    'without_location': [
        'RelSpeed', 'SpinAxis', 'RelHeight', 'RelSide',
        'InducedVertBreak', 'HorzBreak'
    ]
}

# Gradient boosting hyperparameters
MODEL_CONFIG = {
    'learning_rate': 0.05,
    'max_depth': 6,
    'subsample': 0.8,
    'colsample_bytree': 0.8,
    'scale_pos_weight': 2.5,     # Whiffs are the minority class
    'n_estimators': 100,
    'objective': 'binary:logistic',
    'eval_metric': 'logloss',
    'random_state': 42,
    'n_jobs': 1
}

# Train/test split configuration
SPLIT_CONFIG = {
    'test_size': 0.2,
    'calibration_size': 0.2,     # Share of the training rows held out for Platt scaling; 0 calibrates on the test set
    'random_state': 42
}

DECISION_THRESHOLD = 0.5

# Minimum sample sizes before a model is trained
MIN_SAMPLES = {
    'partition_rows': 30,        # Rows in a pitch-type subset
    'class_rows': 10             # Rows in the minority Whiff class
}

# File paths
DATA_DIR = "data"
DATA_FILE = "pitch_data.csv"
RESULTS_DIR = "results"

# Plot configuration
PLOT_CONFIG = {
    'histogram_bins': 20,
    'dpi': 150,
    'show': False                # Display figures interactively after saving
}

# Target names for confusion tables
TARGET_NAMES = ['Contact', 'Whiff']
