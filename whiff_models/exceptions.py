"""Error taxonomy for the whiff modeling pipeline."""


class WhiffModelError(ValueError):
    """Base class for errors raised by the whiff modeling pipeline."""


class SchemaError(WhiffModelError):
    """Raised when the input table is missing required columns."""

    def __init__(self, missing_columns):
        self.missing_columns = list(missing_columns)
        super().__init__(f"Input data is missing required columns: {', '.join(self.missing_columns)}")


class UnmappedPitchTypeError(WhiffModelError):
    """Raised when a tagged pitch type has no analysis category."""

    def __init__(self, pitch_types):
        self.pitch_types = sorted(str(p) for p in pitch_types)
        super().__init__(f"No pitch category defined for tagged pitch types: {', '.join(self.pitch_types)}")


class EmptyPartitionError(WhiffModelError):
    """Raised when a pitch-type subset has too few rows to train on."""

    def __init__(self, pitch_type: str, n_rows: int, min_rows: int):
        self.pitch_type = pitch_type
        self.n_rows = n_rows
        super().__init__(
            f"{pitch_type}: {n_rows} swings available, at least {min_rows} required to train a model"
        )


class DegenerateLabelError(WhiffModelError):
    """Raised when a subset does not contain enough of both Whiff labels."""

    def __init__(self, pitch_type: str, label_counts: dict, detail: str = ""):
        self.pitch_type = pitch_type
        self.label_counts = dict(label_counts)
        message = f"{pitch_type}: Whiff label counts {self.label_counts} cannot support a binary classifier"
        if detail:
            message += f" ({detail})"
        super().__init__(message)
