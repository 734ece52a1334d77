"""Exercise analyzer data models — Pydantic v2."""

from exercise_analyzer.models.exercise import ExerciseConfig, ExerciseConfigEntry
from exercise_analyzer.models.params import RunParams
from exercise_analyzer.models.report import (
    BLOCKING_VERDICTS,
    AnalysisReport,
    Comment,
    Verdict,
)
from exercise_analyzer.models.submission import (
    VALID_TRANSITIONS,
    InvalidTransitionError,
    Submission,
    SubmissionState,
    SubmissionStateError,
)

__all__ = [
    # report
    "Verdict",
    "BLOCKING_VERDICTS",
    "Comment",
    "AnalysisReport",
    # submission
    "Submission",
    "SubmissionState",
    "VALID_TRANSITIONS",
    "InvalidTransitionError",
    "SubmissionStateError",
    # params / config
    "RunParams",
    "ExerciseConfig",
    "ExerciseConfigEntry",
]
