"""Exercise resolution and submission construction.

Resolves where a submission's code lives and which analyzer grades it,
then builds the initial ``Submission``. Two sources are supported:

* no ``file`` override: ``<path>/<lib_dir>`` plus ``code_file`` and
  ``analyzer_module`` from the exercise configuration;
* explicit ``file`` override: ``path`` itself, the override file name,
  and the analyzer named by the ``module`` override.

An analyzer that cannot be resolved (unknown exercise, missing or
retired module) does not raise. The submission comes back already
finalized as ``disapprove`` with no comments.
"""

from __future__ import annotations

import logging
from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict

from exercise_analyzer.analyzers.registry import AnalyzerRegistry, default_registry
from exercise_analyzer.core.exercise_config import load_exercise_config
from exercise_analyzer.models.exercise import ExerciseConfig
from exercise_analyzer.models.params import RunParams
from exercise_analyzer.models.submission import Submission, SubmissionState

logger = logging.getLogger(__name__)


class ExerciseLocation(BaseModel):
    """The resolved (code directory, code file, analyzer name) triple."""

    model_config = ConfigDict(frozen=True)

    code_path: str
    code_file: str
    analyzer_name: str | None = None


def resolve_location(
    params: RunParams,
    exercise_config: ExerciseConfig | None = None,
) -> ExerciseLocation:
    """Resolve the code location and analyzer name for *params*.

    The exercise configuration is only consulted (and loaded from
    ``params.exercise_config_path`` if not supplied) when no ``file``
    override is present. A load failure propagates as
    ``ExerciseConfigError``.
    """
    if params.file is not None:
        return ExerciseLocation(
            code_path=params.path,
            code_file=params.file,
            analyzer_name=params.module,
        )

    if exercise_config is None:
        exercise_config = load_exercise_config(params.exercise_config_path)

    code_path = str(PurePosixPath(params.path) / params.lib_dir)
    entry = exercise_config.get(params.exercise)
    if entry is None:
        logger.warning("Exercise %r has no configuration entry", params.exercise)
        return ExerciseLocation(code_path=code_path, code_file="")

    return ExerciseLocation(
        code_path=code_path,
        code_file=entry.code_file,
        analyzer_name=entry.analyzer_module,
    )


def create_submission(
    params: RunParams,
    *,
    registry: AnalyzerRegistry | None = None,
    exercise_config: ExerciseConfig | None = None,
) -> Submission:
    """Build the initial Submission for a run.

    Returns a finalized ``disapprove`` submission when the analyzer cannot
    be resolved; callers check ``submission.is_finalized``.
    """
    registry = registry or default_registry
    location = resolve_location(params, exercise_config)

    submission = Submission(
        path=params.path,
        code_path=location.code_path,
        code_file=location.code_file,
        exercise=params.exercise,
    )

    analyzer = registry.resolve(location.analyzer_name)
    if analyzer is None:
        logger.warning(
            "Cannot resolve analyzer %r for exercise %r; disapproving submission at %s",
            location.analyzer_name,
            params.exercise,
            params.path,
        )
        submission.disapprove()
        submission.advance(SubmissionState.FINALIZED)
        return submission

    submission.analyzer = analyzer
    logger.info(
        "Exercise %r -> %s using analyzer %s",
        params.exercise,
        submission.source_file,
        analyzer.name,
    )
    return submission
