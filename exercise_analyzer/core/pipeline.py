"""Analysis pipeline — the entry point that grades one submission.

Each run is strictly linear:

    resolve params -> create submission -> check -> dispatch
        -> finalize -> write results -> (print summary)

Submission-side defects (unknown exercise, missing file, faulting
analyzer) are contained and still produce a report. Deployment defects
(unreadable exercise configuration, unwritable output) propagate.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from rich.console import Console

from exercise_analyzer.analyzers.registry import AnalyzerRegistry, default_registry
from exercise_analyzer.config import AnalyzerSettings
from exercise_analyzer.core.checker import check
from exercise_analyzer.core.dispatcher import dispatch
from exercise_analyzer.core.params import resolve_params
from exercise_analyzer.core.resolver import create_submission
from exercise_analyzer.core.writer import write_results
from exercise_analyzer.models.exercise import ExerciseConfig
from exercise_analyzer.models.report import Verdict
from exercise_analyzer.models.submission import Submission
from exercise_analyzer.summary import print_summary

logger = logging.getLogger(__name__)


class AnalysisPipeline:
    """Runs the submission lifecycle.

    Parameters
    ----------
    settings:
        Default constants for every run. Uses ``AnalyzerSettings()`` if
        not provided.
    registry:
        Analyzer registry used to resolve ``analyzer_module`` names.
    exercise_config:
        Pre-loaded exercise configuration. When omitted it is read from
        ``exercise_config_path`` on each run that needs it. A shared
        instance is read-only and safe to use from concurrent runs.
    console:
        Rich console for the summary. Defaults to stdout.
    default_verdict:
        Verdict assigned at finalization when the analyzer set none.
    """

    def __init__(
        self,
        settings: AnalyzerSettings | None = None,
        registry: AnalyzerRegistry | None = None,
        *,
        exercise_config: ExerciseConfig | None = None,
        console: Console | None = None,
        default_verdict: Verdict = Verdict.REFER,
    ) -> None:
        self.settings = settings or AnalyzerSettings()
        self.registry = registry or default_registry
        self.exercise_config = exercise_config
        self.console = console
        self.default_verdict = default_verdict

    def run(
        self,
        exercise: str,
        input_path: str,
        output_path: str,
        options: Mapping[str, Any] | None = None,
    ) -> Submission:
        """Grade one submission and return the finalized Submission."""
        params = resolve_params(
            exercise, input_path, output_path, options, settings=self.settings
        )
        logger.info("Analyzing %r at %s", params.exercise, params.path)

        submission = create_submission(
            params, registry=self.registry, exercise_config=self.exercise_config
        )
        if submission.is_finalized:
            # Unresolved analyzer: the pre-baked disapprove ends the run.
            return write_results(submission, params)

        submission = check(submission)
        submission = dispatch(submission)
        submission.finalize(default=self.default_verdict)
        write_results(submission, params)

        if params.puts_summary:
            print_summary(submission, params, console=self.console)

        logger.info(
            "Finished %r: status=%s comments=%d",
            params.exercise,
            submission.verdict.value,
            len(submission.comments),
        )
        return submission


def analyze(
    exercise: str,
    input_path: str,
    output_path: str,
    options: Mapping[str, Any] | None = None,
    **kwargs: Any,
) -> Submission:
    """Grade one submission with default settings and the default registry.

    Keyword arguments are merged into *options* and take precedence.
    """
    merged = {**(options or {}), **kwargs}
    return AnalysisPipeline().run(exercise, input_path, output_path, merged)
