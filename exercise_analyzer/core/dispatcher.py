"""Analyzer dispatch — run the analyzer, or escalate a halted submission.

A halted submission is never analyzed: it is referred to a human
reviewer, overriding any verdict the halting stage set. A faulting
analyzer is contained the same way, with one comment naming the
analyzer and the error.
"""

from __future__ import annotations

import logging

from exercise_analyzer import constants
from exercise_analyzer.models.submission import Submission, SubmissionState

logger = logging.getLogger(__name__)


class AnalyzerContractError(TypeError):
    """Raised when an analyzer returns anything but its own Submission, or moves its state."""


def dispatch(submission: Submission) -> Submission:
    """Route *submission* to its analyzer or to human review."""
    if submission.halted:
        logger.info("Submission at %s is halted; referring", submission.path)
        submission.refer()
        submission.advance(SubmissionState.REFERRED)
        return submission

    analyzer = submission.analyzer
    try:
        result = analyzer.analyze(submission, submission.code or "")
        if result is not submission:
            raise AnalyzerContractError(
                f"{analyzer!r} returned {type(result).__name__}, "
                "expected the Submission it was given"
            )
        if submission.state is not SubmissionState.CHECKED:
            raise AnalyzerContractError(
                f"{analyzer!r} moved the submission to {submission.state.value}"
            )
        submission.set_analyzed(True)
        submission.advance(SubmissionState.ANALYZED)
    except Exception as exc:
        logger.exception(
            "Analyzer %s failed on %s; referring", submission.analyzer_name, submission.path
        )
        return _contain_failure(submission, exc)

    logger.info(
        "Analyzer %s finished: verdict=%s comments=%d",
        submission.analyzer_name,
        submission.verdict.value,
        len(submission.comments),
    )
    return submission


def _reopened(submission: Submission) -> Submission:
    """Copy of *submission* back at ``checked``, dropping lifecycle moves made by the analyzer."""
    copy = Submission(
        **submission.model_dump(exclude={"state"}),
        analyzer=submission.analyzer,
        state=SubmissionState.CHECKED,
    )
    for comment in submission.comments:
        copy.append_comment(comment)
    return copy


def _contain_failure(submission: Submission, exc: Exception) -> Submission:
    if submission.state is not SubmissionState.CHECKED:
        submission = _reopened(submission)
    submission.halt().refer().set_analyzed(False).append_comment(
        constants.GENERAL_ANALYZER_FAILURE,
        {"analyzer": submission.analyzer_name, "error": f"{type(exc).__name__}: {exc}"},
    )
    submission.advance(SubmissionState.REFERRED)
    return submission
