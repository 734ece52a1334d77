"""Checker — verify the submitted file exists and read it."""

from __future__ import annotations

import logging
from pathlib import Path

from exercise_analyzer import constants
from exercise_analyzer.models.submission import Submission, SubmissionState

logger = logging.getLogger(__name__)


def check(submission: Submission) -> Submission:
    """Attach the source text, or halt the submission.

    On a missing or unreadable file the submission is halted, provisionally
    disapproved, and gets one ``file_not_found`` comment carrying the file
    name and the submission path. Nothing is raised.
    """
    source = Path(submission.code_path) / submission.code_file
    try:
        if not submission.code_file:
            raise FileNotFoundError(f"No code file configured under {submission.code_path}")
        code = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Cannot read submitted file %s: %s", source, exc)
        submission.halt().disapprove().append_comment(
            constants.GENERAL_FILE_NOT_FOUND,
            {"file_name": submission.code_file, "path": submission.path},
        )
        submission.advance(SubmissionState.HALTED)
        return submission

    submission.code = code
    submission.advance(SubmissionState.CHECKED)
    logger.debug("Read %d characters from %s", len(code), source)
    return submission
