"""Baseline analyzer — the generic fallback shipped with the package.

It carries no exercise rules. An empty or whitespace-only source is
disapproved; anything else is left without a verdict so that
finalization refers it to a human reviewer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from exercise_analyzer import constants
from exercise_analyzer.analyzers.base import BaseAnalyzer
from exercise_analyzer.analyzers.registry import register_analyzer

if TYPE_CHECKING:
    from exercise_analyzer.models.submission import Submission


@register_analyzer
class BaselineAnalyzer(BaseAnalyzer):
    name: ClassVar[str] = "Baseline"
    description: ClassVar[str] = "Rejects empty submissions; refers everything else."

    def analyze(self, submission: Submission, code: str) -> Submission:
        if not code.strip():
            return submission.disapprove().append_comment(
                constants.GENERAL_EMPTY_SOURCE,
                {"file_name": submission.code_file},
            )
        return submission
