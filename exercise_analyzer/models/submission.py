"""The Submission record threaded through the analysis pipeline.

A Submission is mutable until it is finalized. Every pipeline stage moves
it forward through ``SubmissionState`` and no transition goes backward:

    created -> checked -> analyzed  -> finalized
            -> halted  -> referred  -> finalized
    created -> finalized                 (unresolved analyzer)

Comments are append-only, and a ``disapprove``/``refer`` verdict is never
replaced by an automatic ``approve``.
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from exercise_analyzer.models.report import (
    BLOCKING_VERDICTS,
    AnalysisReport,
    Comment,
    Verdict,
)

logger = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    """Lifecycle position of a submission within one run."""

    CREATED = "created"
    CHECKED = "checked"
    HALTED = "halted"
    ANALYZED = "analyzed"
    REFERRED = "referred"
    FINALIZED = "finalized"


VALID_TRANSITIONS: dict[SubmissionState, set[SubmissionState]] = {
    SubmissionState.CREATED: {
        SubmissionState.CHECKED,
        SubmissionState.HALTED,
        SubmissionState.FINALIZED,
    },
    SubmissionState.CHECKED: {SubmissionState.ANALYZED, SubmissionState.REFERRED},
    SubmissionState.HALTED: {SubmissionState.REFERRED},
    SubmissionState.ANALYZED: {SubmissionState.FINALIZED},
    SubmissionState.REFERRED: {SubmissionState.FINALIZED},
    SubmissionState.FINALIZED: set(),  # terminal
}


class InvalidTransitionError(RuntimeError):
    """Raised when a submission is moved to a state it cannot reach."""


class SubmissionStateError(RuntimeError):
    """Raised when a finalized submission is mutated or an unfinalized one is emitted."""


class Submission(BaseModel):
    """A single grading attempt: where the code is, what it says, and the verdict.

    Parameters
    ----------
    path:
        Root directory of the submission.
    code_path, code_file:
        Resolved directory and filename of the source under analysis.
    analyzer:
        The resolved ``BaseAnalyzer`` instance. Never invoked before dispatch.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    path: str
    code_path: str = ""
    code_file: str = ""
    exercise: str = ""
    # Typed loosely: the analyzers package imports this module.
    analyzer: Any = Field(default=None, exclude=True, repr=False)
    code: str | None = Field(default=None, repr=False)
    halted: bool = False
    analyzed: bool = False
    verdict: Verdict = Verdict.UNSET
    state: SubmissionState = SubmissionState.CREATED
    _comments: list[Comment] = PrivateAttr(default_factory=list)

    # ------------------------------------------------------------------
    # Read helpers
    # ------------------------------------------------------------------

    @property
    def comments(self) -> tuple[Comment, ...]:
        """Snapshot of the comments in append order."""
        return tuple(self._comments)

    @property
    def analyzer_name(self) -> str:
        return getattr(self.analyzer, "name", "") or ""

    @property
    def source_file(self) -> str:
        """``<code_path>/<code_file>`` as a plain string."""
        return f"{self.code_path}/{self.code_file}"

    @property
    def is_finalized(self) -> bool:
        return self.state == SubmissionState.FINALIZED

    # ------------------------------------------------------------------
    # Mutation interface (used by pipeline stages and analyzers)
    # ------------------------------------------------------------------

    def _ensure_open(self) -> None:
        if self.is_finalized:
            raise SubmissionStateError(
                f"Submission at {self.path!r} is finalized and can no longer change"
            )

    def halt(self) -> Submission:
        """Mark the submission as structurally broken. Irreversible."""
        self._ensure_open()
        self.halted = True
        return self

    def approve(self) -> Submission:
        self._ensure_open()
        if self.halted or self.verdict in BLOCKING_VERDICTS:
            logger.warning(
                "Ignoring approve() for %s: verdict is %s (halted=%s)",
                self.path,
                self.verdict.value,
                self.halted,
            )
            return self
        self.verdict = Verdict.APPROVE
        return self

    def disapprove(self) -> Submission:
        self._ensure_open()
        self.verdict = Verdict.DISAPPROVE
        return self

    def refer(self) -> Submission:
        """Route the submission to human review."""
        self._ensure_open()
        self.verdict = Verdict.REFER
        return self

    def append_comment(
        self, comment: str | Comment, params: dict[str, Any] | None = None
    ) -> Submission:
        """Append a comment; earlier comments are never touched."""
        self._ensure_open()
        if isinstance(comment, Comment):
            if params is not None:
                comment = comment.model_copy(update={"params": dict(params)})
        else:
            comment = Comment(comment=comment, params=dict(params or {}))
        self._comments.append(comment)
        return self

    def set_analyzed(self, value: bool) -> Submission:
        self._ensure_open()
        self.analyzed = value
        return self

    def advance(self, target: SubmissionState) -> Submission:
        """Move to *target*, enforcing ``VALID_TRANSITIONS``."""
        allowed = VALID_TRANSITIONS.get(self.state, set())
        if target not in allowed:
            raise InvalidTransitionError(
                f"Cannot move submission from {self.state.value} to {target.value}. "
                f"Allowed: {sorted(s.value for s in allowed)}"
            )
        self.state = target
        return self

    # ------------------------------------------------------------------
    # Finalization and serialization
    # ------------------------------------------------------------------

    def finalize(self, default: Verdict = Verdict.REFER) -> AnalysisReport:
        """Fix the verdict and close the submission.

        An ``UNSET`` verdict becomes *default*. Returns the terminal report.
        """
        if default == Verdict.UNSET:
            raise ValueError("finalize() needs a determinate default verdict")
        if self.verdict == Verdict.UNSET:
            logger.info(
                "No verdict set for %s; defaulting to %s", self.path, default.value
            )
            self.verdict = default
        self.advance(SubmissionState.FINALIZED)
        return self.to_report()

    def to_report(self) -> AnalysisReport:
        if self.verdict == Verdict.UNSET:
            raise SubmissionStateError(
                f"Submission at {self.path!r} has no verdict; finalize it first"
            )
        return AnalysisReport(status=self.verdict, comments=list(self._comments))

    def to_json(self) -> str:
        """Canonical JSON report, e.g. ``{"status":"approve","comments":[]}``."""
        return json.dumps(
            self.to_report().model_dump(mode="json"),
            separators=(",", ":"),
            ensure_ascii=True,
        )
