"""Verdict and report models — the shape of what the analyzer emits."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Verdict(str, Enum):
    """Closed set of verdicts a submission can carry.

    ``UNSET`` only exists while the submission is in flight; it never
    reaches an ``AnalysisReport``.
    """

    UNSET = "unset"
    APPROVE = "approve"
    DISAPPROVE = "disapprove"
    REFER = "refer"


# Verdicts that an automatic approve() must never overwrite.
BLOCKING_VERDICTS: frozenset[Verdict] = frozenset({Verdict.DISAPPROVE, Verdict.REFER})


class Comment(BaseModel):
    """A parameterized note attached to a submission.

    ``comment`` is a template id (see ``exercise_analyzer.constants``);
    ``params`` fills the template when a reviewer UI renders it.
    """

    model_config = ConfigDict(frozen=True)

    comment: str
    params: dict[str, Any] = Field(default_factory=dict)


class AnalysisReport(BaseModel):
    """The canonical, terminal report written to ``analysis.json``."""

    model_config = ConfigDict(frozen=True)

    status: Verdict
    comments: list[Comment] = []

    @field_validator("status")
    @classmethod
    def _status_is_determinate(cls, value: Verdict) -> Verdict:
        if value == Verdict.UNSET:
            raise ValueError("an analysis report cannot carry an unset verdict")
        return value

    @classmethod
    def disapproved(cls) -> AnalysisReport:
        """The pre-baked report used when no analyzer could be resolved."""
        return cls(status=Verdict.DISAPPROVE, comments=[])
