"""Abstract analyzer capability.

An analyzer receives a checked submission together with its source text
and returns the submission, having appended comments and set a verdict
as it sees fit. Analyzers must be synchronous and must not perform the
pipeline's own bookkeeping (``set_analyzed``, state transitions).
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from exercise_analyzer.models.submission import Submission


class BaseAnalyzer(abc.ABC):
    """Base class for exercise-specific analyzers.

    Subclasses **must** set ``name`` (the value used as ``analyzer_module``
    in the exercise configuration) and implement ``analyze()``.
    """

    name: ClassVar[str] = ""
    description: ClassVar[str] = ""

    @abc.abstractmethod
    def analyze(self, submission: Submission, code: str) -> Submission:
        """Inspect *code* and annotate *submission*."""
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} name={self.name!r}>"
