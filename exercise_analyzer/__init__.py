"""Exercise analyzer: grade a submitted program with exercise-specific analyzers.

Given an exercise id and a submission directory, locates the submitted
source, runs the exercise's analyzer, and writes a machine-readable
verdict (``analysis.json``) for downstream review tooling.
"""

__version__ = "0.1.0"

from exercise_analyzer.analyzers import BaseAnalyzer, register_analyzer
from exercise_analyzer.core.pipeline import AnalysisPipeline, analyze
from exercise_analyzer.models import AnalysisReport, Submission, Verdict

__all__ = [
    "AnalysisPipeline",
    "AnalysisReport",
    "BaseAnalyzer",
    "Submission",
    "Verdict",
    "analyze",
    "register_analyzer",
    "__version__",
]
