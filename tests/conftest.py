"""Shared test fixtures for the exercise analyzer."""

from __future__ import annotations

import io
import json
from collections.abc import Callable
from pathlib import Path
from typing import ClassVar

import pytest
from rich.console import Console

from exercise_analyzer.analyzers.base import BaseAnalyzer
from exercise_analyzer.analyzers.registry import AnalyzerRegistry
from exercise_analyzer.config import AnalyzerSettings
from exercise_analyzer.core.pipeline import AnalysisPipeline
from exercise_analyzer.models.submission import Submission


# ---------------------------------------------------------------------------
# Stub analyzers
# ---------------------------------------------------------------------------


class ApprovingAnalyzer(BaseAnalyzer):
    """Approves everything without comments."""

    name: ClassVar[str] = "TwoFer"

    def analyze(self, submission: Submission, code: str) -> Submission:
        return submission.approve()


class CommentingAnalyzer(BaseAnalyzer):
    """Disapproves with two comments, in a fixed order."""

    name: ClassVar[str] = "Commenting"

    def analyze(self, submission: Submission, code: str) -> Submission:
        return (
            submission.append_comment("test.first", {"line": 1})
            .append_comment("test.second")
            .disapprove()
        )


class SilentAnalyzer(BaseAnalyzer):
    """Leaves the verdict unset."""

    name: ClassVar[str] = "Silent"

    def analyze(self, submission: Submission, code: str) -> Submission:
        return submission


class CrashingAnalyzer(BaseAnalyzer):
    name: ClassVar[str] = "Crashing"

    def analyze(self, submission: Submission, code: str) -> Submission:
        raise ValueError("rule table corrupted")


class RecordingAnalyzer(BaseAnalyzer):
    """Records every call; approves."""

    name: ClassVar[str] = "Recording"

    def __init__(self) -> None:
        self.calls: list[tuple[Submission, str]] = []

    def analyze(self, submission: Submission, code: str) -> Submission:
        self.calls.append((submission, code))
        return submission.approve()


STUB_ANALYZERS: list[type[BaseAnalyzer]] = [
    ApprovingAnalyzer,
    CommentingAnalyzer,
    SilentAnalyzer,
    CrashingAnalyzer,
    RecordingAnalyzer,
]


# ---------------------------------------------------------------------------
# Configuration fixtures
# ---------------------------------------------------------------------------


EXERCISE_DATA: dict[str, dict[str, str]] = {
    "two-fer": {"code_file": "two_fer.ex", "analyzer_module": "TwoFer"},
    "commenting": {"code_file": "commenting.ex", "analyzer_module": "Commenting"},
    "silent": {"code_file": "silent.ex", "analyzer_module": "Silent"},
    "crashing": {"code_file": "crashing.ex", "analyzer_module": "Crashing"},
    "retired": {"code_file": "retired.ex", "analyzer_module": "NoSuchAnalyzer"},
}


@pytest.fixture
def registry() -> AnalyzerRegistry:
    """Provide an isolated registry holding the stub analyzers."""
    reg = AnalyzerRegistry()
    for cls in STUB_ANALYZERS:
        reg.register(cls)
    return reg


@pytest.fixture
def exercise_config_path(tmp_path: Path) -> Path:
    """Write the test exercise configuration and return its path."""
    path = tmp_path / "config" / "exercise_data.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(EXERCISE_DATA), encoding="utf-8")
    return path


@pytest.fixture
def settings(exercise_config_path: Path) -> AnalyzerSettings:
    return AnalyzerSettings(exercise_config_path=exercise_config_path)


@pytest.fixture
def summary_output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def pipeline(
    settings: AnalyzerSettings,
    registry: AnalyzerRegistry,
    summary_output: io.StringIO,
) -> AnalysisPipeline:
    """Provide a pipeline wired to the test config, registry and a captured console."""
    console = Console(file=summary_output, width=120, color_system=None)
    return AnalysisPipeline(settings, registry, console=console)


# ---------------------------------------------------------------------------
# Submission factories
# ---------------------------------------------------------------------------


@pytest.fixture
def make_submission_dir(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture: create a submission directory with ``lib/<code_file>``."""

    def _factory(
        name: str = "sub1",
        code_file: str | None = "two_fer.ex",
        code: str = "def two_fer(name), do: \"One for #{name}, one for me.\"\n",
        lib_dir: str = "lib",
    ) -> Path:
        root = tmp_path / name
        (root / lib_dir).mkdir(parents=True)
        if code_file is not None:
            (root / lib_dir / code_file).write_text(code, encoding="utf-8")
        return root

    return _factory


@pytest.fixture
def make_submission() -> Callable[..., Submission]:
    """Factory fixture: build a Submission with sensible defaults."""

    def _factory(path: str = "/tmp/sub1", **overrides: object) -> Submission:
        defaults: dict[str, object] = {
            "path": path,
            "code_path": f"{path}/lib",
            "code_file": "two_fer.ex",
            "exercise": "two-fer",
        }
        defaults.update(overrides)
        return Submission(**defaults)

    return _factory
