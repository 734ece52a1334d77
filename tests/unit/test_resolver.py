"""Tests for exercise resolution and submission construction."""

from __future__ import annotations

from pathlib import Path

import pytest

from exercise_analyzer.config import AnalyzerSettings
from exercise_analyzer.core.exercise_config import ExerciseConfigError, load_exercise_config
from exercise_analyzer.core.params import resolve_params
from exercise_analyzer.core.resolver import create_submission, resolve_location
from exercise_analyzer.models.report import Verdict
from exercise_analyzer.models.submission import SubmissionState


def _params(settings: AnalyzerSettings, exercise: str = "two-fer", **options):
    return resolve_params(exercise, "/tmp/sub1", "/tmp/out", options, settings=settings)


class TestResolveLocation:
    def test_from_exercise_config(self, settings):
        location = resolve_location(_params(settings))
        assert location.code_path == "/tmp/sub1/lib"
        assert location.code_file == "two_fer.ex"
        assert location.analyzer_name == "TwoFer"

    def test_custom_lib_dir(self, settings):
        location = resolve_location(_params(settings, lib_dir="src"))
        assert location.code_path == "/tmp/sub1/src"

    def test_explicit_file_override(self, settings):
        location = resolve_location(_params(settings, file="main.ex", module="Commenting"))
        assert location.code_path == "/tmp/sub1"
        assert location.code_file == "main.ex"
        assert location.analyzer_name == "Commenting"

    def test_override_skips_config_read(self, tmp_path: Path):
        settings = AnalyzerSettings(exercise_config_path=tmp_path / "missing.json")
        location = resolve_location(_params(settings, file="main.ex", module="TwoFer"))
        assert location.code_file == "main.ex"

    def test_unknown_exercise(self, settings):
        location = resolve_location(_params(settings, exercise="does-not-exist"))
        assert location.analyzer_name is None
        assert location.code_file == ""

    def test_preloaded_config_used(self, tmp_path: Path, exercise_config_path: Path):
        config = load_exercise_config(exercise_config_path)
        settings = AnalyzerSettings(exercise_config_path=tmp_path / "missing.json")
        location = resolve_location(_params(settings), config)
        assert location.analyzer_name == "TwoFer"

    def test_config_failure_propagates(self, tmp_path: Path):
        settings = AnalyzerSettings(exercise_config_path=tmp_path / "missing.json")
        with pytest.raises(ExerciseConfigError):
            resolve_location(_params(settings))


class TestCreateSubmission:
    def test_resolved_submission(self, settings, registry):
        s = create_submission(_params(settings), registry=registry)
        assert s.state == SubmissionState.CREATED
        assert s.path == "/tmp/sub1"
        assert s.code_path == "/tmp/sub1/lib"
        assert s.code_file == "two_fer.ex"
        assert s.exercise == "two-fer"
        assert s.analyzer_name == "TwoFer"
        assert s.verdict == Verdict.UNSET

    @pytest.mark.parametrize(
        ("exercise", "options"),
        [
            ("does-not-exist", {}),
            ("retired", {}),
            ("two-fer", {"file": "main.ex"}),
            ("two-fer", {"file": "main.ex", "module": "Nope"}),
        ],
    )
    def test_unresolved_analyzer_is_contained(self, settings, registry, exercise, options):
        s = create_submission(_params(settings, exercise, **options), registry=registry)
        assert s.is_finalized
        assert s.verdict == Verdict.DISAPPROVE
        assert s.comments == ()
        assert s.analyzer is None
        assert s.to_json() == '{"status":"disapprove","comments":[]}'
