"""Tests for the Rich summary renderer."""

from __future__ import annotations

import io

from rich.console import Console
from rich.panel import Panel

from exercise_analyzer.config import AnalyzerSettings
from exercise_analyzer.core.params import resolve_params
from exercise_analyzer.models.submission import SubmissionState
from exercise_analyzer.summary import _VERDICT_STYLES, print_summary, render_summary


def _render_text(submission, params) -> str:
    buffer = io.StringIO()
    print_summary(submission, params, console=Console(file=buffer, width=120, color_system=None))
    return buffer.getvalue()


def _params():
    return resolve_params("two-fer", "/tmp/sub2", "/tmp/out", settings=AnalyzerSettings())


class TestSummary:
    def test_render_returns_panel(self, make_submission):
        s = make_submission().refer()
        assert isinstance(render_summary(s, _params()), Panel)

    def test_every_verdict_has_a_style(self):
        from exercise_analyzer.models.report import Verdict

        assert set(_VERDICT_STYLES) == set(Verdict)

    def test_contents(self, make_submission):
        s = make_submission(path="/tmp/sub2").refer()
        s.append_comment("analyzer.general.file_not_found", {"file_name": "two_fer.ex"})
        text = _render_text(s, _params())
        assert "two-fer" in text
        assert "refer" in text
        assert "Comments:" in text
        assert "analyzer.general.file_not_found" in text
        assert "file_name=two_fer.ex" in text

    def test_bracketed_values_rendered_literally(self, make_submission, registry):
        s = make_submission(path="/tmp/sub[/x]", analyzer=registry.resolve("TwoFer"))
        params = resolve_params(
            "two-fer[bold]", "/tmp/sub[/x]", "/tmp/out", settings=AnalyzerSettings()
        )
        text = _render_text(s.approve(), params)
        assert "/tmp/sub[/x]" in text
        assert "two-fer[bold]" in text
        assert "TwoFer" in text

    def test_rendering_does_not_mutate(self, make_submission):
        s = make_submission().approve()
        s.advance(SubmissionState.FINALIZED)
        before = s.to_json()
        _render_text(s, _params())
        assert s.to_json() == before
