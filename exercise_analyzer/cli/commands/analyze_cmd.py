"""``exercise-analyzer analyze EXERCISE INPUT_PATH [OUTPUT_PATH]`` — grade one submission."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from exercise_analyzer.config import AnalyzerSettings
from exercise_analyzer.core.exercise_config import ExerciseConfigError
from exercise_analyzer.core.pipeline import AnalysisPipeline
from exercise_analyzer.core.writer import ResultWriteError

console = Console()
err_console = Console(stderr=True)


def analyze_cmd(
    exercise: str = typer.Argument(..., help="Exercise id, e.g. 'two-fer'."),
    input_path: Path = typer.Argument(..., help="Root directory of the submission."),
    output_path: Optional[Path] = typer.Argument(
        None, help="Directory for the report. Defaults to INPUT_PATH."
    ),
    file: Optional[str] = typer.Option(
        None, "--file", "-f", help="Explicit code file, relative to INPUT_PATH."
    ),
    module: Optional[str] = typer.Option(
        None, "--module", "-m", help="Analyzer to use with --file."
    ),
    output_file: Optional[str] = typer.Option(
        None, "--output-file", "-o", help="Report file name (default: analysis.json)."
    ),
    exercise_config: Optional[Path] = typer.Option(
        None, "--exercise-config", "-c", help="Path to the exercise configuration JSON."
    ),
    write: bool = typer.Option(True, "--write/--no-write", help="Write the JSON report."),
    summary: bool = typer.Option(
        True, "--summary/--no-summary", help="Print a summary of the analysis."
    ),
) -> None:
    """Analyze a submission and write its verdict.

    Only deployment errors (unreadable exercise configuration, unwritable
    output) produce a non-zero exit code.
    """
    options: dict[str, object] = {"write_results": write, "puts_summary": summary}
    if file is not None:
        options["file"] = file
    if module is not None:
        options["module"] = module
    if output_file is not None:
        options["output_file"] = output_file
    if exercise_config is not None:
        options["exercise_config_path"] = exercise_config

    pipeline = AnalysisPipeline(AnalyzerSettings(), console=console)
    try:
        pipeline.run(
            exercise,
            str(input_path),
            str(output_path if output_path is not None else input_path),
            options,
        )
    except (ExerciseConfigError, ResultWriteError) as exc:
        err_console.print(f"[bold red]Analysis aborted:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
