"""Main Typer application — imports and registers all CLI commands.

Entry point: ``exercise-analyzer`` (configured via pyproject.toml scripts).
"""

from __future__ import annotations

import logging
from typing import Optional

import typer

from exercise_analyzer.cli.commands.analyze_cmd import analyze_cmd
from exercise_analyzer.cli.commands.listing import analyzers_cmd, exercises_cmd
from exercise_analyzer.config import AnalyzerSettings

app = typer.Typer(
    name="exercise-analyzer",
    help="Exercise analyzer: grade submissions and emit a JSON verdict.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

app.command(name="analyze", help="Analyze a submission and write analysis.json.")(analyze_cmd)
app.command(name="exercises", help="List configured exercises.")(exercises_cmd)
app.command(name="analyzers", help="List registered analyzers.")(analyzers_cmd)


@app.callback()
def configure(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (default from EXERCISE_ANALYZER_LOG_LEVEL)."
    ),
) -> None:
    """Configure logging before any command runs."""
    level = (log_level or AnalyzerSettings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
