"""``exercise-analyzer exercises`` / ``analyzers`` — inspect the configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from exercise_analyzer.analyzers import default_registry
from exercise_analyzer.config import AnalyzerSettings
from exercise_analyzer.core.exercise_config import ExerciseConfigError, load_exercise_config

console = Console()
err_console = Console(stderr=True)


def exercises_cmd(
    exercise_config: Optional[Path] = typer.Option(
        None, "--exercise-config", "-c", help="Path to the exercise configuration JSON."
    ),
) -> None:
    """List configured exercises and whether their analyzer is available."""
    path = exercise_config or AnalyzerSettings().exercise_config_path
    try:
        config = load_exercise_config(path)
    except ExerciseConfigError as exc:
        err_console.print(
            f"[bold red]Exercise configuration error:[/bold red] {escape(str(exc))}"
        )
        raise typer.Exit(code=1) from exc

    if not len(config):
        console.print("[dim]No exercises configured.[/dim]")
        return

    table = Table(title=f"Exercises ({escape(str(path))})")
    table.add_column("Exercise", style="cyan")
    table.add_column("Code File", style="green")
    table.add_column("Analyzer")
    table.add_column("Available", justify="center")

    for name in config.exercises():
        entry = config.get(name)
        available = (
            "[green]Yes[/green]"
            if entry.analyzer_module in default_registry
            else "[red]No[/red]"
        )
        table.add_row(
            escape(name), escape(entry.code_file), escape(entry.analyzer_module), available
        )

    console.print(table)


def analyzers_cmd() -> None:
    """List registered analyzers."""
    table = Table(title="Registered Analyzers")
    table.add_column("Name", style="cyan")
    table.add_column("Class")
    table.add_column("Description", style="dim")

    for name, cls in default_registry.items():
        table.add_row(name, cls.__name__, cls.description)

    console.print(table)
