"""Rich terminal summary of a finalized submission.

Pure display: rendering never touches the submission's state.

Color scheme
------------
- green     : approve
- red       : disapprove
- yellow    : refer
"""

from __future__ import annotations

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from exercise_analyzer.models.params import RunParams
from exercise_analyzer.models.report import Verdict
from exercise_analyzer.models.submission import Submission

_VERDICT_STYLES: dict[Verdict, str] = {
    Verdict.APPROVE: "bold green",
    Verdict.DISAPPROVE: "bold red",
    Verdict.REFER: "bold yellow",
    Verdict.UNSET: "dim",
}


def _format_params(params: dict) -> str:
    return ", ".join(f"{key}={value}" for key, value in params.items())


def render_summary(submission: Submission, params: RunParams) -> Panel:
    """Build a Rich Panel describing the verdict and comments."""
    header = Table.grid(padding=(0, 2))
    header.add_column(style="bold")
    header.add_column()
    # Exercise, path and analyzer come from the caller; never parse them as markup.
    header.add_row("Exercise:", Text(params.exercise))
    header.add_row("Path:", Text(submission.path))
    header.add_row("Analyzer:", Text(submission.analyzer_name))
    header.add_row(
        "Status:",
        Text(submission.verdict.value, style=_VERDICT_STYLES[submission.verdict]),
    )
    header.add_row("Comments:", str(len(submission.comments)))

    lines: list[Text] = []
    for comment in submission.comments:
        line = Text(f"  - {comment.comment}")
        if comment.params:
            line.append(f" ({_format_params(comment.params)})", style="dim")
        lines.append(line)

    return Panel(
        Group(header, *lines),
        title="[bold]Analysis Report[/bold]",
        border_style=_VERDICT_STYLES[submission.verdict].replace("bold ", ""),
        expand=False,
    )


def print_summary(
    submission: Submission, params: RunParams, console: Console | None = None
) -> None:
    """Print the summary panel to stdout (or *console*)."""
    (console or Console()).print(render_summary(submission, params))
