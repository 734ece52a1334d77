"""Parameter resolution — merge caller options with defaults."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from exercise_analyzer.config import AnalyzerSettings
from exercise_analyzer.models.params import RunParams

# camelCase spellings accepted for recognized options
_CAMEL_TO_SNAKE: dict[str, str] = {
    "outputPath": "output_path",
    "outputFile": "output_file",
    "exerciseConfigPath": "exercise_config_path",
    "exercise_config": "exercise_config_path",
    "libDir": "lib_dir",
    "writeResults": "write_results",
    "putsSummary": "puts_summary",
}


def resolve_params(
    exercise: str,
    input_path: str,
    output_path: str,
    options: Mapping[str, Any] | None = None,
    *,
    settings: AnalyzerSettings | None = None,
) -> RunParams:
    """Build the immutable ``RunParams`` for one run.

    Caller-supplied options always win; defaults only fill absent keys.
    Positional arguments act as defaults for ``exercise``, ``path`` and
    ``output_path``; the rest come from *settings*. Unknown option keys
    pass through unchanged.
    """
    settings = settings or AnalyzerSettings()
    merged: dict[str, Any] = {
        _CAMEL_TO_SNAKE.get(key, key): value for key, value in (options or {}).items()
    }

    defaults: dict[str, Any] = {
        "exercise": exercise,
        "path": input_path,
        "file": None,
        "module": None,
        "output_path": output_path,
        **settings.option_defaults(),
    }
    for key, value in defaults.items():
        merged.setdefault(key, value)

    return RunParams(**merged)
