"""Exercise configuration loading.

The configuration is a JSON object keyed by exercise id::

    {
      "two-fer": {"code_file": "two_fer.py", "analyzer_module": "TwoFer"}
    }

A configuration that cannot be read or does not match this shape is a
broken deployment, not a bad submission, so loading fails hard.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from exercise_analyzer.models.exercise import ExerciseConfig

logger = logging.getLogger(__name__)


class ExerciseConfigError(RuntimeError):
    """Raised when the exercise configuration is unreadable or malformed."""


def load_exercise_config(path: Path | str) -> ExerciseConfig:
    """Read and validate the exercise configuration at *path*."""
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ExerciseConfigError(
            f"Cannot read exercise configuration {config_path}: {exc}"
        ) from exc
    except json.JSONDecodeError as exc:
        raise ExerciseConfigError(
            f"Exercise configuration {config_path} is not valid JSON: {exc}"
        ) from exc

    try:
        config = ExerciseConfig.model_validate(raw)
    except ValidationError as exc:
        raise ExerciseConfigError(
            f"Exercise configuration {config_path} has an invalid shape: {exc}"
        ) from exc

    logger.debug("Loaded %d exercise(s) from %s", len(config), config_path)
    return config
