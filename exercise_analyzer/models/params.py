"""Resolved per-run parameters."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class RunParams(BaseModel):
    """Immutable configuration for a single analysis run.

    Every recognized key accepts both snake_case and camelCase spellings
    (``output_path`` / ``outputPath``). Unrecognized keys are kept as
    extras and handed to the analyzer untouched; see ``extra_options``.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    exercise: str
    path: str
    file: str | None = None
    module: str | None = None
    output_path: str = Field(
        validation_alias=AliasChoices("output_path", "outputPath")
    )
    output_file: str = Field(
        default="analysis.json",
        validation_alias=AliasChoices("output_file", "outputFile"),
    )
    exercise_config_path: Path = Field(
        default=Path("config/exercise_data.json"),
        validation_alias=AliasChoices(
            "exercise_config_path", "exerciseConfigPath", "exercise_config"
        ),
    )
    lib_dir: str = Field(
        default="lib", validation_alias=AliasChoices("lib_dir", "libDir")
    )
    write_results: bool = Field(
        default=True, validation_alias=AliasChoices("write_results", "writeResults")
    )
    puts_summary: bool = Field(
        default=True, validation_alias=AliasChoices("puts_summary", "putsSummary")
    )

    @property
    def extra_options(self) -> dict[str, Any]:
        """Caller-supplied keys that are not recognized options."""
        return dict(self.model_extra or {})

    @property
    def output_target(self) -> Path:
        return Path(self.output_path) / self.output_file
