"""Runtime settings — env-driven defaults for every analysis run.

Centralized config using pydantic-settings. Reads from a .env file and
EXERCISE_ANALYZER_* environment variables. The settings object is the
single source of default constants (output file name, exercise config
location, code subdirectory); it is passed explicitly into the pipeline.
"""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class AnalyzerSettings(BaseSettings):
    """Default settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export EXERCISE_ANALYZER_LOG_LEVEL=DEBUG
        export EXERCISE_ANALYZER_EXERCISE_CONFIG_PATH=/srv/grader/exercise_data.json

    Or via .env file::

        EXERCISE_ANALYZER_WRITE_RESULTS=false
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="EXERCISE_ANALYZER_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Defaults applied to options the caller leaves out
    exercise_config_path: Path = Path("config/exercise_data.json")
    output_file: str = "analysis.json"
    lib_dir: str = "lib"
    write_results: bool = True
    puts_summary: bool = True

    def option_defaults(self) -> dict[str, object]:
        """Defaults for the recognized run options that come from settings."""
        return {
            "output_file": self.output_file,
            "exercise_config_path": self.exercise_config_path,
            "lib_dir": self.lib_dir,
            "write_results": self.write_results,
            "puts_summary": self.puts_summary,
        }
