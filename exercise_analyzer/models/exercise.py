"""Exercise configuration models (read-only, loaded once per run)."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, RootModel


class ExerciseConfigEntry(BaseModel):
    """Where an exercise's code lives and which analyzer grades it."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code_file: str = Field(validation_alias=AliasChoices("code_file", "codeFile"))
    analyzer_module: str = Field(
        validation_alias=AliasChoices(
            "analyzer_module", "analyzerReference", "analyzer_reference"
        )
    )


class ExerciseConfig(RootModel[dict[str, ExerciseConfigEntry]]):
    """Mapping of exercise id (e.g. ``"two-fer"``) to its entry."""

    model_config = ConfigDict(frozen=True)

    def get(self, exercise: str) -> ExerciseConfigEntry | None:
        return self.root.get(exercise)

    def __contains__(self, exercise: object) -> bool:
        return exercise in self.root

    def __len__(self) -> int:
        return len(self.root)

    def exercises(self) -> list[str]:
        return sorted(self.root)
