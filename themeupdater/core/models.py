"""Transient values passed through a single theme update run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

THEME_UPDATE_CLASS = "com.vaadin.server.themeutils.SASSAddonImportFileCreator"
THEMES_PREFIX = "VAADIN/themes/"
POM_PACKAGING = "pom"


@dataclass(frozen=True, slots=True)
class Dependency:
    """One entry of the resolved dependency set."""

    group_id: str
    artifact_id: str
    version: str

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"


@dataclass(frozen=True, slots=True)
class ProjectConfig:
    """Everything a run needs to know about the project being built."""

    war_source_dir: Path
    packaging: str = "war"
    dependencies: tuple[Dependency, ...] = ()
    compile_classpath: tuple[Path, ...] = ()
    theme: str | None = None


@dataclass(frozen=True, slots=True)
class InvocationRequest:
    """A single call of the external theme tool."""

    class_name: str
    classpath: tuple[Path, ...]
    argument: str


@dataclass(frozen=True, slots=True)
class LaunchResult:
    """Exit status and merged output of a finished tool process."""

    exit_code: int
    output: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


@dataclass
class UpdateResult:
    """Outcome of a successful run."""

    skipped: bool = False
    themes_updated: list[str] = field(default_factory=list)
