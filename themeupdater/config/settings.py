"""Project descriptor settings loaded from YAML."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from themeupdater.core.models import Dependency, ProjectConfig
from themeupdater.errors import ErrorCode, ThemeUpdaterError

DEFAULT_CONFIG_NAME = "themeupdater.yaml"
DEFAULT_WAR_SOURCE_DIR = "src/main/webapp"
THEME_ENV_VAR = "VAADIN_THEME"

_ALLOWED_KEYS = {
    "packaging",
    "war_source_directory",
    "theme",
    "dependencies",
    "classpath",
    "java",
}
_ALLOWED_JAVA_KEYS = {"executable", "extra_jvm_args"}
_DEPENDENCY_KEYS = ("group_id", "artifact_id", "version")


class ProjectSettings:
    """Wraps a parsed project descriptor with validated accessors."""

    def __init__(
        self,
        data: Mapping[str, Any],
        base_dir: str | Path,
        source: Path | None = None,
    ) -> None:
        self._base_dir = Path(base_dir)
        self._source = source
        unknown = sorted(str(key) for key in data if key not in _ALLOWED_KEYS)
        if unknown:
            raise self._invalid(f"unsupported keys found: {', '.join(unknown)}")
        self._data = dict(data)

    @property
    def base_dir(self) -> Path:
        return self._base_dir

    # -- project --

    @property
    def packaging(self) -> str:
        raw = self._data.get("packaging", "war")
        if not isinstance(raw, str) or not raw.strip():
            raise self._invalid("'packaging' must be a non-empty string")
        return raw.strip()

    @property
    def war_source_dir(self) -> Path:
        raw = self._data.get("war_source_directory", DEFAULT_WAR_SOURCE_DIR)
        if not isinstance(raw, str) or not raw.strip():
            raise self._invalid("'war_source_directory' must be a non-empty string")
        return self._resolve(raw.strip())

    @property
    def theme(self) -> str | None:
        raw = self._data.get("theme")
        if raw is None:
            return None
        if not isinstance(raw, str) or not raw.strip():
            raise self._invalid("'theme' must be a non-empty string")
        return raw.strip()

    # -- resolved build inputs --

    @property
    def dependencies(self) -> tuple[Dependency, ...]:
        raw = self._data.get("dependencies") or []
        if not isinstance(raw, list):
            raise self._invalid("'dependencies' must be a list")
        deps: list[Dependency] = []
        for index, item in enumerate(raw):
            if not isinstance(item, Mapping):
                raise self._invalid(f"dependencies[{index}] must be a mapping")
            values: dict[str, str] = {}
            for key in _DEPENDENCY_KEYS:
                value = item.get(key)
                # YAML reads an unquoted 8.0 as a float
                if isinstance(value, (int, float)) and not isinstance(value, bool):
                    value = str(value)
                if not isinstance(value, str) or not value.strip():
                    raise self._invalid(f"dependencies[{index}] is missing {key!r}")
                values[key] = value.strip()
            deps.append(Dependency(**values))
        return tuple(deps)

    @property
    def classpath(self) -> tuple[Path, ...]:
        raw = self._data.get("classpath") or []
        if not isinstance(raw, list):
            raise self._invalid("'classpath' must be a list")
        entries: list[Path] = []
        for index, item in enumerate(raw):
            if not isinstance(item, str) or not item.strip():
                raise self._invalid(f"classpath[{index}] must be a non-empty string")
            entries.append(self._resolve(item.strip()))
        return tuple(entries)

    # -- java --

    @property
    def java_executable(self) -> str | None:
        raw = self._java_section().get("executable")
        if raw is None:
            return None
        if not isinstance(raw, str) or not raw.strip():
            raise self._invalid("'java.executable' must be a non-empty string")
        return raw.strip()

    @property
    def extra_jvm_args(self) -> list[str]:
        raw = self._java_section().get("extra_jvm_args") or []
        if not isinstance(raw, list) or not all(isinstance(arg, str) for arg in raw):
            raise self._invalid("'java.extra_jvm_args' must be a list of strings")
        return list(raw)

    # -- helpers --

    def to_project_config(self, theme: str | None = None) -> ProjectConfig:
        """Build the run configuration; ``theme`` overrides the descriptor."""
        return ProjectConfig(
            war_source_dir=self.war_source_dir,
            packaging=self.packaging,
            dependencies=self.dependencies,
            compile_classpath=self.classpath,
            theme=theme if theme is not None else self.theme,
        )

    def _java_section(self) -> Mapping[str, Any]:
        raw = self._data.get("java") or {}
        if not isinstance(raw, Mapping):
            raise self._invalid("'java' must be a mapping")
        unknown = sorted(str(key) for key in raw if key not in _ALLOWED_JAVA_KEYS)
        if unknown:
            raise self._invalid(f"unsupported java keys found: {', '.join(unknown)}")
        return raw

    def _invalid(self, message: str) -> ThemeUpdaterError:
        return ThemeUpdaterError(
            ErrorCode.CONFIG_INVALID,
            message=f"Invalid project descriptor: {message}",
            path=self._source,
        )

    def _resolve(self, value: str) -> Path:
        path = Path(os.path.expanduser(value))
        if not path.is_absolute():
            path = self._base_dir / path
        return path


def load_project_settings(path: str | Path) -> ProjectSettings:
    """Read and validate a YAML project descriptor."""
    config_path = Path(path)
    if not config_path.is_file():
        raise ThemeUpdaterError(ErrorCode.CONFIG_MISSING, path=config_path)
    try:
        data = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        raise ThemeUpdaterError(
            ErrorCode.CONFIG_INVALID,
            message=f"Unable to read project descriptor: {exc}",
            path=config_path,
        ) from exc
    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ThemeUpdaterError(
            ErrorCode.CONFIG_INVALID,
            message="Expected a YAML mapping at the top of the project descriptor",
            path=config_path,
        )
    return ProjectSettings(data, base_dir=config_path.resolve().parent, source=config_path)


def theme_from_environment(environ: Mapping[str, str] | None = None) -> str | None:
    env = os.environ if environ is None else environ
    value = (env.get(THEME_ENV_VAR) or "").strip()
    return value or None


def app_data_dir() -> Path:
    base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
    return base / "themeupdater"
