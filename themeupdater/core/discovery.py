"""Find the theme directories of a web application source tree."""

from __future__ import annotations

import logging
from pathlib import Path

from themeupdater.core.models import THEMES_PREFIX

logger = logging.getLogger(__name__)


class ThemeScanner:
    """Scans ``<root>/VAADIN/themes`` for theme directories."""

    def __init__(self, root: str | Path) -> None:
        self._root = Path(root)

    @property
    def themes_dir(self) -> Path:
        return self._root.joinpath(*THEMES_PREFIX.strip("/").split("/"))

    def scan(self) -> list[str]:
        """Return ``VAADIN/themes/<name>`` for every theme directory, sorted."""
        if not self._root.is_dir() or not self.themes_dir.is_dir():
            return []
        names = sorted(child.name for child in self.themes_dir.iterdir() if child.is_dir())
        return [THEMES_PREFIX + name for name in names]


def discover_themes(war_source_dir: str | Path, theme: str | None = None) -> list[str]:
    """Return the themes a run should update.

    An explicitly named theme takes priority and is returned without looking
    at the filesystem.
    """
    if theme is not None:
        return [THEMES_PREFIX + theme]

    themes = ThemeScanner(war_source_dir).scan()
    if not themes:
        logger.warning("Could not find any themes under %s", war_source_dir)
    return themes
