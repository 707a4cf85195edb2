"""Tests for themeupdater.core.discovery."""

import pytest

from themeupdater.core.discovery import ThemeScanner, discover_themes


@pytest.fixture
def webapp_dir(tmp_path):
    """Create a web app source root with two themes."""
    themes = tmp_path / "webapp" / "VAADIN" / "themes"
    (themes / "b").mkdir(parents=True)
    (themes / "a").mkdir()
    (themes / "readme.txt").write_text("not a theme", encoding="utf-8")
    (themes / "a" / "nested").mkdir()
    return tmp_path / "webapp"


class TestThemeScanner:
    def test_scan_finds_theme_directories(self, webapp_dir):
        assert ThemeScanner(webapp_dir).scan() == ["VAADIN/themes/a", "VAADIN/themes/b"]

    def test_scan_ignores_files_and_nested_dirs(self, webapp_dir):
        themes = ThemeScanner(webapp_dir).scan()
        assert "VAADIN/themes/readme.txt" not in themes
        assert all(t.count("/") == 2 for t in themes)

    def test_scan_without_themes_dir(self, tmp_path):
        assert ThemeScanner(tmp_path).scan() == []

    def test_scan_missing_root(self, tmp_path):
        assert ThemeScanner(tmp_path / "missing").scan() == []


class TestDiscoverThemes:
    def test_explicit_theme_skips_scan(self, webapp_dir):
        assert discover_themes(webapp_dir, "foo") == ["VAADIN/themes/foo"]

    def test_explicit_theme_with_missing_root(self, tmp_path):
        assert discover_themes(tmp_path / "missing", "foo") == ["VAADIN/themes/foo"]

    def test_scan_returns_each_theme_once(self, webapp_dir):
        themes = discover_themes(webapp_dir)
        assert sorted(themes) == ["VAADIN/themes/a", "VAADIN/themes/b"]
        assert len(set(themes)) == len(themes)

    def test_missing_root_warns(self, tmp_path, caplog):
        assert discover_themes(tmp_path / "missing") == []
        assert "Could not find any themes" in caplog.text
