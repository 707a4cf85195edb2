"""The update-theme run: gate, discover, invoke."""

from __future__ import annotations

import logging

from themeupdater.core.discovery import discover_themes
from themeupdater.core.launcher import JavaLauncher, ProcessRunner, build_invocation
from themeupdater.core.models import POM_PACKAGING, ProjectConfig, UpdateResult
from themeupdater.core.version_gate import MINIMUM_VERSION, check_platform_version
from themeupdater.errors import ErrorCode, LaunchError, ThemeUpdaterError

logger = logging.getLogger(__name__)


class ThemeUpdateTask:
    """Regenerates the addon import files of every theme in a project.

    Themes are processed one at a time in discovery order and the first
    failure ends the run.
    """

    def __init__(self, config: ProjectConfig, runner: ProcessRunner | None = None) -> None:
        self._config = config
        self._runner = runner if runner is not None else JavaLauncher()

    @property
    def config(self) -> ProjectConfig:
        return self._config

    def execute(self) -> UpdateResult:
        if self._config.packaging == POM_PACKAGING:
            logger.info("Theme update is skipped")
            return UpdateResult(skipped=True)

        if not check_platform_version(self._config.dependencies):
            required = "%d.%d" % MINIMUM_VERSION
            logger.error("Theme update is only supported for Vaadin %s and later.", required)
            raise ThemeUpdaterError(
                ErrorCode.UNSUPPORTED_PLATFORM_VERSION,
                message=f"The goal update-theme requires Vaadin {required} or later",
                details={"minimum": required},
            )

        result = UpdateResult()
        themes = discover_themes(self._config.war_source_dir, self._config.theme)
        if not themes:
            logger.info("No themes to update.")
            return result

        for theme in themes:
            self.update_theme(theme)
            result.themes_updated.append(theme)
        return result

    def update_theme(self, theme: str) -> None:
        logger.info("Updating theme %s", theme)
        request = build_invocation(self._config, theme)

        logger.debug("Additional classpath elements for update-theme:")
        for entry in request.classpath[1:]:
            logger.debug("  %s", entry.absolute())

        try:
            launched = self._runner.run(request)
        except LaunchError as exc:
            logger.error('Updating theme "%s" failed: %s', theme, exc)
            raise ThemeUpdaterError(
                ErrorCode.THEME_UPDATE_FAILED,
                message=f'Updating theme "{theme}" failed',
                path=self._config.war_source_dir / theme,
                details={"theme": theme, "reason": exc.reason},
            ) from exc

        if not launched.ok:
            logger.error('Updating theme "%s" failed with exit code %d', theme, launched.exit_code)
            raise ThemeUpdaterError(
                ErrorCode.THEME_UPDATE_FAILED,
                message=f'Updating theme "{theme}" failed',
                path=self._config.war_source_dir / theme,
                details={
                    "theme": theme,
                    "exit_code": launched.exit_code,
                    "last_output": _last_line(launched.output),
                },
            )

        logger.info('Theme "%s" updated', theme)


def _last_line(output: str) -> str:
    lines = [line for line in output.splitlines() if line.strip()]
    return lines[-1].strip() if lines else ""
