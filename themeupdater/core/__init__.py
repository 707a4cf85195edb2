"""Theme update task exports."""

from themeupdater.core.discovery import ThemeScanner, discover_themes
from themeupdater.core.launcher import JavaLauncher, ProcessRunner, build_invocation
from themeupdater.core.models import Dependency, InvocationRequest, LaunchResult, ProjectConfig, UpdateResult
from themeupdater.core.updater import ThemeUpdateTask
from themeupdater.core.version_gate import check_platform_version

__all__ = [
    "Dependency",
    "InvocationRequest",
    "JavaLauncher",
    "LaunchResult",
    "ProcessRunner",
    "ProjectConfig",
    "ThemeScanner",
    "ThemeUpdateTask",
    "UpdateResult",
    "build_invocation",
    "check_platform_version",
    "discover_themes",
]
