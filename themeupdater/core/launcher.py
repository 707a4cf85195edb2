"""Run the external theme tool in a Java child process."""

from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path
from typing import Mapping, Protocol, Sequence

from themeupdater.core.models import (
    THEME_UPDATE_CLASS,
    InvocationRequest,
    LaunchResult,
    ProjectConfig,
)
from themeupdater.errors import LaunchError

logger = logging.getLogger(__name__)


class ProcessRunner(Protocol):
    """Seam between the update task and whatever executes the tool."""

    def run(self, request: InvocationRequest) -> LaunchResult:
        """Run to completion; raise LaunchError if the process cannot start."""
        ...


def build_invocation(config: ProjectConfig, theme: str) -> InvocationRequest:
    """Build the tool call for one theme.

    The source root goes first on the classpath so project resources win over
    anything packaged in dependencies. Classpath entries keep their supplied
    order and duplicates are passed through unchanged.
    """
    root = config.war_source_dir
    classpath = (root, *config.compile_classpath)
    argument = str(root.absolute() / theme)
    return InvocationRequest(
        class_name=THEME_UPDATE_CLASS,
        classpath=classpath,
        argument=argument,
    )


def resolve_java_executable(
    explicit: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Pick the java binary: explicit setting, then JAVA_HOME, then PATH."""
    if explicit:
        return explicit
    env = os.environ if environ is None else environ
    java_home = (env.get("JAVA_HOME") or "").strip()
    if java_home:
        name = "java.exe" if os.name == "nt" else "java"
        return str(Path(java_home) / "bin" / name)
    return "java"


class JavaLauncher:
    """Launches a Java main class synchronously, without a timeout."""

    def __init__(
        self,
        java_executable: str | None = None,
        extra_jvm_args: Sequence[str] = (),
        cwd: str | Path | None = None,
    ) -> None:
        self._java = resolve_java_executable(java_executable)
        self._jvm_args = list(extra_jvm_args)
        self._cwd = Path(cwd) if cwd is not None else None

    @property
    def java_executable(self) -> str:
        return self._java

    def command_for(self, request: InvocationRequest) -> list[str]:
        classpath = os.pathsep.join(str(entry) for entry in request.classpath)
        return [
            self._java,
            *self._jvm_args,
            "-cp",
            classpath,
            request.class_name,
            request.argument,
        ]

    def run(self, request: InvocationRequest) -> LaunchResult:
        command = self.command_for(request)
        logger.debug("Running %s", " ".join(command))
        try:
            proc = subprocess.Popen(
                command,
                cwd=self._cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                errors="replace",
            )
        except OSError as exc:
            raise LaunchError(command, str(exc)) from exc

        lines: list[str] = []
        with proc:
            # lines are logged while the tool is still running
            for line in proc.stdout:
                lines.append(line)
                logger.info("  %s", line.rstrip("\r\n"))
            exit_code = proc.wait()
        return LaunchResult(exit_code=exit_code, output="".join(lines))
