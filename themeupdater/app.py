"""Command-line bootstrap for the update-theme run."""

from __future__ import annotations

import argparse
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
import sys
from typing import Sequence

from themeupdater.config.settings import (
    DEFAULT_CONFIG_NAME,
    app_data_dir,
    load_project_settings,
    theme_from_environment,
)
from themeupdater.core.launcher import JavaLauncher
from themeupdater.core.updater import ThemeUpdateTask
from themeupdater.errors import ErrorCode, ThemeUpdaterError, format_error_for_user

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG_ERROR = 2

_CONFIG_CODES = {ErrorCode.CONFIG_INVALID, ErrorCode.CONFIG_MISSING}


def _configure_logger(log_dir: Path | None, verbose: bool) -> logging.Logger:
    logger = logging.getLogger("themeupdater")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    logger.addHandler(console)
    logger.propagate = False

    if log_dir is not None:
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                log_dir / "update-theme.log",
                maxBytes=512_000,
                backupCount=3,
                encoding="utf-8",
            )
        except OSError as exc:
            logger.warning("log file disabled, cannot write to %s: %s", log_dir, exc)
            return logger
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        logger.addHandler(handler)
    return logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="themeupdater",
        description="Update Vaadin themes based on addons containing themes on the classpath.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(DEFAULT_CONFIG_NAME),
        help=f"project descriptor (default: {DEFAULT_CONFIG_NAME})",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help="update only this theme (default: $VAADIN_THEME, else all themes); blank means unset",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="directory for the rotating log file",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="log to the console only",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug output")
    return parser


def run_app(argv: Sequence[str] | None = None) -> int:
    """Run the update-theme goal and return a process exit code."""
    args = build_parser().parse_args(argv)
    log_dir = None if args.no_log_file else (args.log_dir or app_data_dir() / "logs")
    logger = _configure_logger(log_dir, args.verbose)

    try:
        settings = load_project_settings(args.config)
        theme = (args.theme or "").strip() or theme_from_environment()
        config = settings.to_project_config(theme=theme)
        launcher = JavaLauncher(
            java_executable=settings.java_executable,
            extra_jvm_args=settings.extra_jvm_args,
            cwd=settings.base_dir,
        )
        logger.debug("java executable: %s", launcher.java_executable)
        result = ThemeUpdateTask(config, runner=launcher).execute()
    except ThemeUpdaterError as exc:
        logger.debug("run failed: %s", exc.to_dict())
        print(format_error_for_user(exc), file=sys.stderr)
        return EXIT_CONFIG_ERROR if exc.code in _CONFIG_CODES else EXIT_FAILURE

    if not result.skipped and result.themes_updated:
        logger.info("Updated %d theme(s)", len(result.themes_updated))
    return EXIT_OK
