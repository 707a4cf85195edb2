"""Check that the project depends on a Vaadin release with theme update support."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from themeupdater.core.models import Dependency

logger = logging.getLogger(__name__)

VAADIN_GROUP_ID = "com.vaadin"
VAADIN_SHARED_ARTIFACT_ID = "vaadin-shared"
MINIMUM_VERSION: tuple[int, int] = (7, 1)

_VERSION_SPLIT_RE = re.compile(r"[.-]")
_NUMBER_RE = re.compile(r"[0-9]+")


def parse_major_minor(version: str) -> tuple[int, int] | None:
    """Return (major, minor) from a version string, or None when malformed.

    Qualifiers such as ``7.1.0.beta1`` or ``8.0.0-beta1`` are tolerated since
    only the first two components are read.
    """
    parts = _VERSION_SPLIT_RE.split(version)
    if len(parts) < 2:
        return None
    major, minor = parts[0], parts[1]
    if not _NUMBER_RE.fullmatch(major) or not _NUMBER_RE.fullmatch(minor):
        return None
    return int(major), int(minor)


def is_supported_version(version: str) -> bool:
    parsed = parse_major_minor(version)
    return parsed is not None and parsed >= MINIMUM_VERSION


def check_platform_version(dependencies: Iterable[Dependency]) -> bool:
    """Return True if any vaadin-shared dependency is at least 7.1."""
    for dep in dependencies:
        if dep.group_id != VAADIN_GROUP_ID or dep.artifact_id != VAADIN_SHARED_ARTIFACT_ID:
            continue
        if parse_major_minor(dep.version) is None:
            logger.info("Failed to parse vaadin-shared version number %s", dep.version)
        if is_supported_version(dep.version):
            return True
        logger.warning(
            "Your project declares dependency on vaadin-shared %s. "
            "This tool is designed for at least Vaadin version %d.%d",
            dep.version,
            *MINIMUM_VERSION,
        )
    return False
