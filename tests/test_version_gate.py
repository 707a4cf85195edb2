"""Tests for themeupdater.core.version_gate."""

import logging

import pytest

from themeupdater.core.models import Dependency
from themeupdater.core.version_gate import (
    check_platform_version,
    is_supported_version,
    parse_major_minor,
)


def _shared(version: str) -> Dependency:
    return Dependency("com.vaadin", "vaadin-shared", version)


class TestParseMajorMinor:
    def test_plain_version(self):
        assert parse_major_minor("7.1.0") == (7, 1)

    def test_qualifier_after_dash(self):
        assert parse_major_minor("8.0.0-beta1") == (8, 0)

    def test_qualifier_after_dot(self):
        assert parse_major_minor("7.1.0.beta1") == (7, 1)

    def test_single_component_rejected(self):
        assert parse_major_minor("7") is None

    def test_non_numeric_rejected(self):
        assert parse_major_minor("vNext") is None
        assert parse_major_minor("7.x") is None

    def test_underscore_digit_separator_rejected(self):
        assert parse_major_minor("7_1.0") is None

    def test_surrounding_whitespace_rejected(self):
        assert parse_major_minor(" 7.1") is None
        assert parse_major_minor("7.1 ") is None
        assert parse_major_minor("7\n.1") is None


class TestIsSupportedVersion:
    @pytest.mark.parametrize("version", ["7.1.0", "7.1", "7.2.5", "8.0.0-beta1", "14.0.0"])
    def test_supported(self, version):
        assert is_supported_version(version) is True

    @pytest.mark.parametrize("version", ["7.0.9", "6.8.12", "vNext", "", "7", "7_1.0", " 7.1"])
    def test_unsupported(self, version):
        assert is_supported_version(version) is False


class TestCheckPlatformVersion:
    def test_supported_shared_dependency(self):
        assert check_platform_version([_shared("7.1.0")]) is True
        assert check_platform_version([_shared("8.0.0-beta1")]) is True

    def test_old_shared_dependency(self):
        assert check_platform_version([_shared("7.0.9")]) is False

    def test_unparseable_shared_dependency(self):
        assert check_platform_version([_shared("vNext")]) is False

    def test_no_dependencies(self):
        assert check_platform_version([]) is False

    def test_other_artifacts_ignored(self):
        deps = [
            Dependency("com.vaadin", "vaadin-server", "8.0.0"),
            Dependency("org.example", "vaadin-shared", "8.0.0"),
        ]
        assert check_platform_version(deps) is False

    def test_later_candidate_can_satisfy(self):
        deps = [_shared("vNext"), _shared("7.0.9"), _shared("7.1.2")]
        assert check_platform_version(deps) is True

    def test_warns_about_old_version(self, caplog):
        with caplog.at_level(logging.WARNING, logger="themeupdater"):
            check_platform_version([_shared("7.0.9")])
        assert "7.0.9" in caplog.text
