# SPDX-License-Identifier: MIT
"""Unit tests for release versions."""

import sys

import pytest

from tag_version import (
    ChangeLevel,
    InvalidFormatError,
    InvalidValueError,
    PrereleaseVersion,
    ReleaseVersion,
)


class TestParse:
    """Tests for ReleaseVersion.parse."""

    def test_basic_version(self):
        """Test parsing basic MAJOR.MINOR.PATCH version."""
        assert ReleaseVersion.parse("1.2.3") == {"major": 1, "minor": 2, "patch": 3}

    def test_tag_prefix(self):
        """Test that a leading v is accepted."""
        assert ReleaseVersion.parse("v10.0.7") == {"major": 10, "minor": 0, "patch": 7}

    def test_large_version_numbers(self):
        """Test parsing large version numbers."""
        assert ReleaseVersion.parse("999.888.777") == {"major": 999, "minor": 888, "patch": 777}

    @pytest.mark.parametrize(
        "version_string",
        ["", "1.2", "1", "1.2.3.4", "x1.2.3", "V1.2.3", "1.2.x", "1.2.3-alpha.1", " 1.2.3", "1.2.3\n"],
    )
    def test_invalid_strings(self, version_string):
        """Test that anything but an exact release version is rejected."""
        with pytest.raises(InvalidFormatError):
            ReleaseVersion.parse(version_string)

    def test_non_string(self):
        """Test that non-string input raises error."""
        with pytest.raises(InvalidFormatError):
            ReleaseVersion.parse(123)  # type: ignore

    def test_error_carries_value(self):
        """Test that the error keeps the rejected string."""
        with pytest.raises(InvalidFormatError) as exc_info:
            ReleaseVersion.parse("1.1")
        assert exc_info.value.value == "1.1"
        assert "1.1" in str(exc_info.value)

    @pytest.mark.skipif(
        not hasattr(sys, "get_int_max_str_digits"), reason="no int string conversion limit"
    )
    def test_overlong_component(self):
        """Test that a component past the int conversion limit is a format error."""
        version_string = "1" * 5000 + ".0.0"
        with pytest.raises(InvalidFormatError):
            ReleaseVersion.parse(version_string)
        assert ReleaseVersion.matches_pattern(version_string) is False


class TestMatchesPattern:
    """Tests for ReleaseVersion.matches_pattern."""

    def test_valid(self):
        assert ReleaseVersion.matches_pattern("1.0.0") is True
        assert ReleaseVersion.matches_pattern("v0.0.1") is True

    def test_invalid(self):
        assert ReleaseVersion.matches_pattern("1.0") is False
        assert ReleaseVersion.matches_pattern("1.0.0-beta.1") is False
        assert ReleaseVersion.matches_pattern(None) is False  # type: ignore


class TestConstruction:
    """Tests for building release versions."""

    def test_defaults(self):
        """Test that omitted components default to 0."""
        assert ReleaseVersion().to_record() == {"major": 0, "minor": 0, "patch": 0}
        assert ReleaseVersion.from_input().to_record() == {"major": 0, "minor": 0, "patch": 0}

    def test_from_record(self):
        """Test building from a partial record."""
        version = ReleaseVersion.from_input({"minor": 2})
        assert version.to_record() == {"major": 0, "minor": 2, "patch": 0}

    def test_from_string(self):
        version = ReleaseVersion.from_input("v1.2.3")
        assert (version.major, version.minor, version.patch) == (1, 2, 3)

    def test_from_version_copies(self):
        """Test that building from another version copies its triple."""
        original = ReleaseVersion(1, 2, 3)
        copy = ReleaseVersion.from_input(original)
        copy.bump(ChangeLevel.MAJOR)
        assert original.to_record() == {"major": 1, "minor": 2, "patch": 3}

    def test_from_prerelease_takes_core(self):
        prerelease = PrereleaseVersion.from_string("2.3.4-beta.5")
        assert ReleaseVersion.from_input(prerelease) == ReleaseVersion(2, 3, 4)

    def test_negative_component(self):
        """Test that negative components are rejected."""
        with pytest.raises(InvalidValueError):
            ReleaseVersion(major=-1)
        with pytest.raises(InvalidValueError):
            ReleaseVersion.from_input({"patch": -3})

    def test_non_integer_component(self):
        with pytest.raises(InvalidValueError):
            ReleaseVersion(minor="1")  # type: ignore
        with pytest.raises(InvalidValueError):
            ReleaseVersion(minor=True)  # type: ignore


class TestRepresentations:
    """Tests for string, tag and record forms."""

    def test_version_string(self):
        assert ReleaseVersion(1, 2, 3).version_string == "1.2.3"
        assert str(ReleaseVersion(1, 2, 3)) == "1.2.3"

    def test_tag_name(self):
        assert ReleaseVersion.from_string("1.0.0").tag_name == "v1.0.0"

    def test_record(self):
        assert ReleaseVersion(4, 5, 6).to_record() == {"major": 4, "minor": 5, "patch": 6}

    def test_equality(self):
        assert ReleaseVersion(1, 0, 0) == ReleaseVersion.from_string("v1.0.0")
        assert ReleaseVersion(1, 0, 0) != ReleaseVersion(1, 0, 1)


class TestBump:
    """Tests for ReleaseVersion.bump."""

    def test_major(self):
        version = ReleaseVersion(1, 2, 3).bump(ChangeLevel.MAJOR)
        assert version.to_record() == {"major": 2, "minor": 0, "patch": 0}

    def test_minor(self):
        version = ReleaseVersion(major=1).bump(ChangeLevel.MINOR)
        assert version.to_record() == {"major": 1, "minor": 1, "patch": 0}

    def test_patch(self):
        version = ReleaseVersion(1, 2, 3).bump(ChangeLevel.PATCH)
        assert version.to_record() == {"major": 1, "minor": 2, "patch": 4}

    def test_returns_same_instance(self):
        version = ReleaseVersion()
        assert version.bump(ChangeLevel.PATCH) is version

    def test_no_level_is_noop(self):
        """Test that a missing or unknown level leaves the version unchanged."""
        version = ReleaseVersion(1, 2, 3)
        version.bump(None)
        version.bump("huge")  # type: ignore
        assert version.version_string == "1.2.3"


class TestCompare:
    """Tests for ReleaseVersion.compare."""

    def test_equal(self):
        assert ReleaseVersion.compare("1.0.0", "v1.0.0") == 0

    def test_major_priority(self):
        assert ReleaseVersion.compare("1.9.9", "2.0.0") == -1
        assert ReleaseVersion.compare("2.0.0", "1.9.9") == 1

    def test_minor_priority(self):
        assert ReleaseVersion.compare("1.1.9", "1.2.0") == -1

    def test_patch(self):
        assert ReleaseVersion.compare("1.0.10", "1.0.9") == 1

    def test_mixed_inputs(self):
        """Test comparing strings, records and objects together."""
        assert ReleaseVersion.compare({"major": 1}, ReleaseVersion(1)) == 0
        assert ReleaseVersion.compare({"minor": 1, "extra": "x"}, "0.0.9") == 1

    def test_sort_key(self):
        assert ReleaseVersion.sort_key("v3.2.1") == (3, 2, 1)
        assert ReleaseVersion.sort_key({"patch": 2}) == (0, 0, 2)


class TestMaxOf:
    """Tests for ReleaseVersion.max_of."""

    def test_strings(self):
        assert ReleaseVersion.max_of(["1.0.0", "0.2.0", "0.0.3"]) == "1.0.0"

    def test_returns_original_input(self):
        """Test that the original value comes back, not a normalized copy."""
        inputs = [{"channel": "alpha", "major": 1}, {"channel": "beta", "minor": 2}, {"patch": 3}]
        highest = ReleaseVersion.max_of(inputs)
        assert highest is inputs[0]

    def test_objects(self):
        versions = [ReleaseVersion(0, 1, 0), ReleaseVersion(0, 10, 0), ReleaseVersion(0, 9, 9)]
        assert ReleaseVersion.max_of(versions) is versions[1]

    def test_first_of_equal_maxima_wins(self):
        inputs = ["1.0.0", "v2.0.0", {"major": 2}, "2.0.0"]
        assert ReleaseVersion.max_of(inputs) == "v2.0.0"

    def test_generator_input(self):
        assert ReleaseVersion.max_of(s for s in ["0.0.1", "0.1.0"]) == "0.1.0"

    def test_empty(self):
        with pytest.raises(ValueError):
            ReleaseVersion.max_of([])


class TestSortVersions:
    """Tests for ReleaseVersion.sort_versions."""

    def test_ascending(self):
        assert ReleaseVersion.sort_versions(["1.10.0", "1.2.0", "0.9.0"]) == [
            "0.9.0",
            "1.2.0",
            "1.10.0",
        ]

    def test_descending_is_stable(self):
        """Test that equal versions keep their input order when reversed."""
        inputs = ["v1.0.0", "2.0.0", "1.0.0"]
        assert ReleaseVersion.sort_versions(inputs, reverse=True) == ["2.0.0", "v1.0.0", "1.0.0"]
