# SPDX-License-Identifier: MIT
"""Unit tests for version precedence and ordering."""

import random

import pytest

from semver_precedence import (
    InvalidVersionError,
    compare_versions,
    parse_version,
    sort_versions,
    version_key,
)

# Ascending precedence order
ORDERED_VERSIONS = [
    "0.1.0-alpha",
    "0.1.0",
    "0.1.5-alpha",
    "0.1.5-alpha.1",
    "0.1.5-beta",
    "1.0.0-alpha",
    "1.0.0-alpha.1",
    "1.0.0-beta",
    "1.0.0",
]


class TestCompareVersions:
    """Tests for compare_versions function."""

    def test_equal_versions(self):
        """Test that equal versions compare as equal."""
        assert compare_versions("1.0.0", "1.0.0") == 0

    def test_major_difference(self):
        """Test comparison with different major versions."""
        assert compare_versions("1.0.0", "2.0.0") == -1
        assert compare_versions("2.0.0", "1.0.0") == 1

    def test_minor_difference(self):
        """Test comparison with different minor versions."""
        assert compare_versions("1.0.0", "1.1.0") == -1
        assert compare_versions("1.1.0", "1.0.0") == 1

    def test_patch_difference(self):
        """Test comparison with different patch versions."""
        assert compare_versions("1.0.0", "1.0.1") == -1
        assert compare_versions("1.0.1", "1.0.0") == 1

    def test_higher_major_wins_over_lower_minor(self):
        """Test that minor and patch only matter once major ties."""
        assert compare_versions("2.0.0", "1.9.9") == 1
        assert compare_versions("1.9.9", "2.0.0") == -1
        assert compare_versions("1.2.0", "1.1.9") == 1

    def test_prerelease_vs_release(self):
        """Test that pre-release is less than release."""
        assert compare_versions("1.0.0-alpha", "1.0.0") == -1
        assert compare_versions("1.0.0", "1.0.0-alpha") == 1

    def test_prerelease_of_higher_version(self):
        """Test that numeric components decide before pre-release."""
        assert compare_versions("0.9.0", "1.0.0-alpha") == -1

    def test_alpha_vs_beta(self):
        """Test that identifiers compare as strings."""
        assert compare_versions("1.0.0-alpha", "1.0.0-beta") == -1
        assert compare_versions("1.0.0-beta", "1.0.0-alpha") == 1

    def test_numbered_prerelease(self):
        """Test comparison of numbered pre-releases."""
        assert compare_versions("1.0.0-alpha.1", "1.0.0-alpha.2") == -1
        assert compare_versions("1.0.0-alpha.2", "1.0.0-alpha.1") == 1
        assert compare_versions("1.0.0-alpha.1", "1.0.0-alpha.1") == 0

    def test_longer_prerelease_wins(self):
        """Test that a longer pre-release with identical prefix ranks higher."""
        assert compare_versions("1.0.0-alpha", "1.0.0-alpha.1") == -1
        assert compare_versions("1.0.0-alpha.1.2", "1.0.0-alpha.1") == 1

    def test_build_metadata_ignored(self):
        """Test that build metadata is ignored in comparison."""
        assert compare_versions("1.0.0+build1", "1.0.0+build2") == 0
        assert compare_versions("1.0.0+build", "1.0.0") == 0
        assert compare_versions("1.2.3-beta+123", "1.2.3-beta+456") == 0

    def test_version_objects(self):
        """Test comparison with Version objects."""
        assert compare_versions(parse_version("1.0.0"), parse_version("2.0.0")) == -1

    def test_mixed_string_and_version(self):
        """Test comparison with mixed string and Version."""
        v = parse_version("1.0.0")
        assert compare_versions(v, "2.0.0") == -1
        assert compare_versions("1.0.0", v) == 0

    def test_invalid_string(self):
        """Test that invalid strings raise instead of comparing."""
        with pytest.raises(InvalidVersionError):
            compare_versions("1.0.0", "0.0.0")


class TestLexicographicIdentifiers:
    """Pre-release identifiers compare as ASCII strings, numeric or not.

    SemVer 2.0.0 compares numeric identifiers as integers; this ordering
    deliberately does not.
    """

    def test_numeric_identifiers_are_strings(self):
        assert compare_versions("1.0.0-10", "1.0.0-9") == -1
        assert compare_versions("1.0.0-alpha.10", "1.0.0-alpha.9") == -1

    def test_digits_before_letters(self):
        assert compare_versions("1.0.0-1", "1.0.0-a") == -1

    def test_uppercase_before_lowercase(self):
        assert compare_versions("1.0.0-RC", "1.0.0-alpha") == -1

    def test_hyphen_ordering(self):
        assert compare_versions("1.0.0--", "1.0.0-0") == -1


class TestRelations:
    """Tests for before, after and same."""

    @pytest.mark.parametrize(
        "earlier, later",
        [
            ("0.9.0", "1.0.0"),
            ("1.0.0-alpha", "1.0.0"),
            ("1.0.0-alpha", "1.0.0-beta"),
            ("1.0.0-alpha.1", "1.0.0-alpha.2"),
            ("1.0.0-alpha", "1.0.0-alpha.1"),
        ],
    )
    def test_before_and_after(self, earlier, later):
        a = parse_version(earlier)
        b = parse_version(later)
        assert a.before(b)
        assert b.after(a)
        assert not a.after(b)
        assert not b.before(a)
        assert not a.same(b)

    @pytest.mark.parametrize(
        "a, b",
        [
            ("1.0.0", "1.0.0"),
            ("1.0.0-alpha", "1.0.0-alpha"),
            ("1.0.0-alpha.1.2", "1.0.0-alpha.1.2"),
            ("1.0.0+test", "1.0.0+test"),
            ("1.0.0+123", "1.0.0+456"),
            ("1.0.0-beta+123", "1.0.0-beta+456"),
        ],
    )
    def test_same(self, a, b):
        v1 = parse_version(a)
        v2 = parse_version(b)
        assert v1.same(v2)
        assert not v1.before(v2)
        assert not v1.after(v2)

    def test_same_requires_identical_prerelease(self):
        """Test that matching major/minor/patch alone is not enough."""
        assert not parse_version("1.0.0-alpha").same(parse_version("1.0.0"))
        assert not parse_version("1.0.0-alpha").same(parse_version("1.0.0-beta"))

    def test_operators(self):
        """Test that rich comparisons follow precedence."""
        alpha = parse_version("1.0.0-alpha")
        release = parse_version("1.0.0")
        release_build = parse_version("1.0.0+build")
        assert alpha < release
        assert release > alpha
        assert alpha <= release
        assert release >= alpha
        assert release <= release_build
        assert release >= release_build
        assert not release < release_build

    def test_operator_with_other_type(self):
        """Test that ordering against a non-Version is unsupported."""
        with pytest.raises(TypeError):
            parse_version("1.0.0") < "2.0.0"  # type: ignore


class TestSortVersions:
    """Tests for sort_versions and version_key."""

    def test_shuffled_sample(self):
        """Test that a shuffled sample sorts back into precedence order."""
        shuffled = ORDERED_VERSIONS[:]
        random.Random(1234).shuffle(shuffled)
        assert [str(v) for v in sort_versions(shuffled)] == ORDERED_VERSIONS

    def test_fixed_permutation(self):
        """Test the same sample from a fixed input order."""
        versions = [
            "0.1.5-beta",
            "1.0.0-alpha",
            "0.1.0",
            "1.0.0",
            "0.1.5-alpha.1",
            "0.1.0-alpha",
            "1.0.0-alpha.1",
            "1.0.0-beta",
            "0.1.5-alpha",
        ]
        assert [str(v) for v in sort_versions(versions)] == ORDERED_VERSIONS

    def test_reverse(self):
        """Test descending order."""
        result = sort_versions(ORDERED_VERSIONS, reverse=True)
        assert [str(v) for v in result] == ORDERED_VERSIONS[::-1]

    def test_stable_for_same_precedence(self):
        """Test that same-precedence versions keep their input order."""
        result = sort_versions(["1.0.0+b", "0.5.0", "1.0.0+a"])
        assert [str(v) for v in result] == ["0.5.0", "1.0.0+b", "1.0.0+a"]

    def test_sort_version_objects(self):
        """Test sorting Version objects."""
        versions = [parse_version("2.0.0"), parse_version("1.0.0")]
        assert [v.major for v in sort_versions(versions)] == [1, 2]

    def test_builtin_sorted(self):
        """Test that sorted() on Version objects uses precedence."""
        versions = [parse_version(v) for v in reversed(ORDERED_VERSIONS)]
        assert [str(v) for v in sorted(versions)] == ORDERED_VERSIONS

    def test_version_key(self):
        """Test sorting strings with version_key."""
        shuffled = ORDERED_VERSIONS[::-1]
        assert sorted(shuffled, key=version_key) == ORDERED_VERSIONS

    def test_version_key_lexicographic(self):
        """Test that version_key matches the string ordering of identifiers."""
        assert sorted(["1.0.0-9", "1.0.0-10"], key=version_key) == ["1.0.0-10", "1.0.0-9"]

    def test_invalid_entry(self):
        """Test that an invalid entry fails the whole sort."""
        with pytest.raises(InvalidVersionError):
            sort_versions(["1.0.0", "1.0"])
