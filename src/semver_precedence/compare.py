# SPDX-License-Identifier: MIT
"""Version precedence and ordering.

Pre-release identifiers are compared as plain ASCII strings, including purely
numeric ones, so ``1.0.0-10`` sorts before ``1.0.0-9``. SemVer 2.0.0 compares
numeric identifiers as integers; this module intentionally does not.

Build metadata is ignored in comparisons.
"""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, Sequence, Union

from .semver import Version, coerce_versions, parse_version


def _compare_prerelease(pre1: Sequence[str], pre2: Sequence[str]) -> int:
    """Compare two pre-release identifier sequences.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    A version without pre-release has higher precedence than one with
    pre-release (1.0.0 > 1.0.0-alpha).
    """
    # No pre-release > any pre-release
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1
    if not pre2:
        return -1

    for p1, p2 in zip(pre1, pre2):
        if p1 != p2:
            return -1 if p1 < p2 else 1

    # All compared parts equal - longer pre-release has higher precedence
    if len(pre1) != len(pre2):
        return -1 if len(pre1) < len(pre2) else 1

    return 0


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+a", "1.0.0+b")
        0
        >>> compare_versions("1.0.0-alpha.1", "1.0.0-alpha")
        1
        >>> compare_versions("1.0.0-10", "1.0.0-9")
        -1
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    return _compare_prerelease(v1.prerelease, v2.prerelease)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key that orders exactly like :func:`compare_versions`.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = parse_version(version) if isinstance(version, str) else version

    # Releases get (1,) so they sort after every (0, identifiers) pre-release
    if not v.prerelease:
        prerelease_key: tuple = (1,)
    else:
        prerelease_key = (0, v.prerelease)

    return (v.major, v.minor, v.patch, prerelease_key)


def sort_versions(
    versions: Iterable[Union[str, Version]], reverse: bool = False
) -> list[Version]:
    """Return versions sorted by precedence, lowest first.

    Strings are parsed first. The sort is stable, so versions with the same
    precedence (e.g. differing only in build metadata) keep their input order.

    Raises:
        InvalidVersionError: If any version string is invalid
    """
    return sorted(coerce_versions(versions), key=cmp_to_key(compare_versions), reverse=reverse)
