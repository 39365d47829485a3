# SPDX-License-Identifier: MIT
"""Numeric-only version ordering.

BareVersion compares MAJOR.MINOR.PATCH and nothing else: pre-release and
build metadata are kept for display but never affect ordering, so
``1.0.0-alpha`` is the same as ``1.0.0``. Use :class:`~.semver.Version` when
pre-releases must rank below their release.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .semver import Version, parse_version


@dataclass(frozen=True, slots=True)
class BareVersion:
    """A validated version ordered by its numeric components only."""

    version: Version

    @classmethod
    def parse(cls, version_string: str) -> "BareVersion":
        """Parse a full semantic version string.

        Raises:
            InvalidVersionError: If the string does not follow semantic versioning
        """
        return cls(parse_version(version_string))

    @classmethod
    def from_version(cls, version: Version) -> "BareVersion":
        return cls(version)

    @property
    def major(self) -> int:
        return self.version.major

    @property
    def minor(self) -> int:
        return self.version.minor

    @property
    def patch(self) -> int:
        return self.version.patch

    @property
    def numbers(self) -> tuple[int, int, int]:
        return (self.version.major, self.version.minor, self.version.patch)

    def __str__(self) -> str:
        return str(self.version)

    def before(self, other: "BareVersion") -> bool:
        return self.numbers < other.numbers

    def after(self, other: "BareVersion") -> bool:
        return self.numbers > other.numbers

    def same(self, other: "BareVersion") -> bool:
        return self.numbers == other.numbers

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, BareVersion):
            return NotImplemented
        return self.before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, BareVersion):
            return NotImplemented
        return not self.after(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, BareVersion):
            return NotImplemented
        return self.after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, BareVersion):
            return NotImplemented
        return not self.before(other)


def compare_bare(
    version1: Union[str, Version, BareVersion], version2: Union[str, Version, BareVersion]
) -> int:
    """Compare two versions by MAJOR.MINOR.PATCH only.

    Returns:
        -1, 0 or 1 as version1 is lower, equal or higher

    Examples:
        >>> compare_bare("1.0.0-alpha", "1.0.0+build")
        0
        >>> compare_bare("2.0.0", "1.9.9")
        1
    """
    b1 = _as_bare(version1)
    b2 = _as_bare(version2)
    if b1.before(b2):
        return -1
    if b1.after(b2):
        return 1
    return 0


def _as_bare(version: Union[str, Version, BareVersion]) -> BareVersion:
    if isinstance(version, BareVersion):
        return version
    if isinstance(version, str):
        return BareVersion.parse(version)
    return BareVersion.from_version(version)
