# SPDX-License-Identifier: MIT
"""Semantic version parsing and formatting.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -early-bird.135
- Build metadata: +build, +build.123, +exp.sha.5114f85

Two conventions are stricter than SemVer 2.0.0: ``0.0.0`` is rejected, and
numeric groups are limited to the signed 32-bit range.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Optional

# Upper bound for major, minor and patch (signed 32-bit)
MAX_COMPONENT = 2**31 - 1

SEMVER_PATTERN = re.compile(
    r"(?P<major>0|[1-9][0-9]*)"
    r"\.(?P<minor>0|[1-9][0-9]*)"
    r"\.(?P<patch>0|[1-9][0-9]*)"
    r"(?:-(?P<prerelease>[0-9A-Za-z.-]*))?"
    r"(?:\+(?P<buildmetadata>[0-9A-Za-z.-]*))?"
)

IDENTIFIER_PATTERN = re.compile(r"[0-9A-Za-z-]+")


class InvalidVersionError(Exception):
    """Raised when a version string does not follow semantic versioning."""

    def __init__(self, version: str, message: str = ""):
        self.version = version
        self.message = message or f"Invalid semantic version: {version}"
        super().__init__(self.message)


class MalformedFormatError(InvalidVersionError):
    """The input does not match the MAJOR.MINOR.PATCH grammar."""


class InvalidMetadataError(InvalidVersionError):
    """A pre-release or build section holds an empty or illegal identifier."""


class DegenerateVersionError(InvalidVersionError):
    """All of major, minor and patch are zero."""


class IntegerOverflowError(InvalidVersionError):
    """A numeric component exceeds MAX_COMPONENT."""


def _split_identifiers(section: str, kind: str, raw: str) -> tuple[str, ...]:
    """Split a pre-release or build section on dots.

    Raises:
        InvalidMetadataError: If the section is empty or contains an empty
            identifier (leading, trailing or double dot)
    """
    if not section:
        raise InvalidMetadataError(raw, f"Empty {kind} section in version: {raw}")

    identifiers = tuple(section.split("."))
    if any(not identifier for identifier in identifiers):
        raise InvalidMetadataError(
            raw, f"Empty {kind} identifier in version: {raw}"
        )
    return identifiers


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Equality and hashing are structural and include build metadata. The
    ordering operators follow SemVer precedence, which ignores build
    metadata; use :meth:`same` to test for equal precedence.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers (e.g., ("alpha", "1"))
        build: Build metadata identifiers (e.g., ("exp", "sha", "5114f85"))
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for kind, attr in (("pre-release", "prerelease"), ("build", "build")):
            if isinstance(getattr(self, attr), str):
                raise InvalidMetadataError(
                    getattr(self, attr),
                    f"{kind.capitalize()} must be a sequence of identifiers, not a string",
                )

        # Accept any iterable of identifiers but store tuples
        object.__setattr__(self, "prerelease", tuple(self.prerelease))
        object.__setattr__(self, "build", tuple(self.build))

        raw = format_version(self)
        for attr in ("major", "minor", "patch"):
            value = getattr(self, attr)
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise MalformedFormatError(
                    raw, f"{attr.capitalize()} must be a non-negative integer, got {value!r}"
                )
            if value > MAX_COMPONENT:
                raise IntegerOverflowError(
                    raw, f"{attr.capitalize()} version {value} exceeds {MAX_COMPONENT}"
                )

        for kind, identifiers in (("pre-release", self.prerelease), ("build", self.build)):
            for identifier in identifiers:
                if not isinstance(identifier, str) or not IDENTIFIER_PATTERN.fullmatch(identifier):
                    raise InvalidMetadataError(
                        raw, f"Invalid {kind} identifier {identifier!r} in version: {raw}"
                    )

        if self.major == 0 and self.minor == 0 and self.patch == 0:
            raise DegenerateVersionError(raw, f"Version cannot be zero: {raw}")

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        return format_version(self)

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def prerelease_string(self) -> Optional[str]:
        """Return the dot-joined pre-release, or None if absent."""
        return ".".join(self.prerelease) if self.prerelease else None

    @property
    def build_string(self) -> Optional[str]:
        """Return the dot-joined build metadata, or None if absent."""
        return ".".join(self.build) if self.build else None

    # Precedence relations

    def before(self, other: "Version") -> bool:
        """Return True if this version has lower precedence than ``other``."""
        return compare_versions(self, other) < 0

    def after(self, other: "Version") -> bool:
        """Return True if this version has higher precedence than ``other``."""
        return compare_versions(self, other) > 0

    def same(self, other: "Version") -> bool:
        """Return True if both versions have equal precedence.

        Build metadata may differ: ``1.0.0+a`` is the same as ``1.0.0+b``.
        """
        return compare_versions(self, other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.before(other)

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not self.after(other)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.after(other)

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return not self.before(other)

    # Increments

    def bump_major(self) -> "Version":
        """Return a new version with the major part raised.

        >>> parse_version("3.4.5-rc.1").bump_major()
        Version(major=4, minor=0, patch=0, prerelease=(), build=())
        """
        return Version(self.major + 1, 0, 0)

    def bump_minor(self) -> "Version":
        """Return a new version with the minor part raised."""
        return Version(self.major, self.minor + 1, 0)

    def bump_patch(self) -> "Version":
        """Return a new version with the patch part raised."""
        return Version(self.major, self.minor, self.patch + 1)


def format_version(version: Version) -> str:
    """Render a version in canonical form.

    Examples:
        >>> format_version(Version(1, 0, 0, ("beta",), ("exp", "sha", "5114f85")))
        '1.0.0-beta+exp.sha.5114f85'
    """
    result = f"{version.major}.{version.minor}.{version.patch}"
    if version.prerelease:
        result += "-" + ".".join(str(i) for i in version.prerelease)
    if version.build:
        result += "+" + ".".join(str(i) for i in version.build)
    return result


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        MalformedFormatError: If the string does not match the grammar
        IntegerOverflowError: If a numeric group exceeds MAX_COMPONENT
        InvalidMetadataError: If a pre-release or build identifier is empty
        DegenerateVersionError: If the version is 0.0.0

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), build=())

        >>> parse_version("1.2.3-early-bird.135")
        Version(major=1, minor=2, patch=3, prerelease=('early-bird', '135'), build=())

        >>> parse_version("1.0.0-beta+exp.sha.5114f85")
        Version(major=1, minor=0, patch=0, prerelease=('beta',), build=('exp', 'sha', '5114f85'))
    """
    if not isinstance(version_string, str):
        raise MalformedFormatError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    if not version_string:
        raise MalformedFormatError(version_string, "Version string cannot be empty")

    match = SEMVER_PATTERN.fullmatch(version_string)
    if not match:
        raise MalformedFormatError(version_string, f"Invalid version format: {version_string}")

    numbers = {}
    for attr in ("major", "minor", "patch"):
        digits = match.group(attr)
        # Length check first: int() refuses very long digit strings
        if len(digits) > len(str(MAX_COMPONENT)) or int(digits) > MAX_COMPONENT:
            raise IntegerOverflowError(
                version_string,
                f"{attr.capitalize()} version {match.group(attr)} exceeds {MAX_COMPONENT}",
            )
        numbers[attr] = int(digits)

    prerelease: tuple[str, ...] = ()
    if match.group("prerelease") is not None:
        prerelease = _split_identifiers(match.group("prerelease"), "pre-release", version_string)

    build: tuple[str, ...] = ()
    if match.group("buildmetadata") is not None:
        build = _split_identifiers(match.group("buildmetadata"), "build", version_string)

    if numbers["major"] == 0 and numbers["minor"] == 0 and numbers["patch"] == 0:
        raise DegenerateVersionError(version_string, f"Version cannot be zero: {version_string}")

    return Version(prerelease=prerelease, build=build, **numbers)


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("0.0.0")
        False
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True


def coerce_versions(versions: Iterable[Version | str]) -> list[Version]:
    """Parse any strings in ``versions``, leaving Version objects untouched."""
    return [parse_version(v) if isinstance(v, str) else v for v in versions]


# Imported last: compare depends on the names above
from .compare import compare_versions
