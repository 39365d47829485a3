# SPDX-License-Identifier: MIT
"""Semantic version parsing, precedence and ordering.

This package parses versions following the SemVer 2.0.0 grammar and orders
them by precedence. Two conventions differ from the SemVer 2.0.0 text:
``0.0.0`` is rejected, and pre-release identifiers are always compared as
ASCII strings (``1.0.0-10`` < ``1.0.0-9``).

Example:
    >>> from semver_precedence import parse_version, compare_versions, sort_versions
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.prerelease
    ('alpha', '1')
    >>> version.before(parse_version("1.2.3"))
    True
    >>>
    >>> compare_versions("1.0.0+a", "1.0.0+b")
    0
    >>> [str(v) for v in sort_versions(["1.0.0", "1.0.0-beta", "0.9.0"])]
    ['0.9.0', '1.0.0-beta', '1.0.0']
"""

__version__ = "0.1.0"

from .semver import (
    Version,
    parse_version,
    format_version,
    is_valid_semver,
    InvalidVersionError,
    MalformedFormatError,
    InvalidMetadataError,
    DegenerateVersionError,
    IntegerOverflowError,
    MAX_COMPONENT,
    SEMVER_PATTERN,
)
from .compare import (
    compare_versions,
    sort_versions,
    version_key,
)
from .bare import (
    BareVersion,
    compare_bare,
)

__all__ = [
    # Version parsing
    "Version",
    "parse_version",
    "format_version",
    "is_valid_semver",
    "InvalidVersionError",
    "MalformedFormatError",
    "InvalidMetadataError",
    "DegenerateVersionError",
    "IntegerOverflowError",
    "MAX_COMPONENT",
    "SEMVER_PATTERN",
    # Version comparison
    "compare_versions",
    "sort_versions",
    "version_key",
    # Numeric-only ordering
    "BareVersion",
    "compare_bare",
]
