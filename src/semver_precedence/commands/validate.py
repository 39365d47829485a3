# SPDX-License-Identifier: MIT
"""Parse and validate version strings."""

from __future__ import annotations

import click

from ..main import Context, echo_error, echo_info, echo_success, pass_context
from ..semver import InvalidVersionError, parse_version


@click.command()
@click.argument("version")
@pass_context
def parse(ctx: Context, version: str) -> None:
    """Show the components of VERSION.

    \b
    Examples:
        semver-precedence parse 1.2.3-early-bird.135+exp.sha.5114f85
    """
    try:
        v = parse_version(version)
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(1)

    echo_info(f"major:       {v.major}")
    echo_info(f"minor:       {v.minor}")
    echo_info(f"patch:       {v.patch}")
    echo_info(f"pre-release: {v.prerelease_string or ''}")
    echo_info(f"build:       {v.build_string or ''}")


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option("-q", "--quiet", is_flag=True, help="Only report through the exit status.")
@pass_context
def validate(ctx: Context, versions: tuple[str, ...], quiet: bool) -> None:
    """Check that each VERSION is a valid semantic version.

    Exits with status 1 if any version is invalid.
    """
    failed = False
    for version in versions:
        try:
            parse_version(version)
        except InvalidVersionError as e:
            failed = True
            if not quiet:
                echo_error(f"{version!r}: {e.message}")
            continue
        if not quiet:
            echo_success(f"{version}: valid")

    if failed:
        raise SystemExit(1)
