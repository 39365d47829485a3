# SPDX-License-Identifier: MIT
"""Compare and sort versions by precedence."""

from __future__ import annotations

import click

from ..bare import compare_bare
from ..compare import compare_versions, sort_versions
from ..main import Context, echo_error, echo_info, echo_verbose, pass_context
from ..semver import InvalidVersionError

_RELATION = {-1: "<", 0: "==", 1: ">"}


@click.command()
@click.argument("version1")
@click.argument("version2")
@click.option(
    "--bare",
    is_flag=True,
    help="Compare MAJOR.MINOR.PATCH only, ignoring pre-release.",
)
@pass_context
def compare(ctx: Context, version1: str, version2: str, bare: bool) -> None:
    """Compare VERSION1 with VERSION2.

    Prints the relation, e.g. "1.0.0-alpha < 1.0.0". Build metadata never
    affects the result.
    """
    try:
        result = compare_bare(version1, version2) if bare else compare_versions(version1, version2)
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(1)

    echo_verbose(ctx, "Ordering: " + ("major.minor.patch only" if bare else "full precedence"))
    echo_info(f"{version1} {_RELATION[result]} {version2}")


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option("-r", "--reverse", is_flag=True, help="Highest version first.")
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS ordered by precedence, lowest first."""
    try:
        ordered = sort_versions(versions, reverse=reverse)
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(1)

    for version in ordered:
        echo_info(str(version))
