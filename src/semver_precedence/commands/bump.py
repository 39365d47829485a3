# SPDX-License-Identifier: MIT
"""Show and increment the project version."""

from __future__ import annotations

from typing import Optional

import click

from ..config import ConfigError
from ..main import Context, echo_error, echo_info, echo_verbose, pass_context
from ..semver import InvalidVersionError, Version, parse_version


def _project_version(ctx: Context) -> Version:
    """Load and parse the version of the current project.

    Exits with status 1 on any configuration or version error.
    """
    try:
        config = ctx.load_config()
        version = config.parsed_version()
    except (ConfigError, FileNotFoundError) as e:
        echo_error(str(e))
        raise SystemExit(1)
    except InvalidVersionError as e:
        echo_error(f"Project version: {e.message}")
        raise SystemExit(1)

    echo_verbose(ctx, f"Read version {version} from {config.pyproject_path}")
    return version


@click.command()
@pass_context
def current(ctx: Context) -> None:
    """Print the version declared in pyproject.toml."""
    echo_info(str(_project_version(ctx)))


@click.command()
@click.argument("part", type=click.Choice(["major", "minor", "patch"]))
@click.argument("version", required=False)
@pass_context
def bump(ctx: Context, part: str, version: Optional[str]) -> None:
    """Print VERSION with PART incremented.

    Without VERSION, the project version from pyproject.toml is used. The
    result drops pre-release and build metadata. Nothing is written.

    \b
    Examples:
        semver-precedence bump patch 1.2.3      # 1.2.4
        semver-precedence bump major 1.2.3-rc.1 # 2.0.0
        semver-precedence bump minor            # from pyproject.toml
    """
    if version is None:
        v = _project_version(ctx)
    else:
        try:
            v = parse_version(version)
        except InvalidVersionError as e:
            echo_error(e.message)
            raise SystemExit(1)

    try:
        if part == "major":
            bumped = v.bump_major()
        elif part == "minor":
            bumped = v.bump_minor()
        else:
            bumped = v.bump_patch()
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(1)

    echo_info(str(bumped))
