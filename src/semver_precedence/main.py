# SPDX-License-Identifier: MIT
"""CLI entry point for the semver-precedence command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from .config import ConfigError, ProjectConfig, load_config
from .semver import InvalidVersionError


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[ProjectConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> ProjectConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


def echo_verbose(ctx: Context, message: str) -> None:
    """Print a detail line when --verbose is set."""
    if ctx.verbose:
        click.secho(message, dim=True, err=True)


@click.group()
@click.version_option(package_name="semver-precedence")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Look for pyproject.toml in this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Parse, compare and order semantic versions.

    \b
    Examples:
        semver-precedence parse 1.0.0-beta+exp.sha.5114f85
        semver-precedence compare 1.0.0-alpha 1.0.0
        semver-precedence sort 1.0.0 0.1.0 1.0.0-rc.1
        semver-precedence bump minor
    """
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import bump, order, validate

cli.add_command(validate.parse)
cli.add_command(validate.validate)
cli.add_command(order.compare)
cli.add_command(order.sort)
cli.add_command(bump.current)
cli.add_command(bump.bump)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, InvalidVersionError) as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
