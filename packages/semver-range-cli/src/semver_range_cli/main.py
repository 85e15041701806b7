# SPDX-License-Identifier: MIT
"""CLI entry point for the semrange command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from semver_range import MatchMode, ParseError

from . import __version__
from .config import CLIConfig, ConfigError, load_config


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def resolve_mode(self, mode: Optional[str]) -> MatchMode:
        """Return the mode given on the command line, else the configured one."""
        if mode is not None:
            return MatchMode(mode)
        return self.load_config().mode


pass_context = click.make_pass_decorator(Context, ensure=True)

MODE_OPTION = click.option(
    "--mode",
    type=click.Choice([m.value for m in MatchMode]),
    default=None,
    help="How pre-releases are matched (default: from [tool.semrange] or node).",
)


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


@click.group()
@click.version_option(version=__version__, prog_name="semrange")
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
    help="Look for pyproject.toml starting from this directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic version and range tool.

    Parse, compare and bump versions, and test them against npm-style ranges.

    \b
    Examples:
        semrange check "^1.2.3" 1.4.0
        semrange filter ">=1.0.0 <2.0.0 || 3.x" 0.9.0 1.5.0 3.1.0
        semrange normalize --range "~1.2 || 2.0.0 - 2.5"
        semrange bump 1.2.3 preminor
        semrange sort 1.10.0 1.2.0 1.2.0-rc.1
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.verbose = verbose
    ctx.project_dir = directory


# Import and register commands
from .commands import bump, check, normalize, sort

cli.add_command(check.check)
cli.add_command(check.filter_versions)
cli.add_command(normalize.normalize)
cli.add_command(bump.bump)
cli.add_command(bump.diff)
cli.add_command(sort.sort)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ParseError, ConfigError) as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
