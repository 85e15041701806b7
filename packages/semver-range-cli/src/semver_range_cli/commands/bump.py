# SPDX-License-Identifier: MIT
"""Increment versions and report the difference between two versions."""

from __future__ import annotations

import click

from semver_range import BumpKind, ParseError, find_difference, increment, parse_version

from ..main import echo_error, echo_info


@click.command()
@click.argument("version")
@click.argument(
    "kind",
    type=click.Choice([kind.value for kind in BumpKind], case_sensitive=False),
)
def bump(version: str, kind: str) -> None:
    """Print VERSION incremented by KIND.

    Build metadata is always dropped. Bumping a pre-release by major, minor
    or patch releases it without changing the numbers.

    \b
    Examples:
        semrange bump 1.2.3 minor          # 1.3.0
        semrange bump 1.2.3 premajor       # 2.0.0-0
        semrange bump 1.2.3-rc.1 prerelease  # 1.2.3-rc.2
    """
    try:
        bumped = increment(parse_version(version), BumpKind.parse(kind))
    except ParseError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(str(bumped))


@click.command()
@click.argument("first")
@click.argument("second")
def diff(first: str, second: str) -> None:
    """Print the largest difference between two versions.

    Prints one of the bump kinds, or ``none`` when the versions have the same
    precedence.

    \b
    Examples:
        semrange diff 1.2.3 1.3.0          # minor
        semrange diff 1.2.3 2.0.0-rc.1     # premajor
    """
    try:
        difference = find_difference(parse_version(first), parse_version(second))
    except ParseError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info("none" if difference is None else difference.value)
