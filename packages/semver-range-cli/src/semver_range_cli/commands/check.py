# SPDX-License-Identifier: MIT
"""Test versions against a range."""

from __future__ import annotations

import logging
from typing import Optional

import click

from semver_range import MatchMode, ParseError, Range, Version, parse_range, parse_version

from ..config import ConfigError
from ..main import (
    MODE_OPTION,
    Context,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    pass_context,
)

logger = logging.getLogger(__name__)


def _parse_inputs(range_text: str, version_texts: tuple[str, ...]) -> tuple[Range, list[Version]]:
    try:
        version_range = parse_range(range_text)
        versions = [parse_version(text) for text in version_texts]
    except ParseError as e:
        echo_error(str(e))
        raise SystemExit(1)

    logger.debug("Expanded %r to %s", range_text, version_range)
    return version_range, versions


@click.command()
@click.argument("range_text", metavar="RANGE")
@click.argument("versions", metavar="VERSION...", nargs=-1, required=True)
@MODE_OPTION
@pass_context
def check(ctx: Context, range_text: str, versions: tuple[str, ...], mode: Optional[str]) -> None:
    """Check whether versions satisfy a range.

    Exits with status 0 when every VERSION satisfies RANGE, 1 otherwise.

    \b
    Examples:
        semrange check "^1.2.3" 1.4.0
        semrange check ">=1.2.3" 1.2.4-0 --mode classic
    """
    try:
        match_mode = ctx.resolve_mode(mode)
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)

    version_range, parsed = _parse_inputs(range_text, versions)

    all_match = True
    for text, version in zip(versions, parsed):
        if version_range.matches(version, match_mode):
            echo_success(f"{text} matches")
            continue

        echo_info(f"{text} does not match")
        all_match = False
        if match_mode is MatchMode.NODE and version_range.matches(version, MatchMode.CLASSIC):
            echo_warning(
                f"{text} is a pre-release outside the range's own pre-releases; "
                "it matches with --mode classic"
            )

    if not all_match:
        raise SystemExit(1)


@click.command("filter")
@click.argument("range_text", metavar="RANGE")
@click.argument("versions", metavar="VERSION...", nargs=-1, required=True)
@MODE_OPTION
@pass_context
def filter_versions(
    ctx: Context, range_text: str, versions: tuple[str, ...], mode: Optional[str]
) -> None:
    """Print the versions that satisfy a range, in input order.

    \b
    Examples:
        semrange filter "1.x || >=3.0.0" 0.9.0 1.5.0 2.0.0 3.1.0
    """
    try:
        match_mode = ctx.resolve_mode(mode)
    except ConfigError as e:
        echo_error(str(e))
        raise SystemExit(1)

    version_range, parsed = _parse_inputs(range_text, versions)

    for text, version in zip(versions, parsed):
        if version_range.matches(version, match_mode):
            echo_info(text)
