# SPDX-License-Identifier: MIT
"""Print the canonical form of a version or range."""

from __future__ import annotations

import click

from semver_range import ParseError, parse_range, parse_version

from ..main import echo_error, echo_info


@click.command()
@click.argument("text")
@click.option(
    "--range",
    "as_range",
    is_flag=True,
    help="Treat TEXT as a range expression and print its expanded bounds.",
)
def normalize(text: str, as_range: bool) -> None:
    """Print the canonical form of a version or range.

    Versions lose their ``v`` prefix. Ranges are printed with every
    shorthand expanded into explicit bounds.

    \b
    Examples:
        semrange normalize v1.2.3+build.5      # 1.2.3+build.5
        semrange normalize --range "^1.2.3"    # >=1.2.3 <2.0.0-0
    """
    try:
        parsed = parse_range(text) if as_range else parse_version(text)
    except ParseError as e:
        echo_error(str(e))
        raise SystemExit(1)

    echo_info(str(parsed))
