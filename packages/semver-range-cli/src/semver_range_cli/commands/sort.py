# SPDX-License-Identifier: MIT
"""Sort versions by precedence."""

from __future__ import annotations

from typing import Optional

import click

from semver_range import ParseError, sort_versions

from ..config import ConfigError
from ..main import Context, echo_error, echo_info, pass_context


@click.command()
@click.argument("versions", metavar="VERSION...", nargs=-1, required=True)
@click.option(
    "--with-build/--without-build",
    default=None,
    help="Break precedence ties with build metadata (default: from [tool.semrange]).",
)
@click.option("--reverse", "-r", is_flag=True, help="Sort from highest to lowest.")
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], with_build: Optional[bool], reverse: bool) -> None:
    """Print versions in precedence order, one per line.

    \b
    Examples:
        semrange sort 1.10.0 1.2.0 1.2.0-rc.1
        semrange sort --reverse --with-build 1.0.0+b 1.0.0+a
    """
    try:
        if with_build is None:
            with_build = ctx.load_config().include_build
        ordered = sort_versions(versions, with_build=with_build, reverse=reverse)
    except (ParseError, ConfigError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    for version in ordered:
        echo_info(str(version))
