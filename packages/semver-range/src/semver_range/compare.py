# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence rules.

Pre-release ordering: numeric identifiers < alphanumeric identifiers,
shorter identifier lists < longer ones sharing the same prefix, and any
pre-release < the release.
Build metadata is ignored in comparisons except by compare_with_build.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Union

from .identifiers import is_numeric_identifier
from .semver import Version, parse_version


def _coerce(version: Union[str, Version]) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def compare_versions(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two semantic versions by precedence.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        ParseError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0-beta.11", "1.0.0-beta.2")
        1
        >>> compare_versions("1.0.0+a", "1.0.0+b")
        0
    """
    return _coerce(version1).compare(_coerce(version2))


def compare_with_build(version1: Union[str, Version], version2: Union[str, Version]) -> int:
    """Compare two versions, using build metadata as a tiebreak.

    When precedence is equal, a version without build metadata sorts before
    one with build metadata, and two build lists compare lexicographically.

    Examples:
        >>> compare_with_build("1.2.3", "1.2.3+foo")
        -1
        >>> compare_with_build("1.2.3+f", "1.2.3+foo")
        -1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    result = v1.compare(v2)
    if result:
        return result

    if v1.build is None and v2.build is None:
        return 0
    if v1.build is None:
        return -1
    if v2.build is None:
        return 1
    return v1.build.compare(v2.build)


def version_key(version: Union[str, Version]) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    v = _coerce(version)

    # Pre-release key: None becomes (1,) to sort after pre-releases
    # Numeric identifiers sort before alphanumeric ones
    if v.prerelease is None:
        prerelease_key: tuple = (1,)
    else:
        parts = []
        for part in v.prerelease.identifiers:
            if is_numeric_identifier(part):
                parts.append((0, int(part), ""))
            else:
                parts.append((1, 0, part))
        prerelease_key = (0, tuple(parts))

    return (v.major, v.minor, v.patch, prerelease_key)


def build_key(version: Union[str, Version]) -> tuple:
    """Sort key matching compare_with_build."""
    v = _coerce(version)
    build_part: tuple = () if v.build is None else (v.build.identifiers,)
    return (version_key(v), build_part)


def sort_versions(
    versions: Iterable[Union[str, Version]],
    with_build: bool = False,
    reverse: bool = False,
) -> list[Version]:
    """Parse and sort versions by precedence.

    Args:
        versions: Version strings or Version objects
        with_build: Break precedence ties with build metadata
        reverse: Sort from highest to lowest

    Returns:
        The parsed versions in order

    Raises:
        ParseError: If any version string is invalid
    """
    parsed = [_coerce(v) for v in versions]
    return sorted(parsed, key=build_key if with_build else version_key, reverse=reverse)
