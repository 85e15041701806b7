# SPDX-License-Identifier: MIT
"""Version increments and the difference between two versions."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from .core import VersionCore
from .errors import ParseError
from .semver import Version, parse_version
from .tags import ZERO_TAG


class BumpKind(str, Enum):
    """Kind of increment, also used to report the difference of two versions."""

    MAJOR = "major"
    PREMAJOR = "premajor"
    MINOR = "minor"
    PREMINOR = "preminor"
    PATCH = "patch"
    PREPATCH = "prepatch"
    PRERELEASE = "prerelease"

    @classmethod
    def parse(cls, value: str) -> "BumpKind":
        """Look up a bump kind by its lowercase name.

        Raises:
            ParseError: If ``value`` names no bump kind
        """
        try:
            return cls(value.lower())
        except ValueError:
            raise ParseError(value, f"Unknown bump kind: {value!r}") from None


_PLAIN = (BumpKind.MAJOR, BumpKind.MINOR, BumpKind.PATCH)
_PRE = {
    BumpKind.MAJOR: BumpKind.PREMAJOR,
    BumpKind.MINOR: BumpKind.PREMINOR,
    BumpKind.PATCH: BumpKind.PREPATCH,
}


def increment(version: Union[str, Version], kind: BumpKind) -> Version:
    """Return ``version`` incremented according to ``kind``.

    - ``MAJOR``/``MINOR``/``PATCH`` on a pre-release version drop the tag and
      leave the core unchanged, since the pre-release already sits below
      that release.
    - ``PREMAJOR``/``PREMINOR``/``PREPATCH`` bump the core like their plain
      counterparts and always set the pre-release tag to ``0``.
    - ``PRERELEASE`` on a release patch-bumps the core and sets the tag to
      ``0``; on a pre-release it increments the rightmost numeric identifier
      of the tag, or appends ``0`` when there is none.

    Build metadata is always dropped.

    Raises:
        ParseError: If ``version`` is an invalid string, or if the bumped
            number would exceed ``MAX_NUMERIC``

    Examples:
        >>> str(increment("1.2.3", BumpKind.MINOR))
        '1.3.0'
        >>> str(increment("1.2.3-foo", BumpKind.MAJOR))
        '1.2.3'
        >>> str(increment("1.2.3-0.foo.0.bar", BumpKind.PRERELEASE))
        '1.2.3-0.foo.1.bar'
    """
    v = parse_version(version) if isinstance(version, str) else version
    kind = BumpKind(kind)
    major, minor, patch = v.major, v.minor, v.patch

    if kind in _PLAIN and v.prerelease is not None:
        return Version(v.core)

    if kind is BumpKind.PRERELEASE:
        if v.prerelease is not None:
            return Version(v.core, v.prerelease.incremented())
        return Version(VersionCore.checked(major, minor, patch + 1), ZERO_TAG)

    if kind in (BumpKind.MAJOR, BumpKind.PREMAJOR):
        core = VersionCore.checked(major + 1, 0, 0)
    elif kind in (BumpKind.MINOR, BumpKind.PREMINOR):
        core = VersionCore.checked(major, minor + 1, 0)
    else:
        core = VersionCore.checked(major, minor, patch + 1)

    return Version(core, None if kind in _PLAIN else ZERO_TAG)


def find_difference(
    version1: Union[str, Version], version2: Union[str, Version]
) -> Optional[BumpKind]:
    """Find the largest difference between two versions.

    Returns:
        None when the versions have equal precedence (build is ignored).
        ``PRERELEASE`` when only the pre-release tags differ, even if only
        one side has a tag. Otherwise the highest differing core field, as
        the ``PRE*`` variant when either side has a pre-release tag.

    Examples:
        >>> find_difference("1.2.3", "1.3.4-foo")
        <BumpKind.PREMINOR: 'preminor'>
        >>> find_difference("1.2.3", "1.2.3+foo") is None
        True
    """
    v1 = parse_version(version1) if isinstance(version1, str) else version1
    v2 = parse_version(version2) if isinstance(version2, str) else version2

    if v1.core == v2.core:
        if v1.prerelease == v2.prerelease:
            return None
        return BumpKind.PRERELEASE

    if v1.major != v2.major:
        kind = BumpKind.MAJOR
    elif v1.minor != v2.minor:
        kind = BumpKind.MINOR
    else:
        kind = BumpKind.PATCH

    if v1.is_prerelease or v2.is_prerelease:
        return _PRE[kind]
    return kind
