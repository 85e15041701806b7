# SPDX-License-Identifier: MIT
"""Semantic version parsing.

Supports MAJOR.MINOR.PATCH format with an optional ``v`` prefix, optional
pre-release and optional build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1, -0
- Build metadata: +build, +build.123, +20240101, +001
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional

from .core import VersionCore
from .errors import ParseError
from .tags import BuildMetadata, PreReleaseTag

logger = logging.getLogger(__name__)


@total_ordering
@dataclass(frozen=True, eq=False, slots=True)
class Version:
    """Represents a parsed semantic version.

    Equality, hashing and ordering ignore build metadata, so
    ``1.2.3 == 1.2.3+foo``. Use :func:`semver_range.compare_with_build` when
    build metadata has to break ties.

    Attributes:
        core: The major, minor and patch numbers
        prerelease: Optional pre-release tag (e.g., "alpha.1", "beta", "rc.2")
        build: Optional build metadata (e.g., "build.123", "20240101")
    """

    core: VersionCore
    prerelease: Optional[PreReleaseTag] = None
    build: Optional[BuildMetadata] = None

    @classmethod
    def with_core(cls, major: int, minor: int, patch: int) -> "Version":
        """Build a release version from its three numbers."""
        return cls(VersionCore(major, minor, patch))

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = str(self.core)
        if self.prerelease is not None:
            version += f"-{self.prerelease}"
        if self.build is not None:
            version += f"+{self.build}"
        return version

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.core == other.core and self.prerelease == other.prerelease

    def __hash__(self) -> int:
        return hash((self.core, self.prerelease))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.compare(other) < 0

    def compare(self, other: "Version") -> int:
        """Three-way precedence comparison ignoring build metadata.

        A version without a pre-release tag has higher precedence than one
        with a tag and the same core (1.0.0 > 1.0.0-alpha).
        """
        if self.core != other.core:
            return -1 if self.core < other.core else 1

        if self.prerelease is None and other.prerelease is None:
            return 0
        if self.prerelease is None:
            return 1
        if other.prerelease is None:
            return -1
        return self.prerelease.compare(other.prerelease)

    @property
    def major(self) -> int:
        return self.core.major

    @property
    def minor(self) -> int:
        return self.core.minor

    @property
    def patch(self) -> int:
        return self.core.patch

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return self.prerelease is not None

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return str(self.core)

    @classmethod
    def parse(cls, text: str) -> Optional[tuple["Version", str]]:
        """Scan a version from the start of ``text``.

        Used by the range parser, which embeds versions in larger
        expressions.

        Returns:
            The version and the unconsumed remainder, or None if ``text`` does
            not start with a version. A ``-`` or ``+`` right after the core
            must introduce a valid identifier list.
        """
        rest = text[1:] if text.startswith("v") else text

        scanned_core = VersionCore.parse(rest)
        if scanned_core is None:
            return None
        core, rest = scanned_core

        prerelease: Optional[PreReleaseTag] = None
        if rest.startswith("-"):
            scanned_pre = PreReleaseTag.parse(rest[1:])
            if scanned_pre is None:
                return None
            prerelease, rest = scanned_pre

        build: Optional[BuildMetadata] = None
        if rest.startswith("+"):
            scanned_build = BuildMetadata.parse(rest[1:])
            if scanned_build is None:
                return None
            build, rest = scanned_build

        return cls(core, prerelease, build), rest

    @classmethod
    def from_string(cls, text: str) -> Optional["Version"]:
        """Parse a complete version string, or return None.

        Surrounding whitespace is not allowed; trim it beforehand.
        """
        scanned = cls.parse(text)
        if scanned is None or scanned[1]:
            return None
        return scanned[0]


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            (MAJOR.MINOR.PATCH[-prerelease][+build]), optionally prefixed
            with ``v``

    Returns:
        A Version object with parsed components

    Raises:
        ParseError: If the string does not follow semantic versioning

    Examples:
        >>> str(parse_version("v1.2.3-alpha.1+build.456"))
        '1.2.3-alpha.1+build.456'
    """
    if not isinstance(version_string, str):
        raise ParseError(
            version_string, f"Version must be a string, got {type(version_string).__name__}"
        )

    version = Version.from_string(version_string)
    if version is None:
        logger.debug("Rejected version string %r", version_string)
        raise ParseError(version_string)

    return version


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
    """
    if not isinstance(version_string, str):
        return False
    return Version.from_string(version_string) is not None
