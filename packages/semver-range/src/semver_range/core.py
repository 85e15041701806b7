# SPDX-License-Identifier: MIT
"""The ``MAJOR.MINOR.PATCH`` core of a semantic version."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .errors import ParseError
from .identifiers import MAX_NUMERIC, scan_numeric


@dataclass(frozen=True, order=True, slots=True)
class VersionCore:
    """Major, minor and patch numbers of a version.

    Ordering is lexicographic over ``(major, minor, patch)``.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
    """

    major: int
    minor: int
    patch: int

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def checked(cls, major: int, minor: int, patch: int) -> "VersionCore":
        """Build a core, refusing numbers that do not fit in 32 bits.

        Raises:
            ParseError: If any number exceeds ``MAX_NUMERIC``
        """
        if max(major, minor, patch) > MAX_NUMERIC:
            text = f"{major}.{minor}.{patch}"
            raise ParseError(text, f"Version number out of range: {text!r}")
        return cls(major, minor, patch)

    @classmethod
    def parse(cls, text: str) -> Optional[tuple["VersionCore", str]]:
        """Scan a core from the start of ``text``.

        Returns:
            The core and the unconsumed remainder, or None if ``text`` does
            not start with three dot-separated numeric identifiers.

        Examples:
            >>> VersionCore.parse("1.20.3.")
            (VersionCore(major=1, minor=20, patch=3), '.')
            >>> VersionCore.parse("1.2") is None
            True
        """
        parts: list[int] = []
        rest = text

        for index in range(3):
            if index:
                if not rest.startswith("."):
                    return None
                rest = rest[1:]

            scanned = scan_numeric(rest)
            if scanned is None:
                return None
            value, rest = scanned
            parts.append(value)

        return cls(*parts), rest
