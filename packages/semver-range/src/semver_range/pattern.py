# SPDX-License-Identifier: MIT
"""X-range version patterns such as ``*``, ``1.x`` and ``1.2.*``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core import VersionCore
from .errors import ParseError
from .identifiers import scan_numeric
from .semver import Version

WILDCARDS = ("*", "x", "X")


@dataclass(frozen=True, slots=True)
class VersionPattern:
    """A version with trailing wildcard segments.

    Three shapes exist: the full wildcard (``major`` and ``minor`` are None),
    a major pattern (only ``minor`` is None) and a major.minor pattern.
    Patch-level wildcards are implied: ``1.2`` and ``1.2.*`` are the same
    pattern.
    """

    major: Optional[int] = None
    minor: Optional[int] = None

    def __post_init__(self) -> None:
        if self.major is None and self.minor is not None:
            raise ValueError("A pattern with a minor number needs a major number")

    @property
    def is_wildcard(self) -> bool:
        return self.major is None

    def __str__(self) -> str:
        if self.major is None:
            return "*"
        if self.minor is None:
            return f"{self.major}.*.*"
        return f"{self.major}.{self.minor}.*"

    def to_bounds(self) -> tuple[Version, Optional[Version]]:
        """Return the ``[lower, upper)`` interval the pattern stands for.

        The full wildcard has no upper bound.

        Raises:
            ParseError: If the upper edge would exceed ``MAX_NUMERIC``, as
                for ``4294967295.x``

        Examples:
            >>> [str(v) for v in VersionPattern(1, 2).to_bounds()]
            ['1.2.0', '1.3.0']
        """
        if self.major is None:
            return Version.with_core(0, 0, 0), None
        if self.minor is None:
            return (
                Version.with_core(self.major, 0, 0),
                Version(VersionCore.checked(self.major + 1, 0, 0)),
            )
        return (
            Version.with_core(self.major, self.minor, 0),
            Version(VersionCore.checked(self.major, self.minor + 1, 0)),
        )

    @classmethod
    def parse(cls, text: str) -> Optional[tuple["VersionPattern", str]]:
        """Scan a pattern from the start of ``text``.

        Up to three dot-separated segments are read, each a numeric
        identifier or one of ``*``, ``x``, ``X``. No number may follow a
        wildcard and a third number makes it a version, not a pattern.

        Returns:
            The pattern and the unconsumed remainder, or None.
        """
        numbers: list[int] = []
        wildcard_seen = False
        rest = text

        for index in range(3):
            if index:
                if not rest.startswith("."):
                    break
                rest = rest[1:]

            if rest[:1] in WILDCARDS:
                wildcard_seen = True
                rest = rest[1:]
                continue

            scanned = scan_numeric(rest)
            if scanned is None or wildcard_seen:
                return None
            number, rest = scanned
            numbers.append(number)

        if len(numbers) == 3:
            return None

        return cls(*numbers), rest

    @classmethod
    def from_string(cls, text: str) -> "VersionPattern":
        """Parse a complete pattern string.

        Raises:
            ParseError: If ``text`` is not exactly one pattern
        """
        scanned = cls.parse(text) if isinstance(text, str) else None
        if scanned is None or scanned[1]:
            raise ParseError(text, f"Invalid version pattern: {text!r}")
        return scanned[0]
