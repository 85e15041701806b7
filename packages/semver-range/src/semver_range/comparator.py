# SPDX-License-Identifier: MIT
"""Range comparators, bounds and match modes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .semver import Version


class MatchMode(str, Enum):
    """How pre-release versions are matched against bounds.

    CLASSIC compares by plain SemVer precedence. NODE only lets a
    pre-release version satisfy a bound whose version is a pre-release of
    the same core, the way npm's ``semver`` package does.
    """

    CLASSIC = "classic"
    NODE = "node"


class RangeComparator(Enum):
    """One of the five textual comparison operators."""

    LESS = "<"
    LESS_OR_EQUAL = "<="
    EQUAL = "="
    GREATER_OR_EQUAL = ">="
    GREATER = ">"

    def __str__(self) -> str:
        # Exact matches render as the bare version
        return "" if self is RangeComparator.EQUAL else self.value

    @classmethod
    def parse(cls, text: str) -> Optional[tuple["RangeComparator", str]]:
        """Scan a comparator from the start of ``text``.

        Two-character operators are tried before their one-character
        prefixes.
        """
        for comparator in _BY_LENGTH:
            if text.startswith(comparator.value):
                return comparator, text[len(comparator.value) :]
        return None

    def accepts(self, ordering: int) -> bool:
        """Return True if a three-way comparison result satisfies this operator."""
        if ordering < 0:
            return self in (RangeComparator.LESS, RangeComparator.LESS_OR_EQUAL)
        if ordering > 0:
            return self in (RangeComparator.GREATER, RangeComparator.GREATER_OR_EQUAL)
        return self in (
            RangeComparator.LESS_OR_EQUAL,
            RangeComparator.EQUAL,
            RangeComparator.GREATER_OR_EQUAL,
        )


_BY_LENGTH = sorted(RangeComparator, key=lambda c: len(c.value), reverse=True)


@dataclass(frozen=True, slots=True)
class RangeBound:
    """A comparator paired with the version it compares against."""

    comparator: RangeComparator
    version: Version

    def __str__(self) -> str:
        return f"{self.comparator}{self.version}"

    def matches(self, version: Version, mode: MatchMode = MatchMode.NODE) -> bool:
        """Return True if ``version`` satisfies this bound.

        Examples:
            >>> from semver_range import parse_version
            >>> bound = RangeBound(RangeComparator.GREATER_OR_EQUAL, parse_version("1.2.3"))
            >>> bound.matches(parse_version("1.2.4-0"), MatchMode.CLASSIC)
            True
            >>> bound.matches(parse_version("1.2.4-0"), MatchMode.NODE)
            False
        """
        if mode == MatchMode.NODE and version.is_prerelease:
            if not self.version.is_prerelease or self.version.core != version.core:
                return False

        return self.comparator.accepts(version.compare(self.version))
