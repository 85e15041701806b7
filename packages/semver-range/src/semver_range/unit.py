# SPDX-License-Identifier: MIT
"""Range units: one grammar token of a range, expanded into bounds.

Shorthands are expanded at parse time:

    ~1.2.3          >=1.2.3 <1.3.0-0
    ^1.2.3          >=1.2.3 <2.0.0-0
    ^0.1.2          >=0.1.2 <0.2.0-0
    ^0.0.1          >=0.0.1 <0.0.2-0
    1.2             >=1.2.0 <1.3.0-0
    <=1             <2.0.0-0
    1.2.3 - 4.5     >=1.2.3 <4.6.0-0

Exclusive upper bounds carry the ``0`` pre-release tag so that they also
exclude every pre-release of the boundary version.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .comparator import MatchMode, RangeBound, RangeComparator
from .errors import ParseError
from .increment import BumpKind, increment
from .pattern import VersionPattern
from .semver import Version
from .tags import ZERO_TAG

HYPHEN = " - "


class Shorthand(Enum):
    CARET = "^"
    TILDE = "~"


Marker = Union[RangeComparator, Shorthand]
Operand = Union[Version, VersionPattern]


def _exclusive(version: Version) -> Version:
    return Version(version.core, ZERO_TAG)


def _at_least(version: Version) -> RangeBound:
    return RangeBound(RangeComparator.GREATER_OR_EQUAL, version)


def _below(version: Version) -> RangeBound:
    return RangeBound(RangeComparator.LESS, _exclusive(version))


def _parse_marker(text: str) -> tuple[Optional[Marker], str]:
    scanned = RangeComparator.parse(text)
    if scanned is not None:
        return scanned

    for shorthand in Shorthand:
        if text.startswith(shorthand.value):
            return shorthand, text[1:]

    return None, text


def _parse_operand(text: str) -> Optional[tuple[Operand, str]]:
    # A full version wins over a pattern: "1.2.3" is never a pattern
    scanned_version = Version.parse(text)
    if scanned_version is not None:
        return scanned_version

    return VersionPattern.parse(text)


@dataclass(frozen=True, slots=True)
class RangeUnit:
    """One or two bounds that must all be satisfied."""

    bound: RangeBound
    extra_bound: Optional[RangeBound] = None

    def __str__(self) -> str:
        if self.extra_bound is None:
            return str(self.bound)
        return f"{self.bound} {self.extra_bound}"

    @property
    def bounds(self) -> tuple[RangeBound, ...]:
        if self.extra_bound is None:
            return (self.bound,)
        return (self.bound, self.extra_bound)

    def matches(self, version: Version, mode: MatchMode = MatchMode.NODE) -> bool:
        """Return True if ``version`` satisfies every bound of the unit."""
        return all(bound.matches(version, mode) for bound in self.bounds)

    @classmethod
    def parse(cls, text: str) -> Optional[tuple["RangeUnit", str]]:
        """Scan one unit from the start of ``text``.

        Returns:
            The unit and the unconsumed remainder, or None if ``text`` does
            not start with a valid unit.
        """
        marker, rest = _parse_marker(text)

        scanned = _parse_operand(rest)
        if scanned is None:
            return None
        operand, rest = scanned

        # Hyphen ranges cannot carry a leading operator
        if marker is None and rest.startswith(HYPHEN):
            scanned = _parse_operand(rest[len(HYPHEN) :])
            if scanned is None:
                return None
            upper, rest = scanned
            unit = cls.from_hyphen(operand, upper)
        elif isinstance(operand, Version):
            unit = cls.from_version(marker, operand)
        else:
            unit = cls.from_pattern(marker, operand)

        if unit is None:
            return None
        return unit, rest

    @classmethod
    def from_version(cls, marker: Optional[Marker], version: Version) -> Optional["RangeUnit"]:
        """Expand an operator applied to a concrete version.

        Returns:
            The unit, or None when a caret or tilde upper edge would exceed
            ``MAX_NUMERIC``.
        """
        if marker is None:
            return cls(RangeBound(RangeComparator.EQUAL, version))

        if isinstance(marker, RangeComparator):
            return cls(RangeBound(marker, version))

        if marker is Shorthand.TILDE:
            kind = BumpKind.PREMINOR
        elif version.major == 0 and version.minor == 0:
            kind = BumpKind.PREPATCH
        elif version.major == 0:
            kind = BumpKind.PREMINOR
        else:
            kind = BumpKind.PREMAJOR

        try:
            upper = increment(version, kind)
        except ParseError:
            return None
        return cls(_at_least(version), RangeBound(RangeComparator.LESS, upper))

    @classmethod
    def from_pattern(
        cls, marker: Optional[Marker], pattern: VersionPattern
    ) -> Optional["RangeUnit"]:
        """Expand an operator applied to a pattern.

        Returns:
            The unit, or None for combinations that have no meaning, such as
            ``>*``, ``<*``, ``~*`` or a caret on any pattern, and for patterns
            whose upper edge would exceed ``MAX_NUMERIC``.
        """
        try:
            lower, upper = pattern.to_bounds()
        except ParseError:
            return None

        if marker is None:
            return cls(_at_least(lower), None if upper is None else _below(upper))

        if marker is Shorthand.CARET:
            return None

        if upper is None:
            if marker in (
                RangeComparator.LESS_OR_EQUAL,
                RangeComparator.EQUAL,
                RangeComparator.GREATER_OR_EQUAL,
            ):
                return cls(_at_least(lower))
            return None

        if marker is Shorthand.TILDE or marker is RangeComparator.EQUAL:
            return cls(_at_least(lower), _below(upper))
        if marker is RangeComparator.GREATER:
            return cls(_at_least(upper))
        if marker is RangeComparator.GREATER_OR_EQUAL:
            return cls(_at_least(lower))
        if marker is RangeComparator.LESS:
            return cls(_below(lower))
        return cls(_below(upper))

    @classmethod
    def from_hyphen(cls, first: Operand, last: Operand) -> Optional["RangeUnit"]:
        """Expand a hyphen range ``first - last``.

        The lower edge is inclusive. The upper edge is inclusive for a
        concrete version, exclusive for a bounded pattern and absent for the
        full wildcard. Returns None when a pattern edge would exceed ``MAX_NUMERIC``.
        """
        try:
            lower = first if isinstance(first, Version) else first.to_bounds()[0]

            if isinstance(last, Version):
                upper_bound: Optional[RangeBound] = RangeBound(
                    RangeComparator.LESS_OR_EQUAL, last
                )
            else:
                upper = last.to_bounds()[1]
                upper_bound = None if upper is None else _below(upper)
        except ParseError:
            return None

        return cls(_at_least(lower), upper_bound)
