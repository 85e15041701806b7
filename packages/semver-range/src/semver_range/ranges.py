# SPDX-License-Identifier: MIT
"""Version ranges: OR-groups of AND-ed range units.

A range is one of three plain values:

- ``Just(unit)`` for a single unit (``^1.2.3``)
- ``All(units)`` for units that must all match (``>=1.2.3 <2.0.0``)
- ``AnyOf(groups)`` for groups of which one must match
  (``1.2.3 4.5.6 || 7.8.9``)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from .comparator import MatchMode
from .errors import ParseError
from .semver import Version, parse_version
from .unit import RangeUnit

logger = logging.getLogger(__name__)

OR = "||"


@dataclass(frozen=True, slots=True)
class Just:
    unit: RangeUnit

    def __str__(self) -> str:
        return str(self.unit)

    def matches(self, version: Version, mode: MatchMode = MatchMode.NODE) -> bool:
        return self.unit.matches(version, mode)


@dataclass(frozen=True, slots=True)
class All:
    units: tuple[RangeUnit, ...]

    def __str__(self) -> str:
        return " ".join(str(unit) for unit in self.units)

    def matches(self, version: Version, mode: MatchMode = MatchMode.NODE) -> bool:
        return all(unit.matches(version, mode) for unit in self.units)


@dataclass(frozen=True, slots=True)
class AnyOf:
    groups: tuple[tuple[RangeUnit, ...], ...]

    def __str__(self) -> str:
        return f" {OR} ".join(" ".join(str(unit) for unit in group) for group in self.groups)

    def matches(self, version: Version, mode: MatchMode = MatchMode.NODE) -> bool:
        return any(all(unit.matches(version, mode) for unit in group) for group in self.groups)


Range = Union[Just, All, AnyOf]


def _assemble(groups: list[list[RangeUnit]]) -> Range:
    if len(groups) > 1:
        return AnyOf(tuple(tuple(group) for group in groups))
    (units,) = groups
    if len(units) == 1:
        return Just(units[0])
    return All(tuple(units))


def scan_range(text: str) -> Optional[Range]:
    """Parse a range, returning None if any part of ``text`` is invalid.

    Units are separated by spaces and groups by ``||``. Leading and trailing
    spaces are ignored. Empty input and a dangling ``||`` are rejected.
    """
    groups: list[list[RangeUnit]] = [[]]
    rest = text.strip(" ")

    while rest:
        scanned = RangeUnit.parse(rest)
        if scanned is None:
            return None
        unit, rest = scanned
        groups[-1].append(unit)

        # Units must be separated from what follows
        if rest and not rest.startswith((" ", OR)):
            return None
        rest = rest.lstrip(" ")

        if rest.startswith(OR):
            groups.append([])
            rest = rest[len(OR) :].lstrip(" ")

    if not groups[-1]:
        return None
    return _assemble(groups)


def parse_range(range_string: str) -> Range:
    """Parse a range expression.

    Args:
        range_string: Range such as ``^1.2.3``, ``>=1.0.0 <2.0.0``,
            ``1.2.x || 2.*`` or ``1.2.3 - 2.3``

    Returns:
        A Just, All or AnyOf value

    Raises:
        ParseError: If the expression is invalid

    Examples:
        >>> str(parse_range("^1.2.3 || ~0.3"))
        '>=1.2.3 <2.0.0-0 || >=0.3.0 <0.4.0-0'
    """
    if not isinstance(range_string, str):
        raise ParseError(
            range_string, f"Range must be a string, got {type(range_string).__name__}"
        )

    parsed = scan_range(range_string)
    if parsed is None:
        logger.debug("Rejected range expression %r", range_string)
        raise ParseError(range_string, f"Invalid version range: {range_string!r}")

    return parsed


def is_valid_range(range_string: str) -> bool:
    """Check if a string is a valid range expression."""
    if not isinstance(range_string, str):
        return False
    return scan_range(range_string) is not None


def range_matches(
    version_range: Union[str, Range],
    version: Union[str, Version],
    mode: Union[str, MatchMode] = MatchMode.NODE,
) -> bool:
    """Check whether a version satisfies a range.

    Args:
        version_range: Range expression or parsed range
        version: Version string or Version object
        mode: NODE (default) keeps pre-releases out of ranges that do not
            name a pre-release of the same core; CLASSIC uses plain
            precedence

    Returns:
        True if the version satisfies the range

    Raises:
        ParseError: If either string is invalid

    Examples:
        >>> range_matches(">=1.2.3", "1.2.4-0")
        False
        >>> range_matches(">=1.2.3", "1.2.4-0", MatchMode.CLASSIC)
        True
    """
    r = parse_range(version_range) if isinstance(version_range, str) else version_range
    v = parse_version(version) if isinstance(version, str) else version
    return r.matches(v, MatchMode(mode))
