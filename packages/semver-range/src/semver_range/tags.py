# SPDX-License-Identifier: MIT
"""Pre-release tags and build metadata.

Both are dot-separated identifier lists. Pre-release tags take part in
version precedence; build metadata is informational only and is ignored by
the default ordering.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Optional

from .identifiers import (
    is_numeric_identifier,
    is_valid_prerelease_identifier,
    scan_identifiers,
)


def _compare_identifiers(left: str, right: str) -> int:
    left_numeric = is_numeric_identifier(left)
    right_numeric = is_numeric_identifier(right)

    if left_numeric and right_numeric:
        a, b = int(left), int(right)
        if a == b:
            return 0
        return -1 if a < b else 1

    # Numeric identifiers have lower precedence than alphanumeric ones
    if left_numeric:
        return -1
    if right_numeric:
        return 1

    if left == right:
        return 0
    return -1 if left < right else 1


@total_ordering
@dataclass(frozen=True, slots=True)
class PreReleaseTag:
    """Pre-release identifiers, e.g. ``("alpha", "1")`` for ``alpha.1``."""

    identifiers: tuple[str, ...]

    def __str__(self) -> str:
        return ".".join(self.identifiers)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PreReleaseTag):
            return NotImplemented
        return self.compare(other) < 0

    def compare(self, other: "PreReleaseTag") -> int:
        """Three-way precedence comparison.

        Identifiers are compared pairwise; when every shared position is equal
        the tag with fewer identifiers has lower precedence.
        """
        for left, right in zip(self.identifiers, other.identifiers):
            result = _compare_identifiers(left, right)
            if result:
                return result

        a, b = len(self.identifiers), len(other.identifiers)
        if a == b:
            return 0
        return -1 if a < b else 1

    def incremented(self) -> "PreReleaseTag":
        """Increment the rightmost numeric identifier.

        A ``0`` identifier is appended when the tag has no numeric identifier.

        Examples:
            >>> str(PreReleaseTag(("0", "foo", "0", "bar")).incremented())
            '0.foo.1.bar'
            >>> str(PreReleaseTag(("foo",)).incremented())
            'foo.0'
        """
        identifiers = list(self.identifiers)
        for index in range(len(identifiers) - 1, -1, -1):
            if is_numeric_identifier(identifiers[index]):
                identifiers[index] = str(int(identifiers[index]) + 1)
                return PreReleaseTag(tuple(identifiers))

        return PreReleaseTag((*identifiers, "0"))

    @classmethod
    def parse(cls, text: str) -> Optional[tuple["PreReleaseTag", str]]:
        """Scan a pre-release identifier list (without the leading ``-``)."""
        scanned = scan_identifiers(text, is_valid_prerelease_identifier)
        if scanned is None:
            return None
        identifiers, rest = scanned
        return cls(identifiers), rest


# Lowest possible pre-release tag; used to exclude every pre-release of a
# version from an exclusive upper bound
ZERO_TAG = PreReleaseTag(("0",))


@dataclass(frozen=True, slots=True)
class BuildMetadata:
    """Build metadata identifiers, e.g. ``("build", "007")``."""

    identifiers: tuple[str, ...]

    def __str__(self) -> str:
        return ".".join(self.identifiers)

    def compare(self, other: "BuildMetadata") -> int:
        """Lexicographic comparison of the identifiers."""
        if self.identifiers == other.identifiers:
            return 0
        return -1 if self.identifiers < other.identifiers else 1

    @classmethod
    def parse(cls, text: str) -> Optional[tuple["BuildMetadata", str]]:
        """Scan a build identifier list (without the leading ``+``).

        Leading zeros are allowed in build identifiers.
        """
        scanned = scan_identifiers(text)
        if scanned is None:
            return None
        identifiers, rest = scanned
        return cls(identifiers), rest
