# SPDX-License-Identifier: MIT
"""Semantic version parsing and range matching.

This package parses SemVer 2.0.0 versions and npm-style range expressions
(comparators, ``^``/``~`` shorthands, x-ranges, hyphen ranges and ``||``
groups) and tells whether a version satisfies a range.

Example:
    >>> from semver_range import parse_version, parse_range, range_matches, MatchMode
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> str(version.prerelease)
    'alpha.1'
    >>>
    >>> str(parse_range("^1.2.3"))
    '>=1.2.3 <2.0.0-0'
    >>>
    >>> range_matches("1.x || >=2.5.0", "2.6.1")
    True
    >>> range_matches(">=1.2.3", "1.2.4-0", MatchMode.CLASSIC)
    True
"""

__version__ = "0.1.0"

from .comparator import (
    MatchMode,
    RangeBound,
    RangeComparator,
)
from .compare import (
    build_key,
    compare_versions,
    compare_with_build,
    sort_versions,
    version_key,
)
from .core import VersionCore
from .errors import ParseError
from .increment import (
    BumpKind,
    find_difference,
    increment,
)
from .pattern import VersionPattern
from .ranges import (
    All,
    AnyOf,
    Just,
    Range,
    is_valid_range,
    parse_range,
    range_matches,
)
from .semver import (
    Version,
    is_valid_semver,
    parse_version,
)
from .tags import (
    BuildMetadata,
    PreReleaseTag,
)
from .unit import RangeUnit

__all__ = [
    # Version parsing
    "Version",
    "VersionCore",
    "PreReleaseTag",
    "BuildMetadata",
    "parse_version",
    "is_valid_semver",
    "ParseError",
    # Version comparison
    "compare_versions",
    "compare_with_build",
    "version_key",
    "build_key",
    "sort_versions",
    # Increments
    "BumpKind",
    "increment",
    "find_difference",
    # Ranges
    "VersionPattern",
    "RangeComparator",
    "RangeBound",
    "RangeUnit",
    "MatchMode",
    "Range",
    "Just",
    "All",
    "AnyOf",
    "parse_range",
    "is_valid_range",
    "range_matches",
]
