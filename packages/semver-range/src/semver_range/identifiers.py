# SPDX-License-Identifier: MIT
"""Low-level scanners shared by the version and range parsers.

Every scanner takes the text still to be parsed and returns either ``None``
(the text does not start with what was asked for) or a tuple holding the
scanned value and the unconsumed remainder. Nothing here raises on bad input.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Optional

# Version numbers are unsigned 32-bit integers
MAX_NUMERIC = 2**32 - 1
_MAX_DIGITS = len(str(MAX_NUMERIC))

_DIGITS = re.compile(r"[0-9]+")
_IDENTIFIER = re.compile(r"[0-9A-Za-z-]+")


def scan_numeric(text: str) -> Optional[tuple[int, str]]:
    """Scan a numeric identifier from the start of ``text``.

    The maximal run of ASCII digits is consumed. A leading zero is only
    allowed when the literal is exactly ``0``.

    Examples:
        >>> scan_numeric("12.3")
        (12, '.3')
        >>> scan_numeric("012") is None
        True
    """
    match = _DIGITS.match(text)
    if match is None:
        return None

    digits = match.group()
    if len(digits) > 1 and digits.startswith("0"):
        return None
    if len(digits) > _MAX_DIGITS:
        return None

    value = int(digits)
    if value > MAX_NUMERIC:
        return None

    return value, text[match.end() :]


def is_numeric_identifier(identifier: str) -> bool:
    """Return True if the whole identifier is a valid numeric identifier."""
    scanned = scan_numeric(identifier)
    return scanned is not None and scanned[1] == ""


def scan_identifiers(
    text: str,
    accept: Optional[Callable[[str], bool]] = None,
) -> Optional[tuple[tuple[str, ...], str]]:
    """Scan a dot-separated list of ``[0-9A-Za-z-]+`` identifiers.

    Args:
        text: Text to scan
        accept: Optional predicate every identifier must satisfy

    Returns:
        The identifiers and the remainder, or None if the list is empty,
        contains an empty identifier, ends with a dot or an identifier is
        rejected by ``accept``.
    """
    identifiers: list[str] = []
    rest = text

    while True:
        match = _IDENTIFIER.match(rest)
        if match is None:
            return None

        identifier = match.group()
        if accept is not None and not accept(identifier):
            return None

        identifiers.append(identifier)
        rest = rest[match.end() :]

        if not rest.startswith("."):
            break
        rest = rest[1:]

    return tuple(identifiers), rest


def is_valid_prerelease_identifier(identifier: str) -> bool:
    """Numeric pre-release identifiers must not carry leading zeros."""
    return not identifier.isdigit() or len(identifier) == 1 or not identifier.startswith("0")
