# SPDX-License-Identifier: MIT
"""Exceptions raised by the public parsing entry points."""

from __future__ import annotations


class ParseError(ValueError):
    """Raised when a version, pattern or range string is rejected.

    The error carries no position information: callers only learn that the
    input as a whole is not valid.
    """

    def __init__(self, text: object, message: str = ""):
        self.text = text
        self.message = message or f"Invalid version string: {text!r}"
        super().__init__(self.message)
