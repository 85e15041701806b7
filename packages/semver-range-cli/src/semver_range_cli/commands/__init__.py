# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import bump, check, normalize, sort

__all__ = ["bump", "check", "normalize", "sort"]
