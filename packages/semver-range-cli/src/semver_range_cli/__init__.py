# SPDX-License-Identifier: MIT
"""Command line front end for semver_range."""

__version__ = "0.1.0"
