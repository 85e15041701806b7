# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from semver_range import MatchMode

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from the ``[tool.semrange]`` table.

    Attributes:
        project_dir: Directory containing pyproject.toml, if one was found
        mode: Default match mode for range checks
        include_build: Whether sorting breaks ties with build metadata
        source: Path of the file the settings came from
    """

    project_dir: Optional[Path] = None
    mode: MatchMode = MatchMode.NODE
    include_build: bool = False
    source: Optional[Path] = field(default=None, compare=False)

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid or holds invalid settings
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax: {e}") from e

        config = cls.from_pyproject_dict(pyproject, project_path)
        config.source = pyproject_path
        return config

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Optional[Path] = None,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If a setting has an unsupported value
        """
        tool_semrange = pyproject.get("tool", {}).get("semrange", {})
        if not isinstance(tool_semrange, dict):
            raise ConfigError("[tool.semrange] must be a table")

        mode_value = tool_semrange.get("mode", MatchMode.NODE.value)
        try:
            mode = MatchMode(str(mode_value).lower())
        except ValueError:
            choices = ", ".join(m.value for m in MatchMode)
            raise ConfigError(
                f"Invalid mode {mode_value!r} in [tool.semrange] (expected one of: {choices})"
            ) from None

        include_build = tool_semrange.get("include-build", False)
        if not isinstance(include_build, bool):
            raise ConfigError("include-build in [tool.semrange] must be true or false")

        return cls(project_dir=project_dir, mode=mode, include_build=include_build)


def find_project_root(start_dir: Optional[str | Path] = None) -> Optional[Path]:
    """Find the nearest directory holding a pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory, or None if there is none
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while True:
        if (current / "pyproject.toml").exists():
            return current
        if current == current.parent:
            return None
        current = current.parent


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration, falling back to defaults.

    Args:
        project_dir: Directory to search upward from (defaults to cwd)

    Returns:
        CLIConfig instance

    Raises:
        ConfigError: If configuration cannot be loaded
    """
    root = find_project_root(project_dir)
    if root is None:
        logger.debug("No pyproject.toml found, using default settings")
        return CLIConfig()

    config = CLIConfig.from_pyproject(root)
    logger.debug("Loaded settings from %s: mode=%s", config.source, config.mode.value)
    return config
