"""Configuration loader for branch-guard.

Loads the branch name pattern from a YAML config file, in the section named
after the hook::

    ForceBranchNamePattern:
      branch_name_pattern: /^[a-zA-Z0-9]+$/

Precedence: command-line pattern > BRANCH_NAME_PATTERN env var > config
file > no pattern (enforcement skipped).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from branch_guard.constants import (
    CONFIG_FILENAME,
    CONFIG_KEY_PATTERN,
    CONFIG_SECTION,
    ENV_CONFIG_PATH,
    ENV_PATTERN,
)
from branch_guard.errors import ConfigError, PatternError
from branch_guard.pattern import MatchPattern


@dataclass
class BranchGuardConfig:
    """Resolved configuration for one hook run."""

    pattern: Optional[MatchPattern] = None
    pattern_source: Optional[str] = None
    """Where the pattern came from: 'cli', 'env', or a config file path."""
    config_path: Optional[Path] = None
    """Config file that was read, if any."""


def find_config_file(path: Optional[str] = None) -> Optional[Path]:
    """Locate the config file to read.

    Lookup order: *path*, then $BRANCH_GUARD_CONFIG, then .githooks.yaml in
    the current directory (git runs hooks from the repository root), then
    ~/.githooks.yaml.

    Args:
        path: Explicit config file path (e.g. from --config).

    Returns:
        Path of the config file, or None if no candidate exists.

    Raises:
        ConfigError: If an explicitly requested file does not exist.
    """
    explicit = path or os.environ.get(ENV_CONFIG_PATH)
    if explicit:
        explicit_path = Path(explicit).expanduser()
        if not explicit_path.is_file():
            raise ConfigError(f"Configuration file not found: {explicit}")
        return explicit_path

    for candidate in (Path.cwd() / CONFIG_FILENAME, Path.home() / CONFIG_FILENAME):
        if candidate.is_file():
            return candidate
    return None


def _load_yaml_file(file_path: Path) -> dict[str, Any]:
    """Load and parse a YAML file.

    An empty file is treated as an empty configuration.

    Raises:
        ConfigError: If the file cannot be read or is not a YAML mapping.
    """
    try:
        with open(file_path, "r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse YAML file {file_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read configuration file {file_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Invalid configuration file {file_path}: expected YAML dictionary, "
            f"got {type(data).__name__}"
        )
    return data


def _pattern_from_file(file_path: Path) -> Optional[str]:
    """Return the raw pattern value from a config file, if set."""
    data = _load_yaml_file(file_path)

    section = data.get(CONFIG_SECTION)
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ConfigError(f"{CONFIG_SECTION} in {file_path} must be a dictionary")

    value = section.get(CONFIG_KEY_PATTERN)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(
            f"{CONFIG_SECTION}.{CONFIG_KEY_PATTERN} in {file_path} must be a string, "
            f"got {type(value).__name__}"
        )
    return value


def _compile(value: str, origin: str) -> Optional[MatchPattern]:
    if not value.strip():
        return None
    try:
        return MatchPattern.compile(value)
    except PatternError as e:
        raise PatternError(
            f"Invalid {CONFIG_KEY_PATTERN} from {origin}: {e}"
        ) from e


def load_config(
    path: Optional[str] = None,
    pattern: Optional[str] = None,
) -> BranchGuardConfig:
    """Resolve the branch name pattern for this run.

    Args:
        path: Explicit config file path; see find_config_file().
        pattern: Pattern given on the command line; overrides everything.

    Returns:
        BranchGuardConfig. Its pattern is None when enforcement should be
        skipped.

    Raises:
        ConfigError: If the config file is invalid or the pattern does not
            compile.
    """
    if pattern is not None:
        return BranchGuardConfig(pattern=_compile(pattern, "--pattern"), pattern_source="cli")

    config_path = find_config_file(path)

    # Layer 2: env var overrides the file (an empty value disables the check)
    env_pattern = os.environ.get(ENV_PATTERN)
    if env_pattern is not None:
        return BranchGuardConfig(
            pattern=_compile(env_pattern, f"${ENV_PATTERN}"),
            pattern_source="env",
            config_path=config_path,
        )

    if config_path is None:
        return BranchGuardConfig()

    raw = _pattern_from_file(config_path)
    if raw is None:
        return BranchGuardConfig(config_path=config_path)
    return BranchGuardConfig(
        pattern=_compile(raw, str(config_path)),
        pattern_source=str(config_path),
        config_path=config_path,
    )
