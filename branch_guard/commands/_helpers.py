"""Shared helpers for branch-guard commands."""

from __future__ import annotations

import sys
from typing import Optional

import click

from branch_guard.config import BranchGuardConfig, load_config
from branch_guard.errors import ConfigError
from branch_guard.utils import log_debug, log_error

config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file to read (default: $BRANCH_GUARD_CONFIG, ./.githooks.yaml, ~/.githooks.yaml).",
)

pattern_option = click.option(
    "--pattern",
    default=None,
    help="Branch name pattern, e.g. '/^[a-zA-Z0-9]+$/'. Overrides the config file.",
)


def load_config_or_exit(config_path: Optional[str], pattern: Optional[str]) -> BranchGuardConfig:
    """Load configuration, exiting 1 with an error message if it is invalid."""
    try:
        config = load_config(path=config_path, pattern=pattern)
    except ConfigError as exc:
        log_error(str(exc))
        sys.exit(1)

    if config.pattern is not None:
        log_debug(f"Using pattern {config.pattern.description} from {config.pattern_source}")
    return config
