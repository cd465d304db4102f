"""Exception hierarchy for branch-guard.

Validation failures are not exceptions: a branch that does not match the
pattern produces a FAIL result. Exceptions are reserved for problems that
prevent the check from running at all, such as a broken configuration file.

This module is a base-layer module: it must NOT import from any
other ``branch_guard`` submodule.
"""

from __future__ import annotations


class BranchGuardError(Exception):
    """Base exception for all branch-guard errors."""


class ConfigError(BranchGuardError):
    """Unreadable or invalid configuration (bad YAML, wrong types, etc.)."""


class PatternError(ConfigError):
    """A configured branch name pattern that cannot be compiled."""
