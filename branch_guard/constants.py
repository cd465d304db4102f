"""Constants shared by the hook runner, configuration loader and CLI."""

from __future__ import annotations

# ============================================================================
# Plugin Return Codes
# ============================================================================

PLUGIN_RETURN_PASSED: int = 0
"""Every pushed branch matches the pattern."""

PLUGIN_RETURN_SKIPPED: int = 1
"""Nothing to check: no pattern configured or no branch pushed."""

PLUGIN_RETURN_FAILED: int = 2
"""At least one pushed branch violates the pattern."""

# ============================================================================
# Configuration
# ============================================================================

CONFIG_SECTION: str = "ForceBranchNamePattern"
"""Config file section holding this hook's settings."""

CONFIG_KEY_PATTERN: str = "branch_name_pattern"
"""Key of the branch name pattern inside CONFIG_SECTION."""

CONFIG_FILENAME: str = ".githooks.yaml"
"""Config file looked up in the repository root and the home directory."""

ENV_CONFIG_PATH: str = "BRANCH_GUARD_CONFIG"
"""Environment variable naming an explicit config file."""

ENV_PATTERN: str = "BRANCH_NAME_PATTERN"
"""Environment variable overriding the configured pattern (empty disables)."""
