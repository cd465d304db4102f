"""Pre-push hook runner.

Glue between git and the pure parser/enforcer: logs each decision, prints
the consolidated error for a failed push, and maps the outcome to a plugin
return code and a process exit status.
"""

from __future__ import annotations

from typing import Iterable, Optional

from branch_guard.constants import (
    CONFIG_KEY_PATTERN,
    CONFIG_SECTION,
    PLUGIN_RETURN_FAILED,
    PLUGIN_RETURN_PASSED,
    PLUGIN_RETURN_SKIPPED,
)
from branch_guard.enforcer import enforce
from branch_guard.models import EnforcementResult, EnforcementStatus, SkipReason
from branch_guard.pattern import MatchPattern
from branch_guard.refs import extract_branch_names, parse_push_lines
from branch_guard.utils import log_debug, log_error

_RETURN_CODES = {
    EnforcementStatus.PASS: PLUGIN_RETURN_PASSED,
    EnforcementStatus.SKIP: PLUGIN_RETURN_SKIPPED,
    EnforcementStatus.FAIL: PLUGIN_RETURN_FAILED,
}


def format_violation_message(result: EnforcementResult) -> str:
    """Build the single error message listing every violating branch."""
    single = len(result.violations) == 1
    return (
        f"The following {'branch' if single else 'branches'} "
        f"{'does' if single else 'do'} not match the pattern enforced by the "
        f"git hooks configuration file: {', '.join(result.violations)}.\n"
        f"Branches must match the following pattern: {result.pattern}."
    )


def exit_code_for(return_code: int) -> int:
    """Map a plugin return code to the hook's process exit status."""
    return 1 if return_code == PLUGIN_RETURN_FAILED else 0


def check_branches(
    branch_names: Iterable[str],
    pattern: Optional[MatchPattern],
) -> int:
    """Enforce *pattern* on *branch_names*, log the outcome, return a plugin code."""
    result = enforce(branch_names, pattern)

    if result.reason is SkipReason.NO_PATTERN:
        log_debug(
            f"No '{CONFIG_KEY_PATTERN}' specified in the [{CONFIG_SECTION}] "
            f"section of the config, skipping."
        )
    elif result.reason is SkipReason.NO_BRANCHES:
        log_debug("No branches are being pushed, skipping.")

    for name in result.matching:
        log_debug(f"Branch {name} matches the required pattern.")
    for name in result.violations:
        log_debug(f"Branch {name} does not match the required pattern.")

    if result.failed:
        log_error(format_violation_message(result))

    return _RETURN_CODES[result.status]


def run_pre_push(lines: Iterable[str], pattern: Optional[MatchPattern]) -> int:
    """Code to execute as part of the pre-push hook.

    Args:
        lines: The content provided by git on stdin, one line per ref being
            pushed.
        pattern: Compiled branch name pattern, or None if not configured.

    Returns:
        PLUGIN_RETURN_PASSED, PLUGIN_RETURN_SKIPPED or PLUGIN_RETURN_FAILED.
    """
    lines = list(lines)
    log_debug("Entering pre-push branch name check.")

    for push_line in parse_push_lines(lines):
        if push_line.is_deletion():
            action = "delete"
        elif push_line.is_creation():
            action = "create"
        else:
            action = "update"
        log_debug(f"Parse STDIN line: {push_line.local_ref} -> {push_line.remote_ref} ({action})")

    branch_names = extract_branch_names(lines)
    if branch_names:
        log_debug(
            f"Found {len(branch_names)} branch(es) to push: {', '.join(branch_names)}"
        )

    return check_branches(branch_names, pattern)

