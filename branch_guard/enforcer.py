"""Branch name pattern enforcement.

Partitions the branches being pushed into matching and violating names.
Pure: no logging, no I/O, no exceptions for bad branch names. The hook
runner turns the returned result into log output and an exit status.
"""

from __future__ import annotations

from typing import Iterable, Optional

from branch_guard.models import EnforcementResult, EnforcementStatus, SkipReason
from branch_guard.pattern import MatchPattern


def enforce(
    branch_names: Iterable[str],
    pattern: Optional[MatchPattern],
) -> EnforcementResult:
    """Check every branch name against the configured pattern.

    Args:
        branch_names: Branches being pushed. Sequences are checked in the
            order given; sets are sorted first so results are reproducible.
        pattern: Compiled pattern, or None when none is configured.

    Returns:
        SKIP when no pattern is configured or no branch is pushed, PASS when
        every name matches, otherwise FAIL listing all violating names.
    """
    if pattern is None:
        return EnforcementResult.skip(SkipReason.NO_PATTERN)

    if isinstance(branch_names, (set, frozenset)):
        names = sorted(branch_names)
    else:
        names = list(branch_names)

    if not names:
        return EnforcementResult.skip(
            SkipReason.NO_BRANCHES, pattern=pattern.description
        )

    matching: list[str] = []
    violations: list[str] = []
    for name in names:
        if pattern.matches(name):
            matching.append(name)
        else:
            violations.append(name)

    status = EnforcementStatus.FAIL if violations else EnforcementStatus.PASS
    return EnforcementResult(
        status=status,
        violations=violations,
        matching=matching,
        pattern=pattern.description,
    )
