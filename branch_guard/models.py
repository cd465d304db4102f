from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class EnforcementStatus(str, Enum):
    """Outcome of checking a push against the branch name pattern."""

    PASS = "pass"
    SKIP = "skip"
    FAIL = "fail"


class SkipReason(str, Enum):
    """Why enforcement did not run."""

    NO_PATTERN = "no_pattern"
    NO_BRANCHES = "no_branches"


class EnforcementResult(BaseModel):
    """Pydantic model for the result of one enforcement run.

    Constructed once per hook invocation and consumed by the hook runner to
    decide the exit status. A FAIL carries every violating branch name.
    """

    status: EnforcementStatus
    """PASS, SKIP or FAIL."""

    violations: list[str] = Field(default_factory=list)
    """Branch names that do not match the pattern, in the order checked."""

    matching: list[str] = Field(default_factory=list)
    """Branch names that match the pattern, in the order checked."""

    pattern: str = ""
    """Human-readable pattern, e.g. ``/^[a-zA-Z0-9]+$/``."""

    reason: SkipReason | None = None
    """Set only for SKIP results."""

    @classmethod
    def skip(cls, reason: SkipReason, pattern: str = "") -> EnforcementResult:
        return cls(status=EnforcementStatus.SKIP, reason=reason, pattern=pattern)

    @property
    def passed(self) -> bool:
        return self.status is EnforcementStatus.PASS

    @property
    def skipped(self) -> bool:
        return self.status is EnforcementStatus.SKIP

    @property
    def failed(self) -> bool:
        return self.status is EnforcementStatus.FAIL
