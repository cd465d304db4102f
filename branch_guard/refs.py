"""
Git pre-push stdin parser

Parses the lines git writes to a pre-push hook's standard input and extracts
the local branches being pushed.

Git Hook Documentation:
https://git-scm.com/docs/githooks#_pre_push

Each ref being pushed is described by one line:
<local ref> SP <local sha1> SP <remote ref> SP <remote sha1> LF

Deletions are sent as "(delete)" with a zero local sha; creations carry a
zero remote sha. Only <local ref> is needed to validate branch names.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional

# Zero SHA for detecting branch creation/deletion
ZERO_SHA = "0" * 40

BRANCH_REF_PREFIX = "refs/heads/"

# Leading refs/heads/ followed by the branch name (up to the first whitespace)
_BRANCH_REF_RE = re.compile(r"^refs/heads/(\S+)")


@dataclass(frozen=True)
class PushLine:
    """Represents a single ref update from a git pre-push hook.

    Attributes:
        local_ref: Local ref being pushed (e.g., 'refs/heads/main')
        local_sha: SHA being pushed (ZERO_SHA for deletions)
        remote_ref: Ref being updated on the remote
        remote_sha: SHA of the ref on the remote (ZERO_SHA for new refs)
    """

    local_ref: str
    local_sha: str
    remote_ref: str
    remote_sha: str

    @property
    def branch_name(self) -> Optional[str]:
        """Branch name of the local ref, or None for tags and other refs."""
        match = _BRANCH_REF_RE.match(self.local_ref)
        return match.group(1) if match else None

    def is_creation(self) -> bool:
        """Check if this push creates the ref on the remote."""
        return self.remote_sha == ZERO_SHA and self.local_sha != ZERO_SHA

    def is_deletion(self) -> bool:
        """Check if this push deletes the ref on the remote."""
        return self.local_sha == ZERO_SHA


def _strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


def decode_push_input(data: bytes) -> List[str]:
    """
    Split raw pre-push stdin into text lines.

    Git allows ref names that are not valid UTF-8. Undecodable bytes become
    backslash escapes (b"caf\\xe9" -> "caf\\\\xe9") so they still parse and
    print safely in error messages.

    Args:
        data: Bytes read from the hook's stdin

    Returns:
        One string per LF-terminated line (a trailing empty string when
        the input ends with LF, which the parser skips)
    """
    return data.decode("utf-8", errors="backslashreplace").split("\n")


def parse_push_line(line: str) -> Optional[PushLine]:
    """
    Parse one pre-push stdin line into its four fields.

    Args:
        line: A line as read from the hook's stdin (terminator optional)

    Returns:
        PushLine, or None if the line does not have exactly four fields
    """
    parts = _strip_terminator(line).split()
    if len(parts) != 4:
        return None
    return PushLine(*parts)


def parse_push_lines(lines: Iterable[str]) -> Iterator[PushLine]:
    """Yield a PushLine for every well-formed line, skipping the rest."""
    for line in lines:
        push_line = parse_push_line(line)
        if push_line is not None:
            yield push_line


def extract_branch_names(lines: Iterable[str]) -> List[str]:
    """
    Retrieve the distinct branch names being pushed.

    Only the local ref of each line is inspected. Lines that do not start
    with refs/heads/ (tag pushes, blank or malformed lines) are skipped
    without error, so this never raises.

    Args:
        lines: Lines supplied by git on the pre-push hook's stdin

    Returns:
        Sorted list of unique branch names (empty if no branch is pushed)
    """
    branches = set()
    for line in lines:
        match = _BRANCH_REF_RE.match(_strip_terminator(line))
        if match is None:
            continue
        branches.add(match.group(1))
    return sorted(branches)
