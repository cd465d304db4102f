"""Branch name pattern compilation.

Patterns are written in configuration the way they were in ``.githooksrc``
files, delimited by slashes with optional trailing flags::

    /^[a-zA-Z0-9]+$/
    /^(?:[^\\/]+\\/)?DEV-\\d+_/
    /^dev-\\d+_/i

An undelimited value is taken as the expression itself. Matching uses
``re.search``, so anchors must be written explicitly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from branch_guard.errors import PatternError

# Maximum allowed length for a configured branch name pattern.
MAX_REGEX_PATTERN_LENGTH = 1024

_DELIMITED_RE = re.compile(r"^/(.*)/([A-Za-z]*)$", re.DOTALL)
_UNESCAPED_SLASH_RE = re.compile(r"(?<!\\)/")

FLAG_MAP: dict[str, re.RegexFlag] = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
}


@dataclass(frozen=True)
class MatchPattern:
    """A compiled branch name predicate.

    Build instances with :meth:`compile`; the core only ever calls
    :meth:`matches` and reads :attr:`description`.
    """

    source: str
    flags: str = ""
    _compiled: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not self.source:
            raise PatternError("Branch name pattern cannot be empty")

        if len(self.source) > MAX_REGEX_PATTERN_LENGTH:
            raise PatternError(
                f"Regex pattern too long ({len(self.source)} chars, "
                f"max {MAX_REGEX_PATTERN_LENGTH}): '{self.source[:50]}...'"
            )

        re_flags = 0
        for flag in self.flags:
            if flag not in FLAG_MAP:
                raise PatternError(
                    f"Unsupported regex flag '{flag}' in '{self.description}'. "
                    f"Valid flags: {''.join(sorted(FLAG_MAP))}"
                )
            re_flags |= FLAG_MAP[flag]

        try:
            compiled = re.compile(self.source, re_flags)
        except re.error as e:
            raise PatternError(f"Invalid regex pattern '{self.source}': {e}") from e
        object.__setattr__(self, "_compiled", compiled)

    @classmethod
    def compile(cls, value: str) -> MatchPattern:
        """Compile a configured pattern value.

        Args:
            value: ``/regex/flags`` or a bare regular expression.

        Returns:
            The compiled MatchPattern.

        Raises:
            PatternError: If the value is not a usable regular expression.
        """
        value = value.strip()
        delimited = _DELIMITED_RE.match(value)
        if delimited is None:
            if value.startswith("/"):
                raise PatternError(
                    f"Pattern '{value}' is missing its closing '/' delimiter"
                )
            return cls(source=value)

        source, flags = delimited.group(1), delimited.group(2)
        if _UNESCAPED_SLASH_RE.search(source):
            raise PatternError(
                f"Pattern '{value}' has unescaped '/' delimiters inside it"
            )
        return cls(source=source, flags=flags)

    @property
    def description(self) -> str:
        """Human-readable rendering used in error messages."""
        return f"/{self.source}/{self.flags}"

    def matches(self, branch_name: str) -> bool:
        """Return True if *branch_name* satisfies the pattern."""
        return self._compiled.search(branch_name) is not None
