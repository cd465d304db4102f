"""Logging and formatting utilities for branch-guard.

Git relays everything a hook prints to the user running ``git push``, so
all messages go to stderr and stdout is left for command output.
"""

from __future__ import annotations

import os
import sys


# Color codes - respect TERM environment variable
def _should_use_colors() -> bool:
    """Check if colors should be used based on TERM environment variable."""
    term = os.environ.get("TERM", "")
    if not term or term == "dumb":
        return False
    return sys.stderr.isatty()


_USE_COLORS = _should_use_colors()

# ANSI color codes
BOLD = "\033[1m" if _USE_COLORS else ""
RESET = "\033[0m" if _USE_COLORS else ""
RED = "\033[91m" if _USE_COLORS else ""
YELLOW = "\033[93m" if _USE_COLORS else ""
GREEN = "\033[92m" if _USE_COLORS else ""


def log_info(msg: str) -> None:
    """Log an info message to stderr.

    Args:
        msg: The message to log.
    """
    print(msg, file=sys.stderr)


def log_debug(msg: str) -> None:
    """Log a debug message (only if BRANCH_GUARD_DEBUG=1).

    Args:
        msg: The message to log.
    """
    if os.environ.get("BRANCH_GUARD_DEBUG") == "1":
        print(f"DEBUG: {msg}", file=sys.stderr)


def log_warn(msg: str) -> None:
    """Log a warning message to stderr.

    Args:
        msg: The message to log.
    """
    print(f"{YELLOW}Warning:{RESET} {msg}", file=sys.stderr)


def log_error(msg: str) -> None:
    """Log an error message to stderr.

    Args:
        msg: The message to log.
    """
    print(f"{RED}Error:{RESET} {msg}", file=sys.stderr)


# Formatting helper functions (pure functions, not logging)


def format_kv(key: str, value: str) -> str:
    """Format a key-value pair with 2 spaces indent.

    Args:
        key: The key name.
        value: The value.

    Returns:
        Formatted string "  {key}: {value}".
    """
    return f"  {key}: {value}"
