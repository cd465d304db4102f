"""Pre-push command - the entry point git runs from .git/hooks/pre-push.

Install it with a hook script such as::

    #!/bin/sh
    exec branch-guard pre-push "$@"
"""

from __future__ import annotations

import sys

import click

from branch_guard.commands._helpers import config_option, load_config_or_exit, pattern_option
from branch_guard.hook import exit_code_for, run_pre_push
from branch_guard.refs import decode_push_input
from branch_guard.utils import log_debug


@click.command("pre-push")
@click.argument("remote_name", required=False, default=None)
@click.argument("remote_url", required=False, default=None)
@config_option
@pattern_option
def pre_push(
    remote_name: str | None,
    remote_url: str | None,
    config_path: str | None,
    pattern: str | None,
) -> None:
    """Check the branches git is about to push (reads refs from stdin)."""
    config = load_config_or_exit(config_path, pattern)

    if remote_name:
        log_debug(f"Pushing to remote '{remote_name}' ({remote_url or 'no url'})")

    # Ref names need not be UTF-8, so decode the raw bytes ourselves
    lines = decode_push_input(click.get_binary_stream("stdin").read())
    exit_code = exit_code_for(run_pre_push(lines, config.pattern))
    if exit_code:
        sys.exit(exit_code)
